"""Prompt Builder - Construct the LLM prompt for a commit message."""

from dataclasses import dataclass

from gemini_commit import DEFAULT_STYLE

PROMPT_TEMPLATE = (
    "You are an expert programmer writing a git commit message.\n"
    "Your task is to generate a single, git commit message in the '{style}' style "
    "for the following change description.\n\n"
    "VERY IMPORTANT: Your entire response must be only the commit message itself. "
    "Do not include any surrounding text, explanations, apologies, or markdown formatting like ```.\n\n"
    "Change Description: \"{description}\""
)


@dataclass
class PromptConfig:
    """What the user asked for."""
    description: str
    style: str = DEFAULT_STYLE


class PromptBuilder:
    """Fills the instruction template. Inputs are substituted verbatim."""

    def build(self, config: PromptConfig) -> str:
        return PROMPT_TEMPLATE.format(style=config.style, description=config.description)
