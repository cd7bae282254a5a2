"""Commit message generation: prompt in, model text out."""

from gemini_commit import DEFAULT_STYLE
from gemini_commit.llm import LLMClient
from gemini_commit.prompts import PromptBuilder, PromptConfig


def build_prompt(description: str, style: str = DEFAULT_STYLE) -> str:
    return PromptBuilder().build(PromptConfig(description=description, style=style))


async def generate_commit_message(client: LLMClient, description: str, style: str = DEFAULT_STYLE) -> str:
    """Build the prompt and return whatever the client generates, untouched."""
    return await client.generate(build_prompt(description, style))
