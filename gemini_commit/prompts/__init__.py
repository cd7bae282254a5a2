"""Prompt Building Package"""

from gemini_commit.prompts.builder import PromptBuilder, PromptConfig, PROMPT_TEMPLATE

__all__ = ["PromptBuilder", "PromptConfig", "PROMPT_TEMPLATE"]
