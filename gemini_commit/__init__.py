"""
Gemini Commit

Commit message generation from a short change description, using Google Gemini.
"""

__version__ = "1.0.0"

DEFAULT_STYLE = "conventional commit"
