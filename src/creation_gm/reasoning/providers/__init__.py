"""Chat providers: Groq (OpenAI-compatible) and Google Gemini."""

from .base import TextProvider
from .json_extract import extract_json, find_json_candidate, strip_code_fences

__all__ = [
    "TextProvider",
    "extract_json",
    "find_json_candidate",
    "strip_code_fences",
]
