"""
External collaborators of the viewer (AI text generation).
"""

from .biography import build_biography_prompt, generate_biography

__all__ = [
    "build_biography_prompt",
    "generate_biography",
]
