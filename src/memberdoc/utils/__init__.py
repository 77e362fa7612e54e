"""Utility modules for memberdoc.

Provides:
- text: html_escape, escape_attr, first_sentence, decapitalize
- logger: get_logger for logging
"""

from memberdoc.utils.logger import get_logger
from memberdoc.utils.text import decapitalize, escape_attr, first_sentence, html_escape

__all__ = [
    "decapitalize",
    "escape_attr",
    "first_sentence",
    "get_logger",
    "html_escape",
]
