"""
Rendering Layer.

Turns collected problems into markdown pages and a JSON summary.
"""

from .markdown import MarkdownRenderer
from .summary import build_summary, write_summary

__all__ = ["MarkdownRenderer", "build_summary", "write_summary"]
