"""Utility modules."""

from .markdown_parser import parse_markdown, split_into_sections

__all__ = ["parse_markdown", "split_into_sections"]
