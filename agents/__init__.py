"""Agents module for cricket podcast content generation."""

from .content_generator import ContentGenerationClient

__all__ = ["ContentGenerationClient"]
