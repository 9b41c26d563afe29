"""
OpenAI provider package.

Exports:
- OpenAIProvider: reference adapter with chat, streaming and audio support
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
