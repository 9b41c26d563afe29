"""Deepseek provider package."""

from .client import DeepseekProvider

__all__ = ["DeepseekProvider"]
