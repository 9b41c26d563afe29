"""LLMProvider Protocol (single-class module).

Defines the required completion contract every provider adapter satisfies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import CompletionRequest, CompletionResult


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations map ``CompletionRequest`` fields to their backend
    parameters, normalize responses to ``CompletionResponse`` and never leak
    SDK objects upstream.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"``."""
        ...

    def complete(self, request: CompletionRequest) -> CompletionResult:
        """Execute one blocking completion.

        Failure handling: do not raise. Backend and internal failures are
        returned as ``CompletionError``.
        """
        ...
