"""
Concrete error kinds raised inside the core and the adapters.

All of them are :class:`ProviderError` subclasses so adapter boundaries can
convert any of them into a ``CompletionError`` uniformly. ``InitError`` is the
only one that reaches callers as an exception (from ``new``).
"""
from __future__ import annotations

from typing import Optional

from ..models_parts.completion_error import CompletionError
from .error_code import ErrorCode
from .provider_error import ProviderError


class InitError(ProviderError):
    """Bad or missing construction options; detected without network I/O."""

    def __init__(self, message: str, *, provider: str = "unknown", code: ErrorCode = ErrorCode.VALIDATION) -> None:
        super().__init__(code=code, message=message, provider=provider, error_type="init_error")


class CapabilityError(ProviderError):
    """An optional capability is not implemented by the resolved provider."""

    def __init__(self, capability: str, *, provider: str) -> None:
        self.capability = capability
        super().__init__(
            code=ErrorCode.UNSUPPORTED,
            message=f"{capability.capitalize()} is not supported by the {provider} provider.",
            provider=provider,
        )

    def to_completion_error(self) -> CompletionError:
        # Message only: callers match on the literal text.
        return CompletionError.of(self.message)


class MissingModelError(ProviderError):
    """Neither the call options nor the client supplied a model."""

    def __init__(self, *, provider: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_MODEL,
            message="No model specified. Pass a model option or configure a default model on the client.",
            provider=provider,
            error_type="invalid_request_error",
        )


class BackendError(ProviderError):
    """The backend transport returned a failure or an unusable payload."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        code: ErrorCode = ErrorCode.UNKNOWN,
        error_type: Optional[str] = None,
        backend_code: Optional[str] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            error_type=error_type,
            backend_code=backend_code,
            raw=raw,
        )


class SinkFault(ProviderError):
    """A caller-supplied delta sink raised while handling a delta."""

    def __init__(self, exc: BaseException, *, provider: str, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.SINK_FAULT,
            message=f"stream sink raised {exc.__class__.__name__}: {exc}",
            provider=provider,
            model=model,
            error_type="sink_fault",
            raw=exc,
        )


class UnsupportedRoleError(ProviderError):
    """A message role outside ``system``/``user``/``assistant`` was found."""

    def __init__(self, role: object, *, provider: str = "unknown") -> None:
        self.role = role
        super().__init__(
            code=ErrorCode.VALIDATION,
            message=f"Unsupported message role: {role!r}",
            provider=provider,
            error_type="invalid_request_error",
        )


class InvalidMessageError(ProviderError):
    """A conversation item is neither a ``Message`` nor a role/content mapping."""

    def __init__(self, item: object, *, provider: str = "unknown") -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message=f"expected Message or mapping, got {type(item).__name__}",
            provider=provider,
            error_type="invalid_request_error",
        )


__all__ = [
    "InitError",
    "CapabilityError",
    "MissingModelError",
    "BackendError",
    "SinkFault",
    "UnsupportedRoleError",
    "InvalidMessageError",
]
