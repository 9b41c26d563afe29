"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `alchemind.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .taxonomy import (
    BackendError,
    CapabilityError,
    InitError,
    MissingModelError,
    SinkFault,
    InvalidMessageError,
    UnsupportedRoleError,
)
from .classification import (
    backend_error_from,
    classify_exception,
    extract_backend_error,
    to_completion_error,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "BackendError",
    "CapabilityError",
    "InitError",
    "MissingModelError",
    "SinkFault",
    "UnsupportedRoleError",
    "InvalidMessageError",
    "backend_error_from",
    "classify_exception",
    "extract_backend_error",
    "to_completion_error",
]
