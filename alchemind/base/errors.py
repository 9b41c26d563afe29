"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``alchemind.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.taxonomy import (
    BackendError,
    CapabilityError,
    InitError,
    MissingModelError,
    SinkFault,
    InvalidMessageError,
    UnsupportedRoleError,
)
from .errors_parts.classification import (
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
