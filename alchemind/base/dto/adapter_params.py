"""Typed parameter object for provider adapter construction.

Purpose
-------
``new(provider, **options)`` merges construction options with the config
layer and validates the result into :class:`AdapterParams` before handing it
to the adapter constructor, so adapters receive one stable, typed contract.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump``.

Failure modes
-------------
- ``pydantic.ValidationError`` for wrongly typed values. The factory turns it
  into ``InitError`` without any network I/O.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider construction options.

    Attributes
    ----------
    provider:
        Canonical provider name, filled in by the factory.
    model:
        Default model for calls that do not name one.
    api_key:
        Credential. Required by hosted backends; checked by the adapter.
    base_url:
        Override for the API base URL (proxies, compatible gateways).
    organization:
        Optional organization/tenant hint.
    temperature:
        Default sampling temperature merged below call options.
    max_tokens:
        Default generation cap merged below call options.
    transcription_model / speech_model / voice:
        Defaults for the audio capabilities.

    Unrecognized options are kept (see ``extra_options``) for adapter-specific use.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    provider: Optional[str] = None
    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    organization: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = Field(default=None, ge=0)
    transcription_model: Optional[str] = None
    speech_model: Optional[str] = None
    voice: Optional[str] = None

    def extra_options(self) -> Dict[str, Any]:
        """Return the unrecognized options, e.g. mock response settings."""
        return dict(self.model_extra or {})

    def call_defaults(self) -> Dict[str, Any]:
        """Client-level completion defaults (``temperature``, ``max_tokens``)."""
        return {
            k: v
            for k, v in (("temperature", self.temperature), ("max_tokens", self.max_tokens))
            if v is not None
        }


__all__ = ["AdapterParams"]
