"""Provider factory.

Purpose
-------
Resolve a provider name to its adapter class and construct it from merged
configuration. Adapters are imported lazily with ``importlib`` so importing
``alchemind`` does not pull in every backend SDK.

External dependencies
---------------------
- Standard library ``importlib`` for lazy imports.
- Pydantic (``AdapterParams``) to validate construction options.

Failure modes
-------------
Every failure is an :class:`InitError` raised synchronously and without
network I/O: unknown provider, import failure, invalid options, or an adapter
constructor that rejects its options (e.g. missing API key).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from pydantic import ValidationError

from ..config import get_provider_config
from .dto.adapter_params import AdapterParams
from .errors import ErrorCode, InitError, ProviderError


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g. ``"openai"``)."""

    # Canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "alchemind.openai.client", "class": "OpenAIProvider"},
        "deepseek": {"module": "alchemind.deepseek.client", "class": "DeepseekProvider"},
        "xai": {"module": "alchemind.xai.client", "class": "XAIProvider"},
        "mock": {"module": "alchemind.mock.client", "class": "MockProvider"},
    }

    @classmethod
    def create(cls, provider: Union[str, Type[Any]], options: Optional[Mapping[str, Any]] = None) -> Any:
        """Build an adapter for ``provider`` from merged configuration.

        Parameters
        ----------
        provider:
            Canonical provider name, or an adapter class taking a single
            :class:`AdapterParams` argument.
        options:
            Construction options; they win over file and environment config.

        Raises
        ------
        InitError
            Unknown provider, bad options or an adapter that refuses them.
        """
        if isinstance(provider, type):
            # Config and env lookups use the same name the client is tagged with.
            name = str(getattr(provider, "provider_key", "") or "").lower().strip()
            if not name:
                raise InitError(
                    f"Adapter class '{provider.__name__}' must declare a provider_key",
                    provider="unknown",
                )
            klass = provider
        else:
            name = (provider or "").lower().strip()
            klass = cls._resolve(name)
        params = cls.params_for(name, options)
        try:
            return klass(params)
        except ProviderError as exc:
            if isinstance(exc, InitError):
                raise
            raise InitError(exc.message, provider=name, code=exc.code) from exc
        except (TypeError, ValueError) as exc:
            raise InitError(f"Invalid options for '{name}' adapter: {exc}", provider=name) from exc

    @staticmethod
    def params_for(name: str, options: Optional[Mapping[str, Any]] = None) -> AdapterParams:
        """Merge configuration for ``name`` and validate it as ``AdapterParams``."""
        cfg = get_provider_config(name, options)
        cfg["provider"] = name
        try:
            return AdapterParams(**cfg)
        except ValidationError as exc:
            raise InitError(f"Invalid options for '{name}': {exc}", provider=name) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return registered provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def _resolve(cls, name: str) -> Type[Any]:
        entry = cls._PROVIDERS.get(name)
        if not entry:
            raise InitError(
                f"Unknown provider '{name}'. Supported: {', '.join(cls.supported())}",
                provider=name or "unknown",
                code=ErrorCode.NOT_FOUND,
            )
        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise InitError(
                f"Failed to import module '{module_path}' for provider '{name}': {exc}",
                provider=name,
                code=ErrorCode.UNAVAILABLE,
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise InitError(
                f"Adapter class '{class_name}' not found in '{module_path}'",
                provider=name,
                code=ErrorCode.NOT_FOUND,
            ) from exc


__all__ = ["ProviderFactory"]
