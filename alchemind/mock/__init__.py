"""Mock provider package: deterministic, offline responses from fixtures."""

from .client import MockProvider, load_fixture_catalog

__all__ = ["MockProvider", "load_fixture_catalog"]
