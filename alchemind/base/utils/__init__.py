"""Pure helpers shared by adapters (message translation)."""
