"""alchemind.config.defaults
=========================

Small, stable default values used across the package. They can be overridden
through environment variables, the external config file or construction
options, but give sensible fallbacks for local development and tests.

Only plain constants live here; importing this module has no side effects.
"""

from __future__ import annotations

# ---- CLI defaults ----
# Provider used by the CLI when ``--provider`` is omitted.
CLI_DEFAULT_PROVIDER = "openai"

# ---- Provider defaults ----
# OpenAI (SDK uses api.openai.com when base_url is omitted).
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
OPENAI_DEFAULT_SPEECH_MODEL = "tts-1"
OPENAI_DEFAULT_VOICE = "alloy"
OPENAI_DEFAULT_SPEECH_FORMAT = "mp3"

# Deepseek defaults
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"

# xAI (Grok) defaults
XAI_DEFAULT_MODEL = "grok-4"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1"

# ---- Generation bounds ----
# Providers clamp temperature into this closed range.
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0


__all__ = [
    "CLI_DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_TRANSCRIPTION_MODEL",
    "OPENAI_DEFAULT_SPEECH_MODEL",
    "OPENAI_DEFAULT_VOICE",
    "OPENAI_DEFAULT_SPEECH_FORMAT",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "XAI_DEFAULT_MODEL",
    "XAI_DEFAULT_BASE_URL",
    "TEMPERATURE_MIN",
    "TEMPERATURE_MAX",
]
