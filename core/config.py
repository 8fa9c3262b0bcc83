# =============================================================================
# core/config.py  -  Runtime Settings & Decoding Constants
# =============================================================================
#
# SETTINGS TOGGLES (environment variables, optionally from a .env file):
#   DOCIT_MODEL          Model for the assistant.  Plain names ("gemini-2.0-flash")
#                        go straight to Gemini; provider-prefixed names
#                        ("openrouter/openai/gpt-4o") go through LiteLlm.
#   DOCIT_TOOL_REVISION  Which data-fetch tools the model may call:
#                          none   -> no tools, prompt only
#                          items  -> items tool only
#                          all    -> items, lists and folders (default)
#   DOCIT_STORE          "firestore" (default) or "memory" for offline runs.
#   DOCIT_LOG_LEVEL      Logging level name (default INFO).
#
# DECODING CONSTANTS:
#   The sampling parameters are unusually aggressive (temperature 1.2 with
#   top-p 0.4).  They are kept exactly as the deployed assistant uses them.
# =============================================================================

import os
from dataclasses import dataclass, field

DEFAULT_MODEL = "gemini-2.0-flash"

TOOL_REVISIONS = ("none", "items", "all")
STORE_BACKENDS = ("firestore", "memory")


@dataclass(frozen=True)
class DecodingConfig:
    """Fixed generation parameters passed to the model on every call."""

    max_output_tokens: int = 400
    top_p: float = 0.4
    top_k: int = 50
    temperature: float = 1.2
    stop_sequences: tuple[str, ...] = ("<end>", "<fin>")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    model: str = DEFAULT_MODEL
    tool_revision: str = "all"
    store_backend: str = "firestore"
    log_level: str = "INFO"
    decoding: DecodingConfig = field(default_factory=DecodingConfig)

    def __post_init__(self):
        if self.tool_revision not in TOOL_REVISIONS:
            raise ValueError(
                f"Unknown tool revision {self.tool_revision!r}; expected one of {TOOL_REVISIONS}"
            )
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"Unknown store backend {self.store_backend!r}; expected one of {STORE_BACKENDS}"
            )

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from the environment (defaults for anything unset)."""
        env = os.environ if environ is None else environ
        return cls(
            model=env.get("DOCIT_MODEL", DEFAULT_MODEL),
            tool_revision=env.get("DOCIT_TOOL_REVISION", "all").strip().lower(),
            store_backend=env.get("DOCIT_STORE", "firestore").strip().lower(),
            log_level=env.get("DOCIT_LOG_LEVEL", "INFO").upper(),
        )
