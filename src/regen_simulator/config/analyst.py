"""Narrative-analyst configuration — the optional text-generation service."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class AnalystConfig(BaseModel):
    """Connection settings for the external analysis service.

    Resolved once at startup (``from_env``) and handed to the API and
    dashboard.  ``is_available`` is the capability flag they branch on.
    """

    api_key: str | None = Field(default=None, description="Gemini API key. None = analysis disabled")
    model: str = Field(default="gemini-3-flash-preview", description="Generative model name")
    endpoint: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the generative language REST API",
    )
    timeout_s: float = Field(default=30.0, gt=0, description="HTTP timeout per request (s)")
    max_words: int = Field(default=200, ge=20, description="Word limit requested in the prompt")

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "AnalystConfig":
        """Read ``GEMINI_API_KEY`` (or ``API_KEY``) from the environment."""
        key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY") or None
        model = os.environ.get("GEMINI_MODEL")
        if model:
            return cls(api_key=key, model=model)
        return cls(api_key=key)
