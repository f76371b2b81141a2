"""Configuration models and helpers for the Guardian search tools."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

__all__ = [
    "API_KEY_ENV",
    "DEFAULT_KEY_PATH",
    "GuardianSettings",
    "KEYFILE_ENV",
    "KeyFile",
    "resolve_key_path",
]

DEFAULT_KEY_PATH = Path("keys.private.json")
API_KEY_ENV = "GUARDIAN_API_KEY"
KEYFILE_ENV = "GUARDIAN_KEYFILE"


class KeyFile(BaseModel):
    """Contents of the local credentials file."""

    key: str = Field(..., min_length=1, description="Guardian Open Platform API key")

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "KeyFile":
        """Load the API key from a JSON file shaped like ``{"key": "..."}``."""

        key_path = Path(path) if path else resolve_key_path()
        try:
            data = json.loads(key_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Key file not found: {key_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in key file: {key_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Key file is invalid: {key_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Write the key back to disk as JSON."""

        key_path = Path(path) if path else resolve_key_path()
        key_path.parent.mkdir(parents=True, exist_ok=True)
        key_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")


def resolve_key_path(path: Path | str | None = None) -> Path:
    """Return the key file location, honouring ``GUARDIAN_KEYFILE``."""

    if path:
        return Path(path)
    env_path = os.environ.get(KEYFILE_ENV, "").strip()
    if env_path:
        return Path(env_path)
    return DEFAULT_KEY_PATH


class GuardianSettings(BaseModel):
    """Runtime settings handed to :class:`~guardianscrape.services.client.GuardianClient`."""

    api_key: str = Field(..., min_length=1)
    timeout: float | None = Field(
        default=None,
        description="Optional request timeout in seconds. ``None`` waits indefinitely.",
    )

    @classmethod
    def load(cls, keyfile: Path | str | None = None, *, timeout: float | None = None) -> "GuardianSettings":
        """Resolve the API key from the environment first, then the key file."""

        env_key = os.environ.get(API_KEY_ENV, "").strip()
        if env_key:
            return cls(api_key=env_key, timeout=timeout)

        return cls(api_key=KeyFile.from_file(resolve_key_path(keyfile)).key, timeout=timeout)
