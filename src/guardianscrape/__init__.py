"""Guardian Scrape package exposing configuration, API, and service helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .config import API_KEY_ENV, KEYFILE_ENV, GuardianSettings, KeyFile

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


def load_local_env(path: Path = ENV_FILE, names: Iterable[str] = (API_KEY_ENV, KEYFILE_ENV)) -> None:
    """Copy the Guardian key settings from a ``.env`` file into ``os.environ``.

    Only ``names`` are read; variables already set in the environment win.
    """

    if not path.exists():
        return

    wanted = set(names)
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        name, sep, value = raw_line.strip().partition("=")
        name = name.strip()
        if not sep or name not in wanted or name in os.environ:
            continue
        os.environ[name] = value.strip().strip("'\"")


load_local_env()

__all__ = ["GuardianSettings", "KeyFile", "load_local_env"]
