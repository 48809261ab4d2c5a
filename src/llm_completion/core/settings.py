from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    text_preview_chars: int


def load_dotenv_if_present(env_file: Optional[Path] = None) -> Optional[Path]:
    """Load `env_file`, or else a `.env` found from the working directory upwards.

    Variables already set in the environment win. Returns the file loaded, or
    None when no `.env` was found. An explicit `env_file` must exist.
    """

    if env_file is not None:
        p = env_file.resolve()
        if not p.is_file():
            raise ValueError(f"env file not found: {env_file}")
    else:
        found = find_dotenv(filename=".env", usecwd=True)
        if not found:
            return None
        p = Path(found).resolve()
    load_dotenv(dotenv_path=str(p), override=False)
    return p


def load_settings() -> Settings:
    """Read settings from the environment.

    - LLM_COMPLETION_TEXT_PREVIEW_CHARS (default 60)
    """

    raw = os.environ.get("LLM_COMPLETION_TEXT_PREVIEW_CHARS", "60")
    try:
        text_preview_chars = int(raw)
    except ValueError:
        raise ValueError(f"LLM_COMPLETION_TEXT_PREVIEW_CHARS must be an integer, got {raw!r}") from None
    if text_preview_chars < 1:
        raise ValueError("LLM_COMPLETION_TEXT_PREVIEW_CHARS must be >= 1")
    return Settings(text_preview_chars=text_preview_chars)
