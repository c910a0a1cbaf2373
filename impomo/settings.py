"""Application preferences persisted as a JSON document."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

DEFAULT_PATH = "AppSettings.json"
DEFAULT_SOUND_STATUS = True
DEFAULT_THEME = "Dark"
DEFAULT_SOUND = "Soft Alarm"

PathLike = Union[str, Path]


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _as_str(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


@dataclass
class AppSettings:
    """Sound and theme preferences shared by the whole application."""

    sound_status: bool = DEFAULT_SOUND_STATUS
    theme: str = DEFAULT_THEME
    sound: str = DEFAULT_SOUND

    def save(self, path: PathLike = DEFAULT_PATH) -> None:
        """Write the settings to ``path``; a file that cannot be written is skipped."""
        document = {
            "soundStatus": self.sound_status,
            "theme": self.theme,
            "sound": self.sound,
        }
        try:
            Path(path).write_text(json.dumps(document, indent=4) + "\n", encoding="utf-8")
        except OSError:
            return

    def load(self, path: PathLike = DEFAULT_PATH) -> None:
        """Read settings from ``path``.

        A missing or unreadable file restores the defaults; a file that does
        not hold a JSON object leaves the current values untouched.
        """
        try:
            raw = Path(path).read_bytes()
        except OSError:
            self.sound_status = DEFAULT_SOUND_STATUS
            self.theme = DEFAULT_THEME
            self.sound = DEFAULT_SOUND
            return

        try:
            document = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            return
        if not isinstance(document, dict):
            return

        self.sound_status = _as_bool(document.get("soundStatus"), DEFAULT_SOUND_STATUS)
        self.theme = _as_str(document.get("theme"), DEFAULT_THEME)
        self.sound = _as_str(document.get("sound"), DEFAULT_SOUND)