"""Sound alerts played when a phase or task ends."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

from impomo.settings import AppSettings

SOUND_FILES = {
    "Soft Alarm": "Alarm02.wav",
    "Fanfares": "tada.wav",
}
VOLUME = 0.9


def ring_bell(sound_file: str) -> None:
    """Fallback player: ring the terminal bell."""
    sys.stderr.write("\a")
    sys.stderr.flush()


@dataclass
class Notifications:
    """Plays the sound chosen in the settings through ``player``."""

    settings: AppSettings
    player: Callable[[str], None] = ring_bell

    def play_sound(self) -> Optional[str]:
        """Play the configured sound and return its file name, or None if silent."""
        if not self.settings.sound_status:
            return None
        sound_file = SOUND_FILES.get(self.settings.sound)
        if sound_file is None:
            return None
        self.player(sound_file)
        return sound_file