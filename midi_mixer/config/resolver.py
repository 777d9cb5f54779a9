"""Locating the profile file for MIDI Mixer."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from midi_mixer.constants import APP_NAME

logger = logging.getLogger(__name__)

# Profile names looked for in the working directory, preferred first
DEFAULT_CONFIG_NAMES = [
    "midi_mixer.yaml",
    "midi_mixer.yml",
]

USER_CONFIG_NAME = "profile.yaml"


def user_config_dir() -> Path:
    """Return the per-user configuration directory, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


class ConfigResolver:
    """Pick the profile file to load.

    An explicit ``--config`` path always wins and must exist. Otherwise the
    working directory is searched, then the user config directory; if none
    of those hold a profile the caller runs on built-in defaults.
    """

    def __init__(self, explicit_path: Path | None = None) -> None:
        self.explicit_path = explicit_path

    def candidates(self) -> Iterator[Path]:
        """Yield the implicit profile locations in search order."""
        cwd = Path.cwd()
        for name in DEFAULT_CONFIG_NAMES:
            yield cwd / name
        yield user_config_dir() / USER_CONFIG_NAME

    def resolve(self) -> Path | None:
        """Return the profile path, or None when defaults should be used.

        Raises:
            FileNotFoundError: If the explicit path does not exist
        """
        if self.explicit_path is not None:
            if not self.explicit_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        found = next((path for path in self.candidates() if path.is_file()), None)
        if found is None:
            logger.debug("No profile found, using built-in defaults")
        return found

    @staticmethod
    def get_default_path() -> Path:
        """Where ``init-config`` writes when no path is given."""
        return Path.cwd() / DEFAULT_CONFIG_NAMES[0]
