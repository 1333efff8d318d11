# File: jarpack/core/config/settings.py

import os
import shutil
from pathlib import Path

from jarpack.core.exceptions import ConfigError


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} is not a valid number: '{raw}'") from None


class Settings:
    # --- Project ---
    CONFIG_FILE: str = os.getenv("JARPACK_CONFIG_FILE", "jarpack.json")
    SRC_DIR: str = os.getenv("JARPACK_SRC_DIR", "src")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("JARPACK_LOG_LEVEL", "INFO").upper()

    # --- External Tools ---
    # Auto-detect git or use env var
    GIT_BINARY: str = os.getenv("GIT_BINARY_PATH", shutil.which("git") or "git")

    def __init__(self):
        # Numeric values are parsed on first use so a bad env var surfaces
        # as a ConfigError inside the CLI instead of breaking the import
        self._workers = None
        self._simulated_delay = None

    # --- Validation ---
    @property
    def WORKERS(self) -> int:
        """1 = sequential. Results keep discovery order either way."""
        if self._workers is None:
            self._workers = _env_number("JARPACK_WORKERS", "1", int)
        return self._workers

    @WORKERS.setter
    def WORKERS(self, value: int):
        self._workers = value

    # --- Release ---
    @property
    def SIMULATED_DELAY(self) -> float:
        """Pause between the steps of the simulated registry calls."""
        if self._simulated_delay is None:
            self._simulated_delay = _env_number("JARPACK_SIMULATED_DELAY", "0.5", float)
        return self._simulated_delay

    @SIMULATED_DELAY.setter
    def SIMULATED_DELAY(self, value: float):
        self._simulated_delay = value

    @property
    def config_path(self) -> Path:
        """jarpack.json is resolved against the current working directory."""
        return Path.cwd() / self.CONFIG_FILE


settings = Settings()
