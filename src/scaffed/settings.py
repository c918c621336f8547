"""Startup settings derived from the process environment."""

import glob
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_GRADLE_COMMAND = "gradle"
GRADLE_COMMAND_VAR = "SCAFFED_GRADLE"


@dataclass(frozen=True)
class Settings:
    """Tool locations resolved once at startup.

    path is the PATH handed to child processes, or None to inherit it.
    """

    gradle_command: str = DEFAULT_GRADLE_COMMAND
    path: Optional[str] = None

    def child_env(self, environ: Mapping[str, str]) -> Optional[dict]:
        if self.path is None:
            return None
        env = dict(environ)
        env["PATH"] = self.path
        return env


def load_settings(environ: Mapping[str, str]) -> Settings:
    gradle_command = environ.get(GRADLE_COMMAND_VAR) or DEFAULT_GRADLE_COMMAND
    return Settings(gradle_command=gradle_command, path=_sdkman_path(environ))


def _sdkman_path(environ):
    """Prefix PATH with SDKMAN candidate bins, or None if SDKMAN is absent."""
    sdkman_dir = environ.get("SDKMAN_DIR")
    if not sdkman_dir:
        if not environ.get("HOME"):
            return None
        sdkman_dir = os.path.join(environ["HOME"], ".sdkman")
    candidates_dir = os.path.join(sdkman_dir, "candidates")
    if not os.path.isdir(candidates_dir):
        return None
    bins = sorted(glob.glob(os.path.join(candidates_dir, "*/current/bin")))
    if not bins:
        return None
    return os.pathsep.join(bins) + os.pathsep + environ.get("PATH", "")
