"""Blocking subprocess execution for build-tool commands."""

import subprocess
from typing import Mapping, Optional, Sequence

from scaffed.errors import ScaffoldError


def run_command(
    command: str,
    args: Sequence[str] = (),
    cwd=None,
    silent: bool = False,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run command with args, wait for it to exit and return its exit status.

    The child inherits the terminal. With silent=True its stdout is
    discarded; stderr stays visible. There is no timeout.

    Raises:
        ScaffoldError: If the process cannot be spawned.
    """
    stdout = subprocess.DEVNULL if silent else None
    try:
        result = subprocess.run(
            [command] + list(args), cwd=cwd, stdout=stdout, env=env,
        )
    except OSError as e:
        raise ScaffoldError(f"Failed spawning {command}: {e}") from e
    return result.returncode


def is_installed(command: str, runner=run_command, env=None) -> bool:
    """Return True if `command --version` can be run and succeeds."""
    try:
        return runner(command, ["--version"], cwd=None, silent=True, env=env) == 0
    except ScaffoldError:
        return False
