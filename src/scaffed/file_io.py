"""Descriptor file writes."""

import os
import stat
import tempfile

from scaffed.errors import ScaffoldError


def write_file(file_path, content: str) -> None:
    """Overwrite file_path with content atomically using temp file + rename.

    A new file gets the default mode for the current umask; an existing
    file keeps its mode.

    Raises:
        ScaffoldError: If the file cannot be written.
    """
    try:
        _atomic_write(os.fspath(file_path), content)
    except OSError as e:
        raise ScaffoldError(f"Failed writing {file_path}: {e}") from e


def _target_mode(file_path: str) -> int:
    try:
        return stat.S_IMODE(os.stat(file_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _atomic_write(file_path: str, content: str) -> None:
    dir_name = os.path.dirname(os.path.abspath(file_path))
    mode = _target_mode(file_path)
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        # mkstemp creates 0600
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise
