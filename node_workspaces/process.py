"""Invocation of package manager executables."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from .exceptions import PackageManagerCommandError

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def get_command_version(command: str, cwd: str | Path) -> str:
    """Run ``<command> --version`` in *cwd* and return its stripped stdout.

    Raises ``PackageManagerCommandError`` if the executable is missing
    or exits with a non-zero status.
    """
    argv = [command, "--version"]
    log.debug("Running %s in %s", argv, cwd)
    try:
        result = subprocess.run(
            argv,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as exc:
        raise PackageManagerCommandError(argv, f"'{command}' not found") from exc
    except subprocess.CalledProcessError as exc:
        reason = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise PackageManagerCommandError(argv, reason) from exc
    except OSError as exc:
        raise PackageManagerCommandError(argv, str(exc)) from exc
    return result.stdout.strip()
