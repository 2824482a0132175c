"""
Invocation of the CaptainHook `install` command.

The command line mirrors the host's console settings and the resolved
paths. The child shares this process's stdin, stdout and stderr so the
installer can talk to the user directly.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import ProcessStartError, plugin_error_message

LOG = logging.getLogger(__name__)

PHP_BINARY = "php"


def select_interpreter(
    executable: Union[str, Path],
    interpreter: Optional[str] = None,
) -> Optional[str]:
    """
    Return the interpreter to launch the executable with, if any.

    An explicit interpreter always wins. Otherwise a .phar archive or a
    file without the execute bit runs through the PHP binary found on
    PATH; an executable script runs directly.
    """

    if interpreter:
        return interpreter

    path = Path(executable)
    if path.suffix != ".phar" and os.access(path, os.X_OK):
        return None

    php = shutil.which(PHP_BINARY)
    if php is None:
        LOG.warning("%s needs PHP but no php binary was found on PATH", path)
    return php


def build_install_command(
    executable: Union[str, Path],
    configuration: Union[str, Path],
    git_dir: Union[str, Path],
    *,
    decorated: bool,
    force: bool,
    interpreter: Optional[str] = None,
) -> List[str]:
    """
    Return the argv for `captainhook install`.

    The installer never prompts; existing hooks are overwritten with -f or
    left alone with -s.
    """

    cmd: List[str] = []
    if interpreter:
        cmd.append(interpreter)
    cmd.extend(
        [
            str(executable),
            "install",
            "--ansi" if decorated else "--no-ansi",
            "--no-interaction",
            "-f" if force else "-s",
            "-c",
            str(configuration),
            "-g",
            str(git_dir),
        ]
    )
    return cmd


def format_command(cmd: Sequence[str]) -> str:
    """Render argv as a shell-escaped command line for display."""

    return shlex.join(cmd)


def run_install_command(cmd: Sequence[str]) -> int:
    """
    Run the installer to completion and return its exit code.

    Raises ProcessStartError when the process cannot be launched at all.
    """

    LOG.debug("Running installer: %s", format_command(cmd))
    try:
        completed = subprocess.run(list(cmd), check=False)
    except OSError as exc:
        LOG.debug("Failed to start installer: %s", exc)
        raise ProcessStartError(plugin_error_message("no-process")) from exc

    LOG.debug("Installer exited with %d", completed.returncode)
    return completed.returncode
