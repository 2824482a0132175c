"""
Environment resolution for hook-installer.

Turns the host context into the three paths an installation needs: the
CaptainHook configuration file, the CaptainHook executable and the
repository's git directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .config import DEFAULT_CONFIGURATION, EXECUTABLE_NAME, ExtraConfig
from .git_adapter import GitDirectory, find_git_dir
from .host import HostContext

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedEnvironment:
    configuration: Path
    executable: Path
    git_dir: GitDirectory


def resolve_configuration(cwd: Union[str, Path], extra: ExtraConfig) -> Path:
    """
    Return the configuration path, relative to cwd unless configured absolute.
    """

    configuration = Path(cwd) / (extra.config or DEFAULT_CONFIGURATION)
    LOG.debug("Using configuration %s", configuration)
    return configuration


def resolve_executable(
    cwd: Union[str, Path],
    extra: ExtraConfig,
    bin_dir: Union[str, Path],
) -> Path:
    """
    Return the executable path: the `exec` override or `<bin-dir>/captainhook`.

    A relative override is taken relative to cwd.
    """

    if extra.exec:
        executable = Path(cwd) / extra.exec
    else:
        executable = Path(bin_dir) / EXECUTABLE_NAME
    LOG.debug("Using executable %s", executable)
    return executable


def resolve_environment(host: HostContext) -> ResolvedEnvironment:
    """
    Resolve every path for the given host context.

    Raises GitDirectoryNotFound when the working directory is not inside
    a repository.
    """

    extra = host.extra
    return ResolvedEnvironment(
        configuration=resolve_configuration(host.cwd, extra),
        git_dir=find_git_dir(host.cwd),
        executable=resolve_executable(host.cwd, extra, host.bin_dir),
    )
