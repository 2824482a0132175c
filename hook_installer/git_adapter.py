"""
Git directory discovery for hook-installer.

Hooks are installed into the `.git/hooks` directory of the repository
enclosing the working directory. This module walks upward from the
working directory to find it and recognises linked worktrees, whose
`.git` entry is a pointer file instead of a directory.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import GitDirectoryNotFound, plugin_error_message

LOG = logging.getLogger(__name__)

# First line of a worktree's .git file, e.g. "gitdir: /repo/.git/worktrees/feature".
GITDIR_POINTER = re.compile(r"^gitdir:\s*(?P<gitdir>\S.*?)\s*$")


@dataclass(frozen=True)
class GitDirectory:
    """
    Result of searching for the enclosing repository.

    path is the `.git` entry that was found. For a worktree it is the
    pointer file and target holds the directory it points to.
    """

    path: Path
    is_worktree: bool = False
    target: Optional[Path] = None


def read_gitdir_pointer(git_file: Path) -> Optional[Path]:
    """
    Return the directory a `.git` pointer file refers to, if it parses.

    Relative targets are resolved against the directory holding the file,
    which is how git itself writes them for relocatable worktrees.
    """

    try:
        with git_file.open(encoding="utf-8", errors="replace") as handle:
            first_line = handle.readline()
    except OSError as exc:
        LOG.debug("Could not read %s: %s", git_file, exc)
        return None

    match = GITDIR_POINTER.match(first_line)
    if match is None:
        return None

    target = Path(match.group("gitdir"))
    if not target.is_absolute():
        target = git_file.parent / target
    return target


def find_git_dir(start: Union[str, Path]) -> GitDirectory:
    """
    Search `start` and its ancestors for a `.git` directory.

    A `.git` file pointing at an existing directory ends the search with a
    worktree result. A pointer to a missing directory is ignored and the
    walk continues upward. Reaching the filesystem root without a result
    raises GitDirectoryNotFound.
    """

    path = Path(start).absolute()

    while True:
        candidate = path / ".git"
        LOG.debug("Probing %s", candidate)

        if candidate.is_dir():
            return GitDirectory(path=candidate)

        if candidate.is_file():
            target = read_gitdir_pointer(candidate)
            if target is not None and target.is_dir():
                LOG.debug("%s points to worktree git dir %s", candidate, target)
                return GitDirectory(path=candidate, is_worktree=True, target=target)
            LOG.debug("Ignoring %s; no usable gitdir pointer", candidate)

        # The root is its own parent; stop there.
        if path.parent == path:
            break
        path = path.parent

    raise GitDirectoryNotFound(plugin_error_message("git directory not found"))
