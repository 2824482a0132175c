"""
Custom exception types used across hook-installer.

Only failures that must abort the host's lifecycle step are modelled as
exceptions. Soft outcomes (disabled plugin, CI, worktree, missing
executable or configuration) are reported on the console instead.
"""

from __future__ import annotations


def plugin_error_message(reason: str) -> str:
    """Wrap a failure reason in the message shown to the user."""

    return f"Shiver me timbers! CaptainHook could not install yer git hooks! ({reason})"


class HookInstallerError(Exception):
    """Base class for all hook-installer specific errors."""


class GitDirectoryNotFound(HookInstallerError):
    """Raised when no .git directory exists between cwd and the root."""


class ProcessStartError(HookInstallerError):
    """Raised when the CaptainHook process cannot be started."""


class HostConfigError(HookInstallerError):
    """Raised when the host project manifest cannot be read."""
