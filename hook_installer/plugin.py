"""
Host plugin that installs CaptainHook's git hooks.

The host activates the plugin, asks which lifecycle events it listens to
and dispatches those events to it. On post-install and post-update the
plugin:
  - skips when disabled or running in CI,
  - resolves the configuration, git directory and executable,
  - skips worktrees and missing executables or configurations, and
  - runs `captainhook install` and reports a non-zero exit.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, Optional

from .config import is_force_install
from .console import ConsoleIO
from .errors import HookInstallerError, plugin_error_message
from .host import HostContext
from .preflight import REASON_DISABLED, check_preflight
from .resolver import resolve_environment
from .runner import (
    build_install_command,
    format_command,
    run_install_command,
    select_interpreter,
)

LOG = logging.getLogger(__name__)

POST_INSTALL_CMD = "post-install-cmd"
POST_UPDATE_CMD = "post-update-cmd"

NO_EXECUTABLE_HELP = """  <comment>CaptainHook executable not found</comment>

  Make sure you have installed <info>CaptainHook</info> .
  If you installed the Cap'n to a custom location you have to configure the path
  to your CaptainHook executable using Composers 'extra' config. e.g.

<comment>    "extra": {
        "captainhook": {
            "exec": "tools/captainhook.phar"
        }
    }
</comment>
  If you are uninstalling CaptainHook, we are sad seeing you go,
  but we would appreciate your feedback on your experience.
  Just go to https://github.com/captainhookphp/captainhook/issues to leave your feedback
"""

NO_CONFIG_HELP = """  <comment>CaptainHook configuration not found</comment>

  If your CaptainHook configuration is not named <info>captainhook.json</info> or is not
  located in your repository root you have to configure the path to your
  CaptainHook configuration using Composers 'extra' config. e.g.

    <comment>"extra": {
        "captainhook": {
            "config": "config/hooks.json"
        }
    }</comment>
"""


class InstallOutcome(enum.Enum):
    DISABLED = "disabled"
    CI = "ci"
    WORKTREE = "worktree"
    NO_EXECUTABLE = "no-executable"
    NO_CONFIG = "no-config"
    INSTALLED = "installed"
    FAILED = "failed"


class HookInstallerPlugin:
    """
    Lifecycle plugin for the host dependency manager.

    Every outcome except a missing git directory or an unstartable process
    returns normally so the host's own run carries on.
    """

    def __init__(self) -> None:
        self._host: Optional[HostContext] = None
        self._io: Optional[ConsoleIO] = None

    def activate(self, host: HostContext, io: ConsoleIO) -> None:
        self._host = host
        self._io = io

    def deactivate(self, host: HostContext, io: ConsoleIO) -> None:
        pass

    def uninstall(self, host: HostContext, io: ConsoleIO) -> None:
        pass

    @staticmethod
    def subscribed_events() -> Dict[str, str]:
        return {
            POST_INSTALL_CMD: "install_hooks",
            POST_UPDATE_CMD: "install_hooks",
        }

    def dispatch(self, event: str) -> Optional[InstallOutcome]:
        """Run the handler subscribed to event; unknown events are ignored."""

        handler = self.subscribed_events().get(event)
        if handler is None:
            LOG.debug("Ignoring unsubscribed event %s", event)
            return None
        return getattr(self, handler)(event)

    def install_hooks(self, event: Optional[str] = None) -> InstallOutcome:
        """
        Install the hooks for the activated host.

        Raises GitDirectoryNotFound or ProcessStartError; every other
        outcome is reported on the console and returned.
        """

        host, io = self._require_active()
        LOG.debug("Handling %s for %s", event, host.cwd)
        io.write("<info>CaptainHook HookInstaller</info>")

        reason = check_preflight(host.extra, host.environ)
        if reason is not None:
            io.write(f"  <comment>{reason}</comment>")
            return InstallOutcome.DISABLED if reason == REASON_DISABLED else InstallOutcome.CI

        env = resolve_environment(host)
        if env.git_dir.is_worktree:
            io.write("  <comment>ARRRRR! We ARRR in a worktree, install is skipped!</comment>")
            return InstallOutcome.WORKTREE

        if not env.executable.exists():
            io.write(NO_EXECUTABLE_HELP)
            return InstallOutcome.NO_EXECUTABLE

        if not env.configuration.exists():
            io.write(NO_CONFIG_HELP)
            return InstallOutcome.NO_CONFIG

        cmd = build_install_command(
            env.executable,
            env.configuration,
            env.git_dir.path,
            decorated=io.is_decorated(),
            force=is_force_install(host.extra, host.environ),
            interpreter=select_interpreter(env.executable, host.interpreter),
        )
        if io.is_verbose():
            io.write(f"Running process : {format_command(cmd)}")

        exit_code = run_install_command(cmd)
        if exit_code != 0:
            io.write_error(plugin_error_message("installation process failed"))
            return InstallOutcome.FAILED
        return InstallOutcome.INSTALLED

    def _require_active(self) -> tuple[HostContext, ConsoleIO]:
        if self._host is None or self._io is None:
            raise HookInstallerError("plugin used before activate()")
        return self._host, self._io

