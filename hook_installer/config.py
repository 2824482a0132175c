"""
Configuration model for hook-installer.

The host's extension configuration block and the process environment are
read into plain values here and passed down explicitly, so the resolver
and runner never reach for global state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

EXTRA_KEY = "captainhook"
DEFAULT_CONFIGURATION = "captainhook.json"
DEFAULT_BIN_DIR = "vendor/bin"
EXECUTABLE_NAME = "captainhook"

ENV_CI = "CI"
ENV_DISABLE = "CAPTAINHOOK_DISABLE"
ENV_FORCE_INSTALL = "CAPTAINHOOK_FORCE_INSTALL"


@dataclass(frozen=True)
class ExtraConfig:
    """
    Settings from the host's `extra.captainhook` block.

    All keys are optional; anything else in the block is ignored.
    """

    config: Optional[str] = None
    exec: Optional[str] = None
    disable_plugin: bool = False
    force_install: bool = False

    @classmethod
    def from_mapping(cls, extra: Optional[Mapping[str, Any]]) -> "ExtraConfig":
        """
        Build an ExtraConfig from the host's whole `extra` mapping.

        A missing or non-mapping `captainhook` entry yields the defaults.
        """

        block = (extra or {}).get(EXTRA_KEY)
        if not isinstance(block, Mapping):
            return cls()

        return cls(
            config=_optional_str(block.get("config")),
            exec=_optional_str(block.get("exec")),
            disable_plugin=_truthy(block.get("disable-plugin", False)),
            force_install=_truthy(block.get("force-install", False)),
        )


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _truthy(value: Any) -> bool:
    # Composer evaluates these keys with PHP truthiness, where "0" is false.
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _env_flag(environ: Optional[Mapping[str, str]], name: str) -> bool:
    # Only the literal string "true" switches a flag on.
    env = os.environ if environ is None else environ
    return env.get(name) == "true"


def is_plugin_disabled(extra: ExtraConfig, environ: Optional[Mapping[str, str]] = None) -> bool:
    return extra.disable_plugin or _env_flag(environ, ENV_DISABLE)


def is_force_install(extra: ExtraConfig, environ: Optional[Mapping[str, str]] = None) -> bool:
    return extra.force_install or _env_flag(environ, ENV_FORCE_INSTALL)


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    return _env_flag(environ, ENV_CI)
