"""
Runtime checks that decide whether hook installation should run at all.

These run before any filesystem probing so a disabled plugin or a CI
build exits without touching the repository.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .config import ExtraConfig, is_ci, is_plugin_disabled

REASON_DISABLED = "plugin is disabled"
REASON_CI = "disabling plugin due to CI-environment"


def check_preflight(
    extra: ExtraConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Return the reason installation must be skipped, or None to proceed.

    An explicit disable wins over CI detection so the user sees the
    switch they set.
    """

    if is_plugin_disabled(extra, environ):
        return REASON_DISABLED

    if is_ci(environ):
        return REASON_CI

    return None
