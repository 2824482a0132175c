"""
Host settings mirrored by hook-installer.

A host dependency manager owns the project manifest, the binary directory
and the console decoration. HostContext carries those values into the
plugin; load_host_context builds one from a project's composer.json when
hook-installer runs on its own.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .config import DEFAULT_BIN_DIR, ExtraConfig
from .errors import HostConfigError

LOG = logging.getLogger(__name__)

MANIFEST_NAME = "composer.json"
ENV_MANIFEST = "COMPOSER"


@dataclass
class HostContext:
    """
    Settings the host exposes to the plugin.

    interpreter, when set, is placed in front of the executable on the
    command line (e.g. the PHP binary for a .phar). Display settings
    (decoration, verbosity) live on the ConsoleIO handed over with it.
    """

    cwd: Path
    bin_dir: Path
    extra: ExtraConfig = field(default_factory=ExtraConfig)
    interpreter: Optional[str] = None
    environ: Optional[Mapping[str, str]] = None


def manifest_path(project_dir: Union[str, Path], environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    return Path(project_dir) / env.get(ENV_MANIFEST, MANIFEST_NAME)


def read_manifest(path: Path) -> Dict[str, Any]:
    """
    Load a manifest as a dict; a missing file reads as empty.
    """

    if not path.exists():
        LOG.info("No manifest at %s; using defaults", path)
        return {}

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise HostConfigError(f"failed to read {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise HostConfigError(f"{path} must contain a JSON object")
    return raw


def load_host_context(
    project_dir: Union[str, Path],
    *,
    interpreter: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> HostContext:
    """
    Build a HostContext from the project's manifest.

    Reads `extra.captainhook` and `config.bin-dir` (falling back to
    `<vendor-dir>/bin`); a relative bin-dir is anchored at the project
    directory.
    """

    project = Path(project_dir).absolute()
    manifest = read_manifest(manifest_path(project, environ))

    extra = manifest.get("extra")
    settings = manifest.get("config")
    bin_dir = DEFAULT_BIN_DIR
    if isinstance(settings, dict):
        if settings.get("bin-dir"):
            bin_dir = str(settings["bin-dir"])
        elif settings.get("vendor-dir"):
            bin_dir = f"{settings['vendor-dir']}/bin"

    return HostContext(
        cwd=project,
        bin_dir=project / bin_dir,
        extra=ExtraConfig.from_mapping(extra if isinstance(extra, dict) else None),
        interpreter=interpreter,
        environ=environ,
    )
