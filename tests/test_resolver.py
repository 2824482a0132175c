from pathlib import Path

from hook_installer.config import ExtraConfig
from hook_installer.host import HostContext
from hook_installer.resolver import (
    resolve_configuration,
    resolve_environment,
    resolve_executable,
)


def test_resolve_configuration_defaults_to_captainhook_json(tmp_path):
    assert resolve_configuration(tmp_path, ExtraConfig()) == tmp_path / "captainhook.json"


def test_resolve_configuration_uses_override(tmp_path):
    extra = ExtraConfig(config="config/hooks.json")
    assert resolve_configuration(tmp_path, extra) == tmp_path / "config" / "hooks.json"


def test_resolve_configuration_keeps_absolute_override(tmp_path):
    absolute = tmp_path / "elsewhere" / "hooks.json"
    extra = ExtraConfig(config=str(absolute))
    assert resolve_configuration(tmp_path / "project", extra) == absolute


def test_resolve_executable_defaults_to_bin_dir(tmp_path):
    bin_dir = tmp_path / "vendor" / "bin"
    assert resolve_executable(tmp_path, ExtraConfig(), bin_dir) == bin_dir / "captainhook"


def test_resolve_executable_uses_override(tmp_path):
    extra = ExtraConfig(exec="tools/captainhook.phar")
    result = resolve_executable(tmp_path, extra, tmp_path / "vendor" / "bin")
    assert result == tmp_path / "tools" / "captainhook.phar"


def test_resolve_environment_bundles_all_paths(tmp_path):
    (tmp_path / ".git").mkdir()
    host = HostContext(
        cwd=tmp_path,
        bin_dir=tmp_path / "bin",
        extra=ExtraConfig(config="hooks.json"),
    )

    env = resolve_environment(host)

    assert env.configuration == tmp_path / "hooks.json"
    assert env.executable == tmp_path / "bin" / "captainhook"
    assert env.git_dir.path == Path(tmp_path) / ".git"
