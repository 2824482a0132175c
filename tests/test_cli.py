import json

from hook_installer import cli
from hook_installer.errors import GitDirectoryNotFound


def test_cli_defaults_to_post_install_event(monkeypatch, tmp_path):
    dispatched = []

    def fake_dispatch(self, event):
        dispatched.append(event)

    monkeypatch.setattr("hook_installer.cli.HookInstallerPlugin.dispatch", fake_dispatch)

    exit_code = cli.main(["-d", str(tmp_path), "--no-ansi"])

    assert exit_code == 0
    assert dispatched == ["post-install-cmd"]


def test_cli_passes_host_settings(monkeypatch, tmp_path):
    seen = {}

    def fake_activate(self, host, io):
        seen.update(host=host, io=io)

    monkeypatch.setattr("hook_installer.cli.HookInstallerPlugin.activate", fake_activate)
    monkeypatch.setattr("hook_installer.cli.HookInstallerPlugin.dispatch", lambda self, event: None)

    exit_code = cli.main(
        ["post-update-cmd", "-d", str(tmp_path), "--ansi", "--php", "php", "-vv"]
    )

    assert exit_code == 0
    assert seen["host"].cwd == tmp_path
    assert seen["host"].interpreter == "php"
    assert seen["io"].is_decorated() is True
    assert seen["io"].is_verbose() is True


def test_cli_runs_phar_through_php_without_php_option(monkeypatch, tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "tools").mkdir()
    phar = tmp_path / "tools" / "captainhook.phar"
    phar.write_text("<?php echo 'captainhook';\n")
    phar.chmod(0o644)
    (tmp_path / "captainhook.json").write_text("{}")
    (tmp_path / "composer.json").write_text(
        json.dumps({"extra": {"captainhook": {"exec": "tools/captainhook.phar"}}})
    )
    for name in ("CI", "CAPTAINHOOK_DISABLE", "CAPTAINHOOK_FORCE_INSTALL", "COMPOSER"):
        monkeypatch.delenv(name, raising=False)

    commands = []

    def fake_run(cmd):
        commands.append(list(cmd))
        return 0

    monkeypatch.setattr("hook_installer.plugin.run_install_command", fake_run)
    monkeypatch.setattr("hook_installer.runner.shutil.which", lambda name: "/usr/bin/php")

    exit_code = cli.main(["-d", str(tmp_path), "--no-ansi"])

    assert exit_code == 0
    assert commands[0][:3] == ["/usr/bin/php", str(phar), "install"]



def test_cli_reports_fatal_errors(monkeypatch, tmp_path, capsys):
    def fake_dispatch(self, event):
        raise GitDirectoryNotFound("git directory not found")

    monkeypatch.setattr("hook_installer.cli.HookInstallerPlugin.dispatch", fake_dispatch)

    exit_code = cli.main(["-d", str(tmp_path), "--no-ansi"])

    assert exit_code == 1
    assert "hook-installer: error: git directory not found" in capsys.readouterr().err


def test_cli_rejects_unknown_event():
    try:
        cli.main(["pre-autoload-dump"])
    except SystemExit as exc:
        assert exc.code == 2
    else:
        raise AssertionError("expected SystemExit to be raised")


def test_cli_reports_unreadable_manifest(tmp_path, capsys):
    (tmp_path / "composer.json").write_text("{broken")

    exit_code = cli.main(["-d", str(tmp_path), "--no-ansi"])

    assert exit_code == 1
    assert "composer.json" in capsys.readouterr().err
