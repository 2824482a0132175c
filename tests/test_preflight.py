from hook_installer.config import ExtraConfig
from hook_installer.preflight import REASON_CI, REASON_DISABLED, check_preflight


def test_check_preflight_allows_plain_environment():
    assert check_preflight(ExtraConfig(), {}) is None


def test_check_preflight_skips_in_ci_regardless_of_configuration():
    extra = ExtraConfig(config="hooks.json", exec="bin/captainhook", force_install=True)
    assert check_preflight(extra, {"CI": "true"}) == REASON_CI


def test_check_preflight_skips_when_disabled_in_extra_config():
    assert check_preflight(ExtraConfig(disable_plugin=True), {}) == REASON_DISABLED


def test_check_preflight_skips_when_disabled_by_environment():
    assert check_preflight(ExtraConfig(), {"CAPTAINHOOK_DISABLE": "true"}) == REASON_DISABLED


def test_check_preflight_reports_disabled_before_ci():
    reason = check_preflight(ExtraConfig(disable_plugin=True), {"CI": "true"})
    assert reason == REASON_DISABLED
