import ntpath

import pytest

from conftest import FakePlatform
from ploom_unlock.core.errors import RegistryError
from ploom_unlock.core.game_config import build_db_path
from ploom_unlock.core.locator import resolve_by_registry, resolve_by_user_selection
from ploom_unlock.core.platform import NullPlatform, WindowsPlatform, get_platform


def test_registry_path_appends_localstorage_subpath():
    platform = FakePlatform(install_path=r"D:\Games\Wuthering Waves")
    path = resolve_by_registry(platform)
    assert path == (
        r"D:\Games\Wuthering Waves\Wuthering Waves Game\Client\Saved"
        r"\LocalStorage\LocalStorage.db"
    )


def test_registry_path_does_not_check_existence(tmp_path):
    platform = FakePlatform(install_path=str(tmp_path / "not-installed"))
    path = resolve_by_registry(platform)
    assert ntpath.basename(path) == "LocalStorage.db"


def test_registry_missing_key_raises():
    with pytest.raises(RegistryError) as exc:
        resolve_by_registry(FakePlatform(install_path=None))
    assert exc.value.kind == "registry"
    assert str(exc.value) == "Registry error: Could not access the registry key or value."


def test_null_platform_has_no_registry():
    platform = NullPlatform()
    with pytest.raises(RegistryError):
        resolve_by_registry(platform)
    # Window calls are no-ops
    platform.set_console_title("x")
    platform.strip_window_menu(1234)


def test_build_db_path_handles_trailing_separator():
    assert build_db_path("C:\\Game\\") == build_db_path("C:\\Game")


def test_get_platform_matches_os(monkeypatch):
    monkeypatch.setattr("ploom_unlock.core.platform.sys.platform", "linux")
    assert isinstance(get_platform(), NullPlatform)
    monkeypatch.setattr("ploom_unlock.core.platform.sys.platform", "win32")
    assert isinstance(get_platform(), WindowsPlatform)


def test_user_selection_returns_choice():
    assert resolve_by_user_selection(lambda: "/tmp/LocalStorage.db") == "/tmp/LocalStorage.db"


@pytest.mark.parametrize("cancelled", [None, ""])
def test_user_selection_cancelled(cancelled):
    assert resolve_by_user_selection(lambda: cancelled) is None
