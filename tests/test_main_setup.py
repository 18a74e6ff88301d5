import logging
import sys
from pathlib import Path

import pytest

from ploom_unlock.main_setup import setup_error_handling
from ploom_unlock.utils.path_utils import ensure_dir, get_project_root, get_resource_path


@pytest.fixture
def restore_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)


def test_setup_creates_session_and_error_logs(tmp_path: Path, restore_logging):
    session_file, error_file = setup_error_handling(log_root=str(tmp_path))

    logging.getLogger("QualitySettingsStore").info("read ok")
    logging.getLogger("QualitySettingsStore").error("write failed")
    for h in logging.getLogger().handlers:
        h.flush()

    session = Path(session_file).read_text(encoding="utf-8")
    errors = Path(error_file).read_text(encoding="utf-8")
    assert Path(session_file).parent == tmp_path / "log"
    assert Path(error_file).parent == tmp_path / "error"
    assert "Session Started" in session
    assert "[QualitySettingsStore] read ok" in session
    assert "write failed" in errors
    assert "read ok" not in errors


def test_uncaught_exceptions_are_logged(tmp_path: Path, restore_logging):
    _, error_file = setup_error_handling(log_root=str(tmp_path))
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        sys.excepthook(*sys.exc_info())
    for h in logging.getLogger().handlers:
        h.flush()
    text = Path(error_file).read_text(encoding="utf-8")
    assert "Uncaught exception" in text
    assert "boom" in text


def test_path_helpers(tmp_path: Path):
    root = get_project_root()
    assert (Path(root) / "ploom_unlock").is_dir()
    assert get_resource_path("resource") == str(Path(root) / "resource")

    target = tmp_path / "a" / "b"
    assert ensure_dir(str(target)) == str(target)
    assert target.is_dir()
