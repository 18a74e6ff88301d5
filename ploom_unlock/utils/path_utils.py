import os
import sys

def get_project_root():
    """Returns absolute path to project root.
    EXE: Directory containing executable.
    DEV: Directory containing 'ploom_unlock'.
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    # Dev mode: 2 levels up from ploom_unlock/utils/path_utils.py
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def get_resource_path(relative_path):
    """Get absolute path to read-only resource.
    Works for dev and for PyInstaller (_MEIPASS).
    """
    base_path = getattr(sys, '_MEIPASS', None) or get_project_root()
    return os.path.join(base_path, relative_path)

def get_log_dir(kind=""):
    """Writable logs area next to the project root (logs/<kind>)."""
    return os.path.join(get_project_root(), "logs", kind)

def ensure_dir(path):
    """Ensure directory exists."""
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
    return path
