import sys
import os
import logging
from datetime import datetime

from rich.logging import RichHandler
from rich.traceback import install

from ploom_unlock.core.version import VERSION_STRING
from ploom_unlock.utils.path_utils import get_log_dir, ensure_dir


def setup_error_handling(log_root=None):
    """Rich tracebacks on the console plus session and error log files."""
    # Reset handlers so this configuration wins over anything set at import time
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    log_dir = ensure_dir(os.path.join(log_root, "log") if log_root else get_log_dir("log"))
    error_dir = ensure_dir(os.path.join(log_root, "error") if log_root else get_log_dir("error"))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_file = os.path.join(log_dir, f"session_{timestamp}.log")
    error_file = os.path.join(error_dir, f"error_{timestamp}.log")

    install(show_locals=True, width=120)

    root.setLevel(logging.INFO)
    formatter = logging.Formatter('%(asctime)s | %(levelname)s | [%(name)s] %(message)s')

    # Session log
    sh = logging.FileHandler(session_file, encoding='utf-8')
    sh.setFormatter(formatter)
    sh.setLevel(logging.INFO)
    root.addHandler(sh)

    # Error log
    eh = logging.FileHandler(error_file, encoding='utf-8')
    eh.setFormatter(formatter)
    eh.setLevel(logging.ERROR)
    root.addHandler(eh)

    # Console
    ch = RichHandler(rich_tracebacks=True, markup=False)
    ch.setFormatter(logging.Formatter('%(message)s'))
    ch.setLevel(logging.INFO)
    root.addHandler(ch)

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception
    logging.info(f"--- {VERSION_STRING} Session Started ---")
    return session_file, error_file
