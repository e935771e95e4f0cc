import functools
import random
import threading
import time
from datetime import datetime

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieSearch.settings import LOG_PATH, ACCENT_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def throttle(min_delay: float = 1.0):
    """
    Decorator that sleeps `min_delay ±0.3 s` between *network* calls on the
    same function. Calls from worker threads queue up behind one lock.
    """
    def wrap(fn):
        last_hit = 0.0
        lock = threading.Lock()
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_hit
            with lock:
                wait = min_delay - (time.time() - last_hit)
                if wait > 0:
                    time.sleep(wait + random.uniform(0, 0.3))
                try:
                    return fn(*a, **kw)
                finally:
                    last_hit = time.time()
        return inner
    return wrap


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#202124"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase, QColor("#323336"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def format_year(year: str | None) -> str:
    """OMDb years come as '2021' or '2019–2021'; blank/None → '—'."""
    return year.strip() if year and year.strip() else "—"
