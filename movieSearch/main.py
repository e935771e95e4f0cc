import sys
from PySide6.QtWidgets import QApplication, QMessageBox

from movieSearch.settings import DATABASE_PATH
from movieSearch.utils    import apply_dark_palette, log_debug
from movieSearch.metadata import FavoritesStore, OMDBClient
from movieSearch.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    try:
        fetcher = OMDBClient()
    except RuntimeError as e:
        QMessageBox.critical(None, "Movie Search", f"{e}.\nAdd it to secret.env and restart.")
        sys.exit(1)

    store = FavoritesStore.open(DATABASE_PATH)
    log_debug(f"Opened favorites store at {DATABASE_PATH}")

    window = MainWindow(store, fetcher)   # store injected, no globals
    window.show()

    # -------- run the event-loop -------------------------------------
    try:
        code = app.exec()
    finally:
        store.close()
    sys.exit(code)

# Python entry-point guard
if __name__ == "__main__":
    main()
