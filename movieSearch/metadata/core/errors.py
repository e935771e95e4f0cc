"""Exceptions raised by the store, the detail lookup and the cell factory."""


class StoreError(Exception):
    """Base class for persistence failures."""


class StoreReadError(StoreError):
    """A fetch against the store failed."""


class StoreWriteError(StoreError):
    """create / delete / save failed; the pending transaction was rolled back."""


class DetailLookupMiss(LookupError):
    """No movie matched *title* / *year* on the detail fetcher."""

    def __init__(self, title: str, year: str) -> None:
        super().__init__(f"no details for “{title}” ({year})")
        self.title = title
        self.year = year


class CellTypeError(TypeError):
    """The cell builder produced something other than a FavoriteCell."""
