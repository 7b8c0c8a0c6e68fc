class MainTableError(Exception):
    """Base class for maintable exceptions."""


class SortDataError(MainTableError, KeyError):
    """Raised when a row has no sort data for the active sort key.

    Rows must supply a value for every sort key that can become active.
    """

    key: str

    def __init__(self, message: str, key: str) -> None:
        self.key = key
        super().__init__(message)
