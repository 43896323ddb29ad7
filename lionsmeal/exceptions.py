class MenuError(Exception):
    """Base class for every failure while producing the menu."""


class FetchError(MenuError):
    """The menu page could not be downloaded."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")


class EncodingError(MenuError):
    """The page body could not be transcoded to text."""


class DateFormatError(MenuError):
    """The anchor date text did not match any known shape."""


class TableShapeError(MenuError):
    """The menu table does not have the rows or cells we read from."""


class OutputError(MenuError):
    """The destination for the JSON output could not be written."""
