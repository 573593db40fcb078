"""Error types raised by the web search pipeline."""


class WebSearchError(Exception):
    """Base class for web search failures."""


class SearchValidationError(WebSearchError):
    """Raised when a search request is missing or has invalid parameters."""

    def __init__(self, param: str, message: str):
        super().__init__(message)
        self.param = param


class BrowserError(WebSearchError):
    """Raised when the headless browser cannot be acquired or launched."""


class NavigationError(WebSearchError):
    """Raised when the search results page cannot be loaded."""


class ExtractionError(WebSearchError):
    """Raised when a loaded page cannot be projected into text fields."""


class ArtifactWriteError(WebSearchError):
    """Raised when the output directory or artifact file cannot be written."""
