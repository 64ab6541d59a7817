# statement_extractor/errors.py


class ExtractionError(Exception):
    """Base class for errors raised while extracting a statement."""


class InvalidInput(ExtractionError):
    """The request body did not carry an `images` array."""


class UpstreamFailure(ExtractionError):
    """The vision model call failed; the whole run is aborted."""

    def __init__(self, page_index: int, cause: BaseException):
        self.page_index = page_index
        self.cause = cause
        super().__init__(f"page {page_index + 1}: {type(cause).__name__}: {cause}")


class MalformedPageOutput(ExtractionError):
    """A page's model output could not be decoded into a page object."""

    def __init__(self, page_index: int, reason: str):
        self.page_index = page_index
        self.reason = reason
        super().__init__(f"page {page_index + 1}: {reason}")
