class TeilensError(Exception):
    """Base class for errors raised by teilens."""


class MalformedInputError(TeilensError):
    """The TEI document could not be parsed at all. No annotations are produced."""


class GrobidRequestError(TeilensError):
    """The GROBID server could not be reached or answered with an error."""
