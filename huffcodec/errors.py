"""
errors.py

Exceptions raised while reading or writing huffcodec streams.
"""


class HuffException(ValueError):
    """Base class for every codec failure."""
    pass


class FormatError(HuffException):
    """The input is not a recognised compressed stream."""
    pass


class TruncatedHeaderError(FormatError):
    """The input ended while the tree header was being read."""
    pass


class StreamError(HuffException):
    """The compressed payload could not be decoded."""
    pass


class TruncatedPayloadError(StreamError):
    """The input ended before the end-of-stream code was reached."""
    pass
