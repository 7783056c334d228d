"""Error taxonomy for the LZ77 codec."""

from __future__ import annotations


class LZ77Error(ValueError):
    """Base class for codec data errors."""


class EmptyInputError(LZ77Error):
    pass


class EmptyTokenListError(LZ77Error):
    pass


class FormatError(LZ77Error):
    pass


class CorruptTokenError(LZ77Error):
    pass
