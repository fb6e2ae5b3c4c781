"""
Error Taxonomy
==============

Exceptions raised by the archive client and the MACS engine.

Every error derives from :class:`MacsError` so callers can catch the whole
family, or branch on the concrete cause:

    TransportError     -- network/HTTP failure or malformed response body
    NoMatchError       -- listing succeeded, but no section has the library
    EmptyDatasetError  -- point-series request returned zero datasets
    ValidationError    -- MACS input precondition violated

None of these are retried or recovered locally.
"""

from typing import Optional, Sequence


class MacsError(Exception):
    """Base class for all nucmacs errors."""


class TransportError(MacsError):
    """
    Network, HTTP or decoding failure during an archive request.

    Attributes:
        endpoint: Archive endpoint name ('e4list' or 'e4sig')
        url: Full request URL
    """

    def __init__(self, message: str, endpoint: str, url: Optional[str] = None):
        super().__init__(f"[{endpoint}] {message}")
        self.endpoint = endpoint
        self.url = url


# Name used by the archive-client operations
FetchError = TransportError


class NoMatchError(MacsError):
    """No listed section matches the requested library name."""

    def __init__(
        self,
        target: str,
        reaction: str,
        library: str,
        available: Sequence[str] = (),
    ):
        self.target = target
        self.reaction = reaction
        self.library = library
        self.available = list(available)

        message = f"No sections found for {target}({reaction}) in library {library!r}"
        if self.available:
            message += f". Available libraries: {', '.join(self.available)}"
        super().__init__(message)


class EmptyDatasetError(MacsError):
    """Point-series envelope contained no datasets."""

    def __init__(self, sect_id: int, pen_sect_id: int):
        self.sect_id = sect_id
        self.pen_sect_id = pen_sect_id
        super().__init__(
            f"No dataset found in response for SectID={sect_id}, PenSectID={pen_sect_id}"
        )


class ValidationError(MacsError, ValueError):
    """
    MACS engine precondition violated.

    Attributes:
        constraint: One of 'length_mismatch', 'empty_input',
            'non_positive_temperature', 'non_positive_mass'
    """

    LENGTH_MISMATCH = 'length_mismatch'
    EMPTY_INPUT = 'empty_input'
    NON_POSITIVE_TEMPERATURE = 'non_positive_temperature'
    NON_POSITIVE_MASS = 'non_positive_mass'

    def __init__(self, constraint: str, message: str):
        super().__init__(message)
        self.constraint = constraint


__all__ = [
    'MacsError',
    'TransportError',
    'FetchError',
    'NoMatchError',
    'EmptyDatasetError',
    'ValidationError',
]
