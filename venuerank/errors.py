"""
errors.py
Exceptions raised by VenueRank. Bad external data (override preferences)
is recovered from where it is read; these cover programming and deployment
errors that the caller has to see.
"""


class VenueRankError(Exception):
    """Base class for VenueRank errors."""


class SourceRegistrationError(VenueRankError, ValueError):
    """A ranking source was registered without an id, name or match function."""


class ReferenceDataError(VenueRankError, ValueError):
    """A reference table file exists but cannot be parsed."""
