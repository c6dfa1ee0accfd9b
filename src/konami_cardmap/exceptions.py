"""Exception hierarchy for the card mapping builder."""


class CardMapError(Exception):
    """Base class for all errors raised while building the card mapping."""


class NetworkError(CardMapError):
    """The card database could not be downloaded."""


class ParseError(CardMapError):
    """The downloaded payload is not JSON or lacks the ``data`` list."""


class SchemaError(CardMapError):
    """A card record is missing a required field or has a field of the wrong type."""


class OutputWriteError(CardMapError, OSError):
    """The generated header could not be written to disk."""
