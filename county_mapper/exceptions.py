"""Error types raised by county mapping scripts.

Missing fields are never errors; these cover the fatal tier only. Every error
can be rendered as the ``{"type", "message", "path"}`` payload expected by the
downstream validator.
"""


class MappingError(Exception):
    """Base exception for all county mapping failures."""

    def __init__(self, message, path=""):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self):
        return {"type": "error", "message": self.message, "path": self.path}


class MissingInputError(MappingError):
    """Raised when a required input or seed file does not exist."""


class InvalidInputError(MappingError):
    """Raised when an input file exists but cannot be parsed."""


class PropertyIdNotFoundError(MappingError):
    """Raised by scripts that treat a missing parcel id as fatal."""

    def __init__(self, message="Parcel ID not found", path=""):
        super().__init__(message, path)


class RequestIdentifierMismatchError(MappingError):
    """Raised when the seed file's request_identifier disagrees with the parsed id."""

    def __init__(self, message="Request identifier and parcel id don't match.",
                 path="property.request_identifier"):
        super().__init__(message, path)


class UnknownCountyError(MappingError):
    """Raised when no scripts exist for the requested county."""
