"""Per-county property-record mapping scripts."""

__version__ = "0.1.0"
