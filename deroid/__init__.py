"""Object identifiers (OIDs) with their DER encoding, in the ``oid`` module."""

__version__ = "0.1.0"
__all__ = ["oid"]