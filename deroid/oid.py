"""Object identifiers (OIDs) held in their ASN.1 DER encoded form."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

__all__ = [
    "OidParseError",
    "OidTooShortError",
    "FirstComponentsTooLargeError",
    "OidIntegerParseError",
    "Oid",
    "encode_relative",
]

_U64_MAX = (1 << 64) - 1
_DECIMAL = re.compile(r"\+?[0-9]+")


class OidParseError(ValueError):
    """Raised when an OID cannot be built from its components or text."""


class OidTooShortError(OidParseError):
    """Raised when too few components are given."""


class FirstComponentsTooLargeError(OidParseError):
    """Raised when the first component is 7 or more, or the second 40 or more."""


class OidIntegerParseError(OidParseError):
    """Raised when a component of a textual OID is not an unsigned 64-bit integer."""


def encode_relative(ids: Iterable[int]) -> Iterator[int]:
    """Yield the base-128 encoded octets of the given arcs."""
    for arc in ids:
        if arc < 0:
            raise ValueError(f"OID arcs must be non-negative, got {arc}")
        octets_needed = max((arc.bit_length() + 6) // 7, 1)
        for i in range(octets_needed):
            flag = 0 if i == octets_needed - 1 else 0x80
            yield ((arc >> (7 * (octets_needed - 1 - i))) & 0x7F) | flag


def _is_end(octet: int) -> bool:
    return octet >> 7 == 0


class Oid:
    """An object identifier, relative or absolute, stored as DER content octets."""

    __slots__ = ("asn1", "relative")

    def __init__(self, asn1: bytes | bytearray | memoryview | Iterable[int], relative: bool = False):
        self.asn1 = bytes(asn1)
        self.relative = relative

    @classmethod
    def from_components(cls, ids: Iterable[int]) -> Oid:
        """Build an absolute OID from its arcs, e.g. ``[1, 2, 840, 113549]``."""
        arcs = list(ids)
        if any(arc < 0 for arc in arcs):
            raise ValueError("OID arcs must be non-negative")
        if len(arcs) < 2:
            if arcs == [0]:
                return cls(b"\x00")
            raise OidTooShortError("an OID needs at least two components")
        first, second = arcs[0], arcs[1]
        if first >= 7 or second >= 40:
            raise FirstComponentsTooLargeError(
                "first component must be below 7 and second below 40"
            )
        head = (first * 40 + second) & 0xFF
        return cls(bytes([head, *encode_relative(arcs[2:])]))

    @classmethod
    def from_relative(cls, ids: Iterable[int]) -> Oid:
        """Build a relative OID from its arcs."""
        arcs = list(ids)
        if not arcs:
            raise OidTooShortError("a relative OID needs at least one component")
        return cls(bytes(encode_relative(arcs)), relative=True)

    @classmethod
    def from_str(cls, text: str) -> Oid:
        """Parse a dotted decimal string such as ``"1.2.840.113549.1.1.5"``."""
        arcs = []
        for part in text.split("."):
            if not _DECIMAL.fullmatch(part):
                raise OidIntegerParseError(f"invalid OID component {part!r}")
            value = int(part)
            if value > _U64_MAX:
                raise OidIntegerParseError(f"OID component {part!r} is out of range")
            arcs.append(value)
        return cls.from_components(arcs)

    def _arc_octets(self) -> bytes:
        if self.relative:
            return self.asn1
        return self.asn1[1:]

    def iter_bigint(self) -> Iterator[int]:
        """Yield every arc as an unbounded integer."""
        data = self.asn1
        if not data:
            return
        pos = 0
        if not self.relative:
            yield data[0] // 40
            if data == b"\x00":
                return
            yield data[0] % 40
            pos = 1
        while pos < len(data):
            value = 0
            for octet in data[pos:]:
                pos += 1
                value = (value << 7) | (octet & 0x7F)
                if _is_end(octet):
                    break
            yield value

    def iter(self) -> Iterator[int] | None:
        """Return an iterator over the arcs, or None if an arc exceeds 64 bits."""
        max_bits = 0
        current = 0
        for octet in self._arc_octets():
            if _is_end(octet):
                max_bits = max(max_bits, current + 7)
                current = 0
            else:
                current += 7
        if max_bits > 64:
            return None
        return self.iter_bigint()

    def arc_count(self) -> int:
        """Return the number of arcs in the OID."""
        if self.relative:
            return sum(1 for octet in self.asn1 if _is_end(octet))
        if not self.asn1:
            return 0
        if len(self.asn1) == 1:
            return 1 if self.asn1[0] == 0 else 2
        return 2 + sum(1 for octet in self.asn1[1:] if _is_end(octet))

    def to_id_string(self) -> str:
        """Return the arcs joined by dots."""
        return ".".join(str(arc) for arc in self.iter_bigint())

    def __bytes__(self) -> bytes:
        return self.asn1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Oid):
            return NotImplemented
        return self.asn1 == other.asn1 and self.relative == other.relative

    def __hash__(self) -> int:
        return hash((self.asn1, self.relative))

    def __str__(self) -> str:
        prefix = "rel. " if self.relative else ""
        return prefix + self.to_id_string()

    def __repr__(self) -> str:
        return f"OID({self})"