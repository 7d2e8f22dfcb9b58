# deroid

Object identifiers (OIDs) as used in ASN.1 BER/DER data, in plain Python.

An `Oid` from `deroid.oid` holds the DER-encoded body of an object
identifier, which is the bytes after the tag and length. It also holds a
flag that tells whether the OID is relative. The package can build an OID
from its arcs or parse it from dotted text, and it can give the arcs back.

## Installation

```
pip install deroid
```

## Usage

```python
from deroid.oid import Oid

oid = Oid.from_components([1, 2, 840, 113549, 1, 1, 5])
oid.asn1                 # b'*\x86H\x86\xf7\r\x01\x01\x05'
bytes(oid)               # the same bytes
str(oid)                 # '1.2.840.113549.1.1.5'
repr(oid)                # 'OID(1.2.840.113549.1.1.5)'

Oid.from_str("1.2.840.113549.1.1.5") == oid   # True

rel = Oid.from_relative([840, 113549, 1, 1, 5])
str(rel)                 # 'rel. 840.113549.1.1.5'

# Wrap bytes taken straight from a DER stream
parsed = Oid(b"\x55\x04\x06", relative=False)
list(parsed.iter())      # [2, 5, 4, 6]
parsed.arc_count()       # 4
```

Two OIDs are equal, and hash the same, when their encoded bytes and their
`relative` flags are the same. This means an `Oid` can be used as a
dictionary key.

`encode_relative(ids)` yields the base-128 octets of a sequence of arcs.
No first-arc packing is done.

### Arcs too large for 64 bits

`Oid.iter()` returns `None` when any arc needs more than 64 bits.
`iter_bigint()` always yields every arc as a Python integer of any size.
`to_id_string()`, `str()` and `repr()` use those arcs, so they always give
dotted decimal text.

### Errors

Building an OID raises a subclass of `OidParseError`, which is a
`ValueError`:

- `OidTooShortError` is raised when there are fewer than two arcs (a lone
  `0` is allowed), or when a relative OID has no arcs.
- `FirstComponentsTooLargeError` is raised when the first arc is 7 or
  more, or the second arc is 40 or more.
- `OidIntegerParseError` is raised when a component of the dotted text is
  not an unsigned 64-bit decimal integer.

A negative arc raises a plain `ValueError`.

## What it does not do

The package only handles the content octets of an OID. It does not read
or write BER/DER tags, lengths or any other ASN.1 types. You must split
the OID bytes out of a stream yourself before you wrap them in an `Oid`.

## Running the tests

```
pip install -e ".[test]"
pytest
```