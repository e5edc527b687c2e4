"""Memcomparable byte encoding of keys, as used for MVCC keys."""

from __future__ import annotations

ENC_GROUP_SIZE = 8
ENC_MARKER = 0xFF
_ASC_PAD = 0x00
_DESC_PAD = 0xFF


class CodecError(ValueError):
    """Raised when encoded bytes are malformed."""


def max_encoded_bytes_size(n: int) -> int:
    """Return the largest size that encoding n bytes can produce."""
    return (n // ENC_GROUP_SIZE + 1) * (ENC_GROUP_SIZE + 1)


def _invert(data: bytes) -> bytes:
    return bytes(b ^ 0xFF for b in data)


def encode_bytes(key: bytes, desc: bool = False) -> bytes:
    """Encode key in groups of eight bytes, each followed by a pad marker.

    With desc set every output byte is inverted, so that the encoded form
    sorts in descending order.
    """
    out = bytearray()
    length = len(key)
    for index in range(0, length + 1, ENC_GROUP_SIZE):
        group = key[index:index + ENC_GROUP_SIZE]
        remain = length - index
        pad = 0 if remain > ENC_GROUP_SIZE else ENC_GROUP_SIZE - remain
        out += group + bytes(pad)
        out.append(ENC_MARKER - pad)
    encoded = bytes(out)
    return _invert(encoded) if desc else encoded


def decode_bytes(data: bytes, desc: bool = False) -> bytes:
    """Decode bytes produced by :func:`encode_bytes`; bytes after the last group are ignored."""
    if not data:
        return b""
    out = bytearray()
    read_offset = 0
    while True:
        marker_offset = read_offset + ENC_GROUP_SIZE
        if marker_offset >= len(data):
            raise CodecError(f"unexpected EOF, original key = {list(data)!r}")
        out += data[read_offset:marker_offset]
        read_offset += ENC_GROUP_SIZE + 1

        marker = data[marker_offset]
        pad_size = marker if desc else ENC_MARKER - marker
        if pad_size == 0:
            continue
        if pad_size > ENC_GROUP_SIZE:
            raise CodecError("invalid key padding")
        expected = bytes([_DESC_PAD if desc else _ASC_PAD]) * pad_size
        if bytes(out[-pad_size:]) != expected:
            raise CodecError("invalid key padding")
        del out[-pad_size:]
        decoded = bytes(out)
        return _invert(decoded) if desc else decoded