"""Length-prefixed fields and body parts of the handle wire protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

_UINT32 = struct.Struct(">I")


class HandleProtocolError(ValueError):
    """Raised when handle protocol data cannot be decoded."""


def _read_length(data: bytes, what: str) -> int:
    if len(data) < 4:
        raise HandleProtocolError(f"not enough data for {what} length")
    return _UINT32.unpack_from(data)[0]


def string_size(value: str) -> int:
    """Number of bytes the encoded string occupies, length prefix included."""
    return 4 + len(value.encode("utf-8"))


def encode_string(value: str) -> bytes:
    """Encode a string as a big-endian length followed by its UTF-8 bytes."""
    raw = value.encode("utf-8")
    return _UINT32.pack(len(raw)) + raw


def decode_string(data: bytes) -> str:
    """Decode a length-prefixed UTF-8 string from the start of ``data``."""
    length = _read_length(data, "string")
    raw = bytes(data[4 : 4 + length])
    if len(raw) < length:
        raise HandleProtocolError("not enough data")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HandleProtocolError("invalid UTF-8 string") from exc


def encode_index_list(indexes: bytes) -> bytes:
    """Encode an index list as a big-endian length followed by its bytes."""
    raw = bytes(indexes)
    return _UINT32.pack(len(raw)) + raw


def decode_index_list(data: bytes) -> bytes:
    """Decode a length-prefixed index list from the start of ``data``."""
    length = _read_length(data, "index list")
    if len(data) - 4 < length:
        raise HandleProtocolError("not enough data")
    return bytes(data[4 : 4 + length])


def type_list_size(types: list[str]) -> int:
    """Number of bytes the encoded type list occupies."""
    return 4 + sum(string_size(item) for item in types)


def encode_type_list(types: list[str]) -> bytes:
    """Encode a list of strings as a count followed by each string."""
    return _UINT32.pack(len(types)) + b"".join(encode_string(item) for item in types)


def decode_type_list(data: bytes) -> list[str]:
    """Decode a counted list of length-prefixed strings."""
    count = _read_length(data, "type list")
    offset = 4
    result: list[str] = []
    for number in range(count):
        try:
            item = decode_string(data[offset:])
        except HandleProtocolError as exc:
            raise HandleProtocolError(f"cannot unmarshal type {number}: {exc}") from exc
        result.append(item)
        offset += string_size(item)
    return result


class BodyDigestType(IntEnum):
    NONE = 0
    MD5 = 1
    SHA1 = 2


_DIGEST_SIZES = {BodyDigestType.MD5: 17, BodyDigestType.SHA1: 21}


@dataclass
class BodyDigest:
    """Message digest that may lead a message body."""

    type: BodyDigestType = BodyDigestType.NONE
    digest: bytes = b""

    def size(self) -> int:
        return _DIGEST_SIZES.get(self.type, 0)

    def to_bytes(self) -> bytes:
        if self.type in _DIGEST_SIZES:
            return bytes([int(self.type)]) + bytes(self.digest)
        return b""

    @classmethod
    def from_bytes(cls, data: bytes) -> BodyDigest:
        if not data:
            raise HandleProtocolError("no data for digest")
        kind = data[0]
        if kind == BodyDigestType.MD5:
            name = "MD5"
        elif kind == BodyDigestType.SHA1:
            name = "SHA-1"
        else:
            raise HandleProtocolError(f"invalid digest type {kind}")
        digest_type = BodyDigestType(kind)
        needed = _DIGEST_SIZES[digest_type]
        if len(data) < needed:
            raise HandleProtocolError(f"invalid data length {len(data)} for {name}")
        return cls(type=digest_type, digest=bytes(data[1:needed]))


@dataclass
class BodyQueryRequest:
    """Body of a handle resolution request."""

    handle: str = ""
    index: bytes = b""
    types: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.index = bytes(self.index)
        self.types = list(self.types)

    def size(self) -> int:
        return string_size(self.handle) + 4 + len(self.index) + type_list_size(self.types)

    def to_bytes(self) -> bytes:
        return (
            encode_string(self.handle)
            + encode_index_list(self.index)
            + encode_type_list(self.types)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> BodyQueryRequest:
        try:
            handle = decode_string(data)
        except HandleProtocolError as exc:
            raise HandleProtocolError(f"cannot unmarshal handle: {exc}") from exc
        offset = string_size(handle)
        try:
            index = decode_index_list(data[offset:])
        except HandleProtocolError as exc:
            raise HandleProtocolError(f"cannot unmarshal index: {exc}") from exc
        offset += 4 + len(index)
        try:
            types = decode_type_list(data[offset:])
        except HandleProtocolError as exc:
            raise HandleProtocolError(f"cannot unmarshal type: {exc}") from exc
        return cls(handle=handle, index=index, types=types)