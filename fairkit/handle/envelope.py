"""Message envelope and credential section of the handle wire protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from fairkit.handle.fields import HandleProtocolError

_ENVELOPE = struct.Struct(">BB2sIIII")


@dataclass
class MessageFlag:
    """Envelope flags: compressed, encrypted and truncated."""

    cp: bool = False
    ec: bool = False
    tc: bool = False

    def to_bytes(self) -> bytes:
        first = (0x80 if self.cp else 0) | (0x40 if self.ec else 0) | (0x20 if self.tc else 0)
        return bytes([first, 0])

    @classmethod
    def from_bytes(cls, data: bytes) -> MessageFlag:
        if not data:
            raise HandleProtocolError("no data for message flag")
        first = data[0]
        return cls(cp=bool(first & 0x80), ec=bool(first & 0x40), tc=bool(first & 0x20))


@dataclass
class MessageEnvelope:
    """Fixed 20-byte envelope that starts every message."""

    major_version: int = 0
    minor_version: int = 0
    message_flag: MessageFlag = field(default_factory=MessageFlag)
    session_id: int = 0
    request_id: int = 0
    sequence_number: int = 0
    message_length: int = 0

    SIZE = _ENVELOPE.size

    def to_bytes(self) -> bytes:
        return _ENVELOPE.pack(
            self.major_version,
            self.minor_version,
            self.message_flag.to_bytes(),
            self.session_id,
            self.request_id,
            self.sequence_number,
            self.message_length,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> MessageEnvelope:
        if len(data) < _ENVELOPE.size:
            raise HandleProtocolError(f"envelope needs {_ENVELOPE.size} bytes, got {len(data)}")
        major, minor, flags, session, request, sequence, length = _ENVELOPE.unpack_from(data)
        return cls(
            major_version=major,
            minor_version=minor,
            message_flag=MessageFlag.from_bytes(flags),
            session_id=session,
            request_id=request,
            sequence_number=sequence,
            message_length=length,
        )


@dataclass
class Credential:
    """Credential section; anything past the fixed fields is kept opaque."""

    version: int = 0
    reserved: int = 0
    options: bytes = b"\x00\x00"
    unimplemented: bytes = b""

    def __post_init__(self) -> None:
        self.options = bytes(self.options)
        self.unimplemented = bytes(self.unimplemented)
        if len(self.options) != 2:
            raise ValueError("credential options must be exactly 2 bytes")

    def length(self) -> int:
        return 4 + len(self.unimplemented)

    def to_bytes(self) -> bytes:
        return bytes([self.version, self.reserved]) + self.options + self.unimplemented

    @classmethod
    def from_bytes(cls, data: bytes) -> Credential:
        if not data:
            return cls()
        if len(data) < 4:
            raise HandleProtocolError("data is too short")
        return cls(
            version=data[0],
            reserved=data[1],
            options=bytes(data[2:4]),
            unimplemented=bytes(data[4:]),
        )