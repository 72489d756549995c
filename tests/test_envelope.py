import itertools

import pytest

from fairkit.handle.envelope import Credential, MessageEnvelope, MessageFlag
from fairkit.handle.fields import HandleProtocolError


@pytest.mark.parametrize("cp,ec,tc", list(itertools.product([False, True], repeat=3)))
def test_message_flag_round_trip(cp, ec, tc):
    flag = MessageFlag(cp=cp, ec=ec, tc=tc)
    data = flag.to_bytes()
    assert len(data) == 2
    assert data[1] == 0
    assert MessageFlag.from_bytes(data) == flag


def test_message_flag_compressed_bit():
    assert MessageFlag(cp=True).to_bytes() == b"\x80\x00"


def test_message_flag_empty_data():
    with pytest.raises(HandleProtocolError):
        MessageFlag.from_bytes(b"")


def test_envelope_round_trip():
    envelope = MessageEnvelope(
        major_version=1,
        minor_version=0,
        message_flag=MessageFlag(ec=True),
        session_id=100,
        request_id=200,
        sequence_number=300,
        message_length=64,
    )
    data = envelope.to_bytes()
    assert len(data) == MessageEnvelope.SIZE == 20
    assert data[0] == 1
    assert int.from_bytes(data[4:8], "big") == 100
    assert int.from_bytes(data[16:20], "big") == 64
    assert MessageEnvelope.from_bytes(data) == envelope


def test_envelope_ignores_trailing_bytes():
    envelope = MessageEnvelope(major_version=2, minor_version=1, session_id=7)
    assert MessageEnvelope.from_bytes(envelope.to_bytes() + b"body") == envelope


def test_envelope_short_data():
    with pytest.raises(HandleProtocolError):
        MessageEnvelope.from_bytes(bytes(19))


def test_credential_default_length():
    credential = Credential(version=3)
    assert credential.length() == 4
    assert len(credential.to_bytes()) == credential.length()
    assert credential.to_bytes()[0] == 3


def test_credential_round_trip_with_extra_data():
    credential = Credential(version=3, reserved=0, options=b"\x01\x02", unimplemented=b"abc")
    data = credential.to_bytes()
    assert credential.length() == len(data)
    assert Credential.from_bytes(data) == credential


def test_credential_empty_data_gives_default():
    assert Credential.from_bytes(b"") == Credential()


def test_credential_too_short():
    with pytest.raises(HandleProtocolError, match="too short"):
        Credential.from_bytes(b"\x03\x00")


def test_credential_options_must_be_two_bytes():
    with pytest.raises(ValueError):
        Credential(options=b"\x01")