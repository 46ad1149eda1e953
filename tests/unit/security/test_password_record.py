"""Unit tests for the canonical hash record codec."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mp_argon2.kernel.errors import MalformedEncodingError
from mp_argon2.security.passwords import HashRecord

VECTOR = (
    b"$argon2id$v=19$m=65536,t=1,p=6"
    b"$KTAymECXXnekfa8FcES/Su$KPcCEYfGqeQbFwXKB1RsMQsrqgU1VJN65em0MREh0IS"
)

_TOKEN_ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

records = st.builds(
    HashRecord,
    variant=st.sampled_from(["argon2i", "argon2id"]),
    version=st.integers(0, 255),
    memory_cost=st.integers(0, 2**32 - 1),
    time_cost=st.integers(0, 2**32 - 1),
    parallelism=st.integers(0, 255),
    salt=st.text(_TOKEN_ALPHABET, min_size=1, max_size=64).map(str.encode),
    digest=st.text(_TOKEN_ALPHABET, min_size=1, max_size=128).map(str.encode),
)


class TestEncode:
    def test_canonical_layout(self) -> None:
        record = HashRecord(
            variant="argon2i",
            version=19,
            memory_cost=32768,
            time_cost=3,
            parallelism=2,
            salt=b"saltsaltsalt",
            digest=b"digest",
        )
        assert record.encode() == b"$argon2i$v=19$m=32768,t=3,p=2$saltsaltsalt$digest"

    def test_starts_with_delimiter(self) -> None:
        assert HashRecord.decode(VECTOR).encode().startswith(b"$")

    def test_is_frozen(self) -> None:
        record = HashRecord.decode(VECTOR)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.version = 16  # type: ignore[misc]


class TestDecode:
    def test_known_vector_fields(self) -> None:
        record = HashRecord.decode(VECTOR)
        assert record.variant == "argon2id"
        assert record.version == 19
        assert record.memory_cost == 65536
        assert record.time_cost == 1
        assert record.parallelism == 6
        assert record.salt == b"KTAymECXXnekfa8FcES/Su"
        assert record.digest == b"KPcCEYfGqeQbFwXKB1RsMQsrqgU1VJN65em0MREh0IS"

    def test_accepts_text(self) -> None:
        assert HashRecord.decode(VECTOR.decode()) == HashRecord.decode(VECTOR)

    def test_byte_stable(self) -> None:
        assert HashRecord.decode(VECTOR).encode() == VECTOR

    @given(records)
    def test_round_trip(self, record: HashRecord) -> None:
        assert HashRecord.decode(record.encode()) == record

    def test_parameter_order_is_free(self) -> None:
        record = HashRecord.decode(b"$argon2i$v=19$p=1,t=2,m=64$salt$digest")
        assert (record.memory_cost, record.time_cost, record.parallelism) == (64, 2, 1)

    def test_unknown_keys_are_ignored(self) -> None:
        record = HashRecord.decode(b"$argon2i$v=19$m=64,t=2,x=9$salt$digest")
        assert record.memory_cost == 64
        assert record.time_cost == 2
        assert record.parallelism == 0

    def test_repeated_key_keeps_last(self) -> None:
        record = HashRecord.decode(b"$argon2i$v=19$m=64,m=128,p=1$salt$digest")
        assert record.memory_cost == 128

    def test_unknown_variant_is_not_a_decode_error(self) -> None:
        assert HashRecord.decode(b"$argon2d$v=19$m=64,t=2,p=1$salt$digest").variant == "argon2d"

    def test_leading_zeros_are_not_width_errors(self) -> None:
        record = HashRecord.decode(b"$argon2i$v=" + b"0" * 5000 + b"19$m=0064,t=2,p=001$salt$digest")
        assert (record.version, record.memory_cost, record.parallelism) == (19, 64, 1)


class TestDecodeMalformed:
    @pytest.mark.parametrize(
        "encoded",
        [
            b"",
            b"argon2id$v=19$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1,p=1$salt",
            b"$argon2id$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1,p=1$salt$digest$extra",
            b"$argon2id$x=19$m=64,t=1,p=1$salt$digest",
            b"$argon2id$19$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=nineteen$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=256$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=-1$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1,p=1,x=2$salt$digest",
            b"$argon2id$v=19$m=64,t,p=1$salt$digest",
            b"$argon2id$v=19$m=lots,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=+1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t= 1,p=1$salt$digest",
            b"$argon2id$v=19$m=4294967296,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1,p=256$salt$digest",
            b"$argon2id$v=19$m=64,t=1,x=abc$salt$digest",
            b"$argon2id$v=19$m=" + b"1" * 5000 + b",t=1,p=1$salt$digest",
            b"$argon2id$v=" + b"9" * 5000 + b"$m=64,t=1,p=1$salt$digest",
            b"$argon2id$v=19$m=64,t=1,x=" + b"7" * 5000 + b"$salt$digest",
        ],
    )
    def test_rejected(self, encoded: bytes) -> None:
        with pytest.raises(MalformedEncodingError):
            HashRecord.decode(encoded)

    def test_empty_reason(self) -> None:
        with pytest.raises(MalformedEncodingError, match="empty"):
            HashRecord.decode(b"")

    def test_prefix_reason(self) -> None:
        with pytest.raises(MalformedEncodingError, match="must start with"):
            HashRecord.decode(b"#argon2id$v=19$m=64,t=1,p=1$salt$digest")

    def test_segment_count_reason(self) -> None:
        with pytest.raises(MalformedEncodingError) as exc_info:
            HashRecord.decode(b"$argon2id$v=19$m=64,t=1,p=1$salt")
        assert "got 5" in exc_info.value.reason

    def test_oversized_value_reason(self) -> None:
        with pytest.raises(MalformedEncodingError, match="does not fit in 32 bits"):
            HashRecord.decode(b"$argon2id$v=19$m=" + b"1" * 5000 + b",t=1,p=1$salt$digest")
