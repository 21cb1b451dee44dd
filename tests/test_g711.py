import pytest

from wavkit.g711 import decode_alaw, decode_ulaw

ALL_CODES = range(256)


def test_pinned_values():
    assert decode_ulaw(0xFF) == 0
    assert decode_ulaw(0x00) == -32124
    assert decode_alaw(0xD5) == 8


@pytest.mark.parametrize("decode", [decode_alaw, decode_ulaw])
def test_sign_bit_mirrors_value(decode):
    for code in ALL_CODES:
        assert decode(code ^ 0x80) == -decode(code)


@pytest.mark.parametrize("decode", [decode_alaw, decode_ulaw])
def test_values_fit_in_int16(decode):
    assert all(-32768 <= decode(code) <= 32767 for code in ALL_CODES)


def test_alaw_sign_follows_top_bit():
    assert all(decode_alaw(code) < 0 for code in range(0x80))
    assert all(decode_alaw(code) > 0 for code in range(0x80, 0x100))


def test_ulaw_is_monotonic_within_each_half():
    low = [decode_ulaw(code) for code in range(0x80)]
    high = [decode_ulaw(code) for code in range(0x80, 0x100)]
    assert low == sorted(set(low))
    assert high == sorted(set(high), reverse=True)


def test_ulaw_has_two_zeros():
    assert decode_ulaw(0x7F) == decode_ulaw(0xFF)


@pytest.mark.parametrize("decode", [decode_alaw, decode_ulaw])
@pytest.mark.parametrize("code", [-1, 256])
def test_out_of_range_code_is_rejected(decode, code):
    with pytest.raises(ValueError):
        decode(code)