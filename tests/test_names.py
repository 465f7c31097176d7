import pytest

from wad_data import LUMP_NAME_CHARS, WadFormatError, lump_name_text, validate_lump_name
from wad_data import errors


@pytest.mark.parametrize('raw', [
    b'MAP32\0\0\0',
    b'A\0\0\0\0\0\0\0',
    b'ARCHVILE',
    b'W[]-_\\9\0',
    b'E1M1\0\0\0\0',
    b'12345678',
])
def test_accepts_valid_names(raw):
    validate_lump_name(raw)


def test_rejects_empty_name():
    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(b'\0' * 8)
    assert exc_info.value.reason == errors.EMPTY_LUMP_NAME


def test_empty_name_allowed_when_requested():
    validate_lump_name(b'\0' * 8, allow_empty=True)


@pytest.mark.parametrize('raw', [
    b'DEMO3\0\0S',  # seen in Memento Mori's MM.WAD
    b'A\0B\0\0\0\0\0',
    b'AB\0\0\0\0\0\x01',
    b'AB\0\0\0\0\0a',
])
def test_rejects_data_after_padding(raw):
    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(raw)
    assert exc_info.value.reason == errors.NON_ZERO_AFTER_ZERO


def test_leading_nul_with_data_after_is_rejected():
    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(b'\0X\0\0\0\0\0\0')
    assert exc_info.value.reason == errors.EMPTY_LUMP_NAME

    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(b'\0X\0\0\0\0\0\0', allow_empty=True)
    assert exc_info.value.reason == errors.NON_ZERO_AFTER_ZERO


@pytest.mark.parametrize('raw, index, byte', [
    (b'e1m1\0\0\0\0', 0, 0x65),
    (b'AB.C\0\0\0\0', 2, 0x2e),
    (b'ABC DEF\0', 3, 0x20),
    (b'ABCDEFG\xff', 7, 0xff),
])
def test_rejects_invalid_character_at_first_offender(raw, index, byte):
    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(raw)
    err = exc_info.value
    assert err.reason == errors.INVALID_NAME_CHARACTER
    assert f'{byte:#04x} at index {index}' in err.detail


def test_invalid_character_reported_before_later_padding_problem():
    with pytest.raises(WadFormatError) as exc_info:
        validate_lump_name(b'a\0\0\0\0\0\0X')
    assert exc_info.value.reason == errors.INVALID_NAME_CHARACTER


@pytest.mark.parametrize('byte', range(1, 256))
def test_single_character_names(byte):
    raw = bytes([byte]) + b'\0' * 7
    if byte in LUMP_NAME_CHARS:
        validate_lump_name(raw)
    else:
        with pytest.raises(WadFormatError) as exc_info:
            validate_lump_name(raw)
        assert exc_info.value.reason == errors.INVALID_NAME_CHARACTER


@pytest.mark.parametrize('raw', [b'SHORT', b'TOOLONGNAME', b''])
def test_wrong_field_length(raw):
    with pytest.raises(ValueError) as exc_info:
        validate_lump_name(raw)
    assert not isinstance(exc_info.value, WadFormatError)


@pytest.mark.parametrize('raw, expected', [
    (b'E1M1\0\0\0\0', 'E1M1'),
    (b'ARCHVILE', 'ARCHVILE'),
    (b'\0' * 8, ''),
    (b'\xffAB\0\0\0\0\0', '\ufffdAB'),
])
def test_lump_name_text(raw, expected):
    assert lump_name_text(raw) == expected
