import pytest

from cfl.checksum import crc32c


def test_empty_input_is_zero():
    assert crc32c(b"") == 0


def test_standard_check_value():
    assert crc32c(b"123456789") == 0xE3069283


def test_all_zero_block():
    assert crc32c(bytes(32)) == 0x8A9136AA


def test_all_ones_block():
    assert crc32c(b"\xff" * 32) == 0x62A8AB43


@pytest.mark.parametrize("wrap", [bytearray, memoryview])
def test_buffer_types_agree_with_bytes(wrap):
    data = b"fluent data"
    assert crc32c(wrap(data)) == crc32c(data)


def test_result_fits_in_32_bits():
    for size in range(0, 64, 7):
        value = crc32c(bytes(range(size)))
        assert 0 <= value <= 0xFFFFFFFF


def test_single_bit_change_alters_checksum():
    assert crc32c(b"abc") != crc32c(b"abd")
    assert crc32c(b"abc") == crc32c(b"abc")