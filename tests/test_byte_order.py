import pytest

from farbfeld.byte_order import ByteOrder, bytes_to_int, int_to_bytes


@pytest.mark.parametrize("order", list(ByteOrder))
@pytest.mark.parametrize("width", [1, 2, 4])
def test_int_bytes_symmetry(order, width):
    top = (1 << (width * 8)) - 1
    for value in (0, 1, 0x5A, top // 3, top):
        data = int_to_bytes(value, width, order)
        assert len(data) == width
        assert bytes_to_int(data, order) == value


def test_big_and_little_endian_layout():
    assert int_to_bytes(0x12345678, 4, ByteOrder.BIG_ENDIAN) == b"\x12\x34\x56\x78"
    assert int_to_bytes(0x12345678, 4, ByteOrder.LITTLE_ENDIAN) == b"\x78\x56\x34\x12"
    assert bytes_to_int(b"\x00\x01", ByteOrder.BIG_ENDIAN) == 1
    assert bytes_to_int(b"\x00\x01", ByteOrder.LITTLE_ENDIAN) == 256


def test_int_to_bytes_masks_high_bits():
    assert int_to_bytes(0x123456, 2, ByteOrder.BIG_ENDIAN) == b"\x34\x56"


def test_int_to_bytes_rejects_zero_width():
    with pytest.raises(ValueError):
        int_to_bytes(1, 0, ByteOrder.BIG_ENDIAN)


def test_dtype_prefix():
    assert ByteOrder.BIG_ENDIAN.dtype_prefix == ">"
    assert ByteOrder.LITTLE_ENDIAN.dtype_prefix == "<"
