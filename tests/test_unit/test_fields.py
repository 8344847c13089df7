import dataclasses

import pytest

from pyqsfpdd import config
from pyqsfpdd.eeprom.exceptions import EEPROMError, OutOfRange
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.media import CBL_ASM_MULTIPLIERS
from pyqsfpdd.eeprom.pages import Page, PageAddress


@pytest.fixture
def memory():
    data = bytearray(256)
    data[0x00] = 0x18
    data[0x01] = 0x45
    data[0x0E:0x10] = b'\xff\xfe'
    data[0x80:0x88] = b'ACME  \x01 '
    data[0xFE:0x100] = b'\x12\x34'
    yield ModuleMemory(bytes(data), 256)


def test_u8(memory):
    assert memory.u8(0) == 0x18
    assert memory.u8(PageAddress(Page.LOWER, 0x01)) == 0x45


def test_u16_be(memory):
    assert memory.u16_be(0x0E) == 0xFFFE
    assert memory.u16_be(0xFE) == 0x1234


def test_s16_be(memory):
    assert memory.s16_be(0x0E) == -2
    assert memory.s16_be(0xFE) == 0x1234


def test_bit(memory):
    assert memory.bit(0x01, 0) is True
    assert memory.bit(0x01, 1) is False
    assert memory.bit(0x01, 6) is True
    assert memory.bit(0x01, 7) is False


def test_bitfield(memory):
    assert memory.bitfield(0x01, 0xF0, 4) == 4
    assert memory.bitfield(0x01, 0x0F, 0) == 5
    assert memory.bitfield(0x00, 0xE0, 5) == 0


def test_raw_range(memory):
    assert memory.raw_range(0x00, 0x01) == b'\x18\x45'
    assert memory.raw_range(0xFF, 0xFF) == b'\x34'
    with pytest.raises(ValueError):
        memory.raw_range(0x01, 0x00)


def test_ascii_range(memory):
    # trailing spaces are stripped, non-printable bytes are replaced
    assert memory.ascii_range(0x80, 0x83) == 'ACME'
    assert memory.ascii_range(0x80, 0x87) == 'ACME  _'


def test_ascii_replacement(memory, monkeypatch):
    monkeypatch.setattr(config, 'ascii_replacement', '?')
    assert memory.ascii_range(0x80, 0x87) == 'ACME  ?'


@pytest.mark.parametrize(
    'method,args',
    (
        ('u8', (256,)),
        ('u8', (-1,)),
        ('u16_be', (255,)),
        ('s16_be', (255,)),
        ('bit', (300, 0)),
        ('bitfield', (256, 0xFF, 0)),
        ('raw_range', (0xF0, 0x100)),
        ('ascii_range', (0xF0, 0x100)),
        ('u8', (PageAddress(Page.ADVERTISING, 0x80),)),
    ),
)
def test_out_of_range(memory, method, args):
    with pytest.raises(OutOfRange) as e:
        getattr(memory, method)(*args)
    assert e.value.length == 256
    assert isinstance(e.value, EEPROMError)
    assert isinstance(e.value, IndexError)


def test_out_of_range_offset(memory):
    with pytest.raises(OutOfRange) as e:
        memory.u8(300)
    assert e.value.offset == 300
    assert '0x12c' in str(e.value)


def test_declared_length():
    # the declared length wins over the supplied data
    memory = ModuleMemory(bytes(768), 256)
    assert memory.u8(255) == 0
    with pytest.raises(OutOfRange):
        memory.u8(256)
    # and the supplied data wins over the declared length
    memory = ModuleMemory(bytes(256), 768)
    assert memory.available == 256
    with pytest.raises(OutOfRange):
        memory.u8(300)


@pytest.mark.parametrize(
    'length,exc', (('256', TypeError), (True, TypeError), (-1, ValueError))
)
def test_invalid_length(length, exc):
    with pytest.raises(exc):
        ModuleMemory(bytes(256), length)


def test_immutable():
    data = bytearray(256)
    memory = ModuleMemory(data, 256)
    data[0] = 0xFF
    assert memory.u8(0) == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        memory.length = 768


@pytest.mark.parametrize(
    'value,expected',
    ((0x01, 0.1), (0x0A, 1.0), (0x45, 5.0), (0x8C, 120.0), (0xC3, 300.0)),
)
def test_scaled_length(value, expected):
    memory = ModuleMemory(bytes([value]), 1)
    assert memory.scaled_length(
        0, 0xC0, 0x3F, CBL_ASM_MULTIPLIERS
    ) == pytest.approx(expected)


def test_scaled_length_sentinel():
    memory = ModuleMemory(b'\xff\x7f', 2)
    args = (0xC0, 0x3F, CBL_ASM_MULTIPLIERS, 0xFF, 'max')
    assert memory.scaled_length(0, *args) == 'max'
    assert memory.scaled_length(1, *args) == 63.0
    # no sentinel: 0xFF is a regular value
    assert memory.scaled_length(0, *args[:3]) == 6300.0
