import io
import math
from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

import pytest

from pyqsfpdd.common import hexdump, load_dump, to_builtin
from pyqsfpdd.eeprom.exceptions import DumpFormatError


def test_hexdump():
    assert hexdump(b'\x00\x90\x65') == '00:90:65'
    assert hexdump(b'\x00\x90\x65', 2) == '00:90'


@pytest.mark.parametrize(
    'text',
    (
        '18:40:00:ff',
        '18 40 00 ff',
        '\\x18\\x40\\x00\\xff',
        '18 40\n00:ff\n',
        '# comment\n18 40 ; inline\n\t00 ff # more\n',
        '18 40 00 ff\n.\n11 22 33\n',
    ),
)
def test_load_dump(text):
    assert load_dump(text) == b'\x18\x40\x00\xff'


def test_load_dump_file():
    assert load_dump(io.StringIO('18:40\n00:FF\n')) == b'\x18\x40\x00\xff'


def test_load_dump_meta():
    meta = {}
    data = load_dump('18 40\n#: note\nsome text\n00 00\n', meta)
    assert data == b'\x18\x40'
    assert meta == {'note': 'some text\n00 00\n'}


def test_load_dump_error():
    with pytest.raises(DumpFormatError) as e:
        load_dump('18 40\n00 zz\n')
    assert str(e.value).startswith('line 2, column 4')
    assert isinstance(e.value, ValueError)


class Color(Enum):
    RED = 1


@dataclass(frozen=True)
class Sample:
    name: str
    color: Color
    value: float
    raw: bytes
    pair: tuple


Point = namedtuple('Point', ('x', 'y'))


def test_to_builtin():
    obj = Sample('a', Color.RED, math.inf, b'\x01\x02', (Point(1, 2), 3))
    assert to_builtin(obj) == {
        'name': 'a',
        'color': 'RED',
        'value': None,
        'raw': '01:02',
        'pair': [{'x': 1, 'y': 2}, 3],
    }


def test_to_builtin_mapping():
    assert to_builtin({Color.RED: (1.5, -math.inf)}) == {'RED': [1.5, None]}
    assert to_builtin(Sample) is Sample


@pytest.mark.parametrize(
    'text,column',
    (
        ('abc', 1),
        ('18 4', 4),
        ('18 4\n', 4),
        ('1840 00', 1),
        ('18:40:0g', 7),
        ('\\x18\\x4', 5),
        ('\\y18', 1),
    ),
)
def test_load_dump_malformed(text, column):
    with pytest.raises(DumpFormatError) as e:
        load_dump(text)
    assert str(e.value).startswith(f'line 1, column {column}:')


def test_load_dump_token_boundaries():
    assert load_dump('ab;comment\ncd#more\nef') == b'\xab\xcd\xef'
