# -*- coding: utf-8 -*-
'''
Common utilities
'''
import dataclasses
import io
import math
import string
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pyqsfpdd.eeprom.exceptions import DumpFormatError

SEPARATORS = (' ', '\t', '\n', '\r', ':')
COMMENTS = ('#', ';')


def hexdump(payload: bytes, length: int = 0) -> str:
    '''
    Represent byte string as hex -- for debug purposes
    '''
    return ':'.join('{0:02x}'.format(c) for c in payload[:length] or payload)


def load_dump(
    f: Union[str, io.StringIO], meta: Optional[dict[str, str]] = None
) -> bytes:
    '''
    Load a memory dump from an open file-like object or a string.

    Supported dump formats:

    * strace hex dump (\\x00\\x00...)
    * ethtool style hex dump (00:00:... or 00 00 ...)

    Simple markup is also supported. Any data from # or ;
    till the end of the string is a comment and ignored.
    Any data after . till EOF is ignored as well.

    With #: label starts an optional data block. All the data
    in the block will be read and returned via metadata dictionary,
    under the label key.
    '''
    data = bytearray()
    meta_data = None
    meta_label = None
    io_obj: Union[io.StringIO, str]
    if isinstance(f, str):
        io_obj = io.StringIO()
        io_obj.write(f)
        io_obj.seek(0)
    else:
        io_obj = f

    for lineno, a in enumerate(io_obj.readlines(), 1):
        if meta_data is not None:
            meta_data += a
            continue

        offset = 0
        length = len(a)
        try:
            while offset < length:
                if a[offset] in SEPARATORS:
                    offset += 1
                elif a[offset] in COMMENTS:
                    if a[offset : offset + 2] == '#:':
                        # read data block until EOF
                        meta_label = a.split(':')[1].strip()
                        meta_data = ''
                    break
                elif a[offset] == '.':
                    return _finish(data, meta, meta_label, meta_data)
                elif a[offset] == '\\':
                    # strace hex format
                    if a[offset + 1 : offset + 2] != 'x':
                        raise ValueError('expected \\x escape')
                    data.append(_parse_byte(a[offset + 2 : offset + 4]))
                    offset += 4
                else:
                    # plain hex format, two digits per byte
                    data.append(_parse_byte(a[offset : offset + 2]))
                    tail = a[offset + 2 : offset + 3]
                    if tail and tail not in SEPARATORS + COMMENTS:
                        raise ValueError(f'unexpected {tail!r} after a byte')
                    offset += 2
        except ValueError as e:
            raise DumpFormatError(
                f'line {lineno}, column {offset + 1}: {e}'
            ) from e

    return _finish(data, meta, meta_label, meta_data)


def _parse_byte(token: str) -> int:
    if len(token) != 2 or any(x not in string.hexdigits for x in token):
        raise ValueError(f'invalid hex byte {token.strip()!r}')
    return int(token, 16)


def _finish(data, meta, meta_label, meta_data):
    if isinstance(meta, dict):
        if meta_data is not None and meta_label is not None:
            meta[meta_label] = meta_data
    return bytes(data)


def to_builtin(obj: Any) -> Any:
    '''
    Convert decoded objects to JSON-friendly builtin types.

    Dataclasses and named tuples become dicts, enums are replaced
    with their names, bytes with hex strings; infinite values are
    not representable in JSON and become None.
    '''
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: to_builtin(getattr(obj, field.name))
            for field in dataclasses.fields(obj)
        }
    if isinstance(obj, tuple) and hasattr(obj, '_asdict'):
        return {
            key: to_builtin(value) for key, value in obj._asdict().items()
        }
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, Mapping):
        return {
            to_builtin(key): to_builtin(value) for key, value in obj.items()
        }
    if isinstance(obj, (tuple, list)):
        return [to_builtin(x) for x in obj]
    if isinstance(obj, (bytes, bytearray)):
        return hexdump(obj)
    if isinstance(obj, float) and math.isinf(obj):
        return None
    return obj
