"""Primitive field decoding from a module memory dump"""

from dataclasses import dataclass, field
from struct import unpack_from
from typing import Any, Optional, Sequence, Union

from pyqsfpdd import config
from pyqsfpdd.eeprom.exceptions import OutOfRange
from pyqsfpdd.eeprom.pages import PageAddress

Address = Union[int, PageAddress]


def _lowest_bit(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


@dataclass(frozen=True)
class ModuleMemory:
    """Read-only module memory dump with its declared length

    All the decoding methods take an absolute offset in the dump, or
    a `PageAddress` that is resolved to one. Any byte outside of the
    declared length, or outside of the data actually supplied, raises
    `OutOfRange`.
    """

    data: bytes = field(repr=False)
    length: int

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise TypeError('declared length must be an integer')
        if self.length < 0:
            raise ValueError('declared length must not be negative')
        # always keep a private immutable copy
        object.__setattr__(self, 'data', bytes(self.data))

    @property
    def available(self) -> int:
        """Number of bytes that can be read"""
        return min(self.length, len(self.data))

    def _offset(self, address: Address, size: int = 1) -> int:
        if isinstance(address, PageAddress):
            offset = address.absolute
        else:
            offset = address
        if offset < 0:
            raise OutOfRange(offset, self.length)
        if offset + size > self.available:
            raise OutOfRange(max(offset, self.available), self.length)
        return offset

    def u8(self, address: Address) -> int:
        return self.data[self._offset(address)]

    def u16_be(self, address: Address) -> int:
        """Two bytes, MSB first

        :param address: offset of the MSB
        :type address: Union[int, PageAddress]
        :return: unsigned value
        :rtype: int
        """
        return unpack_from('!H', self.data, self._offset(address, 2))[0]

    def s16_be(self, address: Address) -> int:
        """Two bytes, MSB first, two's complement

        :param address: offset of the MSB
        :type address: Union[int, PageAddress]
        :return: signed value
        :rtype: int
        """
        return unpack_from('!h', self.data, self._offset(address, 2))[0]

    def bit(self, address: Address, bit: int) -> bool:
        return self.u8(address) & (1 << bit) != 0

    def bitfield(self, address: Address, mask: int, shift: int) -> int:
        return (self.u8(address) & mask) >> shift

    def raw_range(self, start: Address, end: Address) -> bytes:
        """Bytes from `start` to `end`, both included"""
        first = start.absolute if isinstance(start, PageAddress) else start
        last = end.absolute if isinstance(end, PageAddress) else end
        if last < first:
            raise ValueError(f'empty range {first:#x}-{last:#x}')
        offset = self._offset(first, last - first + 1)
        return self.data[offset : offset + last - first + 1]

    def ascii_range(self, start: Address, end: Address) -> str:
        """Text from `start` to `end`, both included

        Trailing spaces are removed, non-printable bytes are replaced
        with `config.ascii_replacement`.

        :param start: first byte
        :type start: Union[int, PageAddress]
        :param end: last byte
        :type end: Union[int, PageAddress]
        :return: decoded text
        :rtype: str
        """
        return ''.join(
            chr(x) if 32 <= x <= 126 else config.ascii_replacement
            for x in self.raw_range(start, end)
        ).rstrip(' ')

    def scaled_length(
        self,
        address: Address,
        multiplier_mask: int,
        value_mask: int,
        multiplier_table: Sequence[float],
        sentinel_value: Optional[int] = None,
        sentinel_result: Any = None,
    ) -> Any:
        """Length encoded as a magnitude and a multiplier code

        If the byte equals `sentinel_value`, `sentinel_result` is returned
        as is. Otherwise the multiplier code selects the scale in
        `multiplier_table`, and the result is `magnitude * scale`.

        :param address: offset of the length byte
        :type address: Union[int, PageAddress]
        :param multiplier_mask: bits of the multiplier code
        :type multiplier_mask: int
        :param value_mask: bits of the magnitude
        :type value_mask: int
        :param multiplier_table: scale for each multiplier code
        :type multiplier_table: Sequence[float]
        :param sentinel_value: reserved byte value, defaults to None
        :type sentinel_value: Optional[int]
        :param sentinel_result: result for the reserved value
        :type sentinel_result: Any
        :return: decoded length
        :rtype: Any
        """
        value = self.u8(address)
        if sentinel_value is not None and value == sentinel_value:
            return sentinel_result
        shift = _lowest_bit(multiplier_mask)
        scale = multiplier_table[(value & multiplier_mask) >> shift]
        return (value & value_mask) * scale
