"""QSFP-DD memory pages and address resolution

The memory dump contains page 0x00 (lower and upper halves) and,
for modules with an optical interface, the upper halves of four
more pages::

    +----------+----------+----------+----------+----------+----------+
    |   Page   |   Page   |   Page   |   Page   |   Page   |   Page   |
    |   0x00   |   0x00   |   0x01   |   0x02   |   0x10   |   0x11   |
    |  (lower) | (higher) | (higher) | (higher) | (higher) | (higher) |
    |   128b   |   128b   |   128b   |   128b   |   128b   |   128b   |
    +----------+----------+----------+----------+----------+----------+

The lower half of the upper pages is not in the dump, but the field
offsets keep the CMIS byte addresses, i.e. 0x80-0xFF. So the position
of a field in the dump is::

    page_index * 0x80 + local_offset
"""

from enum import IntEnum
from typing import NamedTuple

PAGE_SIZE = 0x80

# Page 0x00 lower and upper
EEPROM_LEN_PAGE0 = 2 * PAGE_SIZE
# Page 0x00 lower and upper, pages 0x01, 0x02, 0x10 and 0x11 upper
EEPROM_LEN_ALL_PAGES = 6 * PAGE_SIZE


class Page(IntEnum):
    """Index of each page in the memory dump"""

    # Page 0x00, lower and upper memory, always present
    LOWER = 0
    # Page 0x01, advertising fields
    ADVERTISING = 1
    # Page 0x02, module and lane thresholds
    THRESHOLDS = 2
    # Page 0x10, dynamic control, not decoded
    CONTROL = 3
    # Page 0x11, lane dynamic status
    LANE_STATUS = 4

    @property
    def cmis_page(self):
        """Page number as used in the CMIS documents"""
        return (0x00, 0x01, 0x02, 0x10, 0x11)[self]


class PageAddress(NamedTuple):
    """Field address: page index and CMIS byte offset in the page"""

    page: int
    offset: int

    @property
    def absolute(self) -> int:
        return resolve(self.page, self.offset)

    def shifted(self, delta: int) -> 'PageAddress':
        """Address `delta` bytes further in the same page"""
        return PageAddress(self.page, self.offset + delta)


def resolve(page: int, offset: int) -> int:
    """Absolute position of a field in the memory dump

    :param page: page index in the dump, see `Page`
    :type page: int
    :param offset: byte offset in the page
    :type offset: int
    :return: absolute offset in the dump
    :rtype: int
    """
    return page * PAGE_SIZE + offset


def page_end(page: int) -> int:
    """Length of the dump required to contain the whole page"""
    return resolve(page, 2 * PAGE_SIZE)
