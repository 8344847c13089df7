import pytest

from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.pages import (
    EEPROM_LEN_ALL_PAGES,
    EEPROM_LEN_PAGE0,
    Page,
    PageAddress,
    page_end,
    resolve,
)

addresses = [
    (name, value)
    for name, value in vars(layout).items()
    if isinstance(value, PageAddress)
]


def test_resolve():
    assert resolve(Page.LOWER, 0x0E) == 0x0E
    assert resolve(Page.LOWER, 0xD4) == 0xD4
    assert resolve(Page.ADVERTISING, 0x8A) == 0x10A
    assert resolve(Page.THRESHOLDS, 0x80) == 0x180
    assert resolve(Page.LANE_STATUS, 0x9A) == 0x29A


def test_page_end():
    assert page_end(Page.LOWER) == EEPROM_LEN_PAGE0
    assert page_end(Page.ADVERTISING) == 384
    assert page_end(Page.LANE_STATUS) == EEPROM_LEN_ALL_PAGES


def test_cmis_page():
    assert [x.cmis_page for x in Page] == [0x00, 0x01, 0x02, 0x10, 0x11]


def test_page_address():
    address = PageAddress(Page.LANE_STATUS, 0xAA)
    assert address.absolute == 4 * 128 + 0xAA
    assert address.shifted(14) == PageAddress(Page.LANE_STATUS, 0xB8)
    # addresses are values, shifted() returns a new one
    assert address.offset == 0xAA


@pytest.mark.parametrize('name,address', addresses)
def test_layout_in_dump(name, address):
    assert address.absolute < EEPROM_LEN_ALL_PAGES
    assert address.offset < 2 * 128
    if address.page != Page.LOWER:
        # upper pages carry only the upper half
        assert address.offset >= 0x80
