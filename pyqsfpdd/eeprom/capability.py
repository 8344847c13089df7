"""Decide which parts of the memory map can be decoded"""

from enum import IntEnum
from logging import getLogger

from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.pages import EEPROM_LEN_ALL_PAGES, page_end

LOG = getLogger(__name__)


class ModuleType(IntEnum):
    """Module type byte, defined in CMIS Rev. 4, section 8.2.1"""

    UNDEFINED = 0x00
    MMF = 0x01
    SMF = 0x02
    PASSIVE_COPPER = 0x03
    ACTIVE_CABLES = 0x04
    BASE_T = 0x05


def get_module_type(memory: ModuleMemory) -> int:
    return memory.u8(layout.MODULE_TYPE)


def has_extended_diagnostics(memory: ModuleMemory) -> bool:
    """Thresholds and lane monitors are available only when an optical
    interface (MMF/SMF) is present AND the dump contains all the pages

    :param memory: module memory
    :type memory: ModuleMemory
    :return: extended diagnostics can be decoded
    :rtype: bool
    """
    module_type = get_module_type(memory)
    optical = module_type in (ModuleType.MMF, ModuleType.SMF)
    complete = memory.length == EEPROM_LEN_ALL_PAGES
    if not (optical and complete):
        LOG.debug(
            'no extended diagnostics: module type %#04x, length %d',
            module_type,
            memory.length,
        )
    return optical and complete


def has_page(memory: ModuleMemory, page: int) -> bool:
    """The upper half of the page is within the declared length"""
    return memory.length >= page_end(page)
