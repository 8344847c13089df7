'''
QSFP-DD (CMIS) module memory decoding.
'''
from pyqsfpdd.eeprom.exceptions import DumpFormatError, EEPROMError, OutOfRange
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.module_info import ModuleInfo, decode

__all__ = [
    'DumpFormatError',
    'EEPROMError',
    'ModuleInfo',
    'ModuleMemory',
    'OutOfRange',
    'decode',
]
