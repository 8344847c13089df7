##
#
# This module contains all the public symbols from the library.
#

##
#
# Version
#
from pyqsfpdd.config.version import __version__

##
#
# Logging setup: the library logs to the 'pyqsfpdd' logger,
# with a NullHandler attached
#
from pyqsfpdd.config import log
from pyqsfpdd.eeprom import (
    DumpFormatError,
    EEPROMError,
    ModuleInfo,
    ModuleMemory,
    OutOfRange,
    decode,
)
from pyqsfpdd.eeprom.describe import describe, format_lines

__all__ = [
    'DumpFormatError',
    'EEPROMError',
    'ModuleInfo',
    'ModuleMemory',
    'OutOfRange',
    '__version__',
    'decode',
    'describe',
    'format_lines',
    'log',
]
