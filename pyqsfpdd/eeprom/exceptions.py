class EEPROMError(Exception):
    '''
    Base module EEPROM error
    '''

    pass


class OutOfRange(EEPROMError, IndexError):
    '''
    A field read beyond the declared length of the memory dump.

    The decode call is aborted, no partial report is returned.
    '''

    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        super(OutOfRange, self).__init__(
            f'offset {offset:#x} ({offset}) is out of range '
            f'for a {length} bytes module memory'
        )


class DumpFormatError(EEPROMError, ValueError):
    '''
    The memory dump file can not be loaded
    '''

    pass
