from pyqsfpdd.common import load_dump
from pyqsfpdd.eeprom.exceptions import DumpFormatError


class LoaderHex:
    '''
    Text dump: hex bytes, either escaped or separated by
    spaces or colons, see `pyqsfpdd.common.load_dump()`
    '''

    def __init__(self, data):
        try:
            with open(data, 'r') as f:
                self.raw = load_dump(f)
        except UnicodeDecodeError as e:
            raise DumpFormatError(f'not a text dump: {e}') from e


class LoaderBin:
    '''
    Raw binary dump, e.g. `ethtool -m eth0 raw on > dump.bin`
    '''

    def __init__(self, data):
        with open(data, 'rb') as f:
            self.raw = f.read()


def get_loader(args):
    if args.format == 'hex':
        return LoaderHex(args.data)
    elif args.format == 'bin':
        return LoaderBin(args.data)
    else:
        raise DumpFormatError('data format not supported')
