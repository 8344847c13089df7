import argparse

from pyqsfpdd import config


def declared_length(value):
    length = int(value)
    if length < 0:
        raise argparse.ArgumentTypeError(f'negative length {length}')
    return length


def parse_args(argv=None):
    argument_parser = argparse.ArgumentParser(
        description='Decode a QSFP-DD module memory dump.'
    )
    argument_parser.add_argument(
        '-d', '--data', required=True, help='memory dump file'
    )
    argument_parser.add_argument(
        '-f',
        '--format',
        default='hex',
        choices=('hex', 'bin'),
        help='data file format: hex, bin',
    )
    argument_parser.add_argument(
        '-l',
        '--length',
        help='declared memory length, defaults to the dump size',
        default=None,
        type=declared_length,
    )
    argument_parser.add_argument(
        '-o',
        '--output',
        default='text',
        choices=('text', 'json'),
        help='output format: text, json',
    )
    argument_parser.add_argument(
        '--log-level',
        help='logging level to use',
        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
        default=config.default_log_level,
    )
    return argument_parser.parse_args(argv)
