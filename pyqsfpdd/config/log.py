'''
Library logger.

The library only logs to the `pyqsfpdd` logger, and never configures
the root logger: that is up to the application. Command line tools
call `setup_cli()`.
'''
import logging

from pyqsfpdd import config

log = logging.getLogger('pyqsfpdd')
log.setLevel(0)
log.addHandler(logging.NullHandler())


def setup_cli(level=None):
    '''Log to stderr using `config.log_format`

    :param level: level name, defaults to `config.default_log_level`
    :type level: Optional[str]
    '''
    logging.basicConfig(format=config.log_format)
    log.setLevel(level or config.default_log_level)
