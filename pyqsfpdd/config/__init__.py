'''
Process-wide settings.

The values are read at call time, so a caller may assign them
at runtime::

    from pyqsfpdd import config

    config.ascii_replacement = '?'
'''

# printed instead of non-printable bytes in ASCII fields
ascii_replacement = '_'

# pyqsfpdd-decoder output
json_indent = 4
log_format = '%(asctime)s %(levelname)s [%(name)s:%(funcName)s] %(message)s'
default_log_level = 'WARNING'
