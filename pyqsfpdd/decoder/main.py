'''
This tool decodes QSFP-DD (CMIS) module memory dumps, and prints
the module information as text, in the same layout ethtool uses,
or in JSON format.

An example session:

.. code-block:: console

    # dump the module memory
    sudo ethtool -m eth0 raw on > module.bin

    # decode it
    pyqsfpdd-decoder -f bin -d module.bin

    # or get JSON and navigate with jq
    pyqsfpdd-decoder -f bin -d module.bin -o json | \\
        jq '.diagnostics.channels[].rx_power'

hex data dumps
~~~~~~~~~~~~~~

Use `-f hex` or `--format hex`, the default.

Data should use hex bytes representation either in escaped or in
colon or space separated format. Equivalent variants:

* `\\\\x18\\\\x40\\\\x20\\\\x00`
* `18:40:20:00`
* `18 40 20 00`

Comment strings start with `#`, comments and whitespaces are ignored.

declared length
~~~~~~~~~~~~~~~

The memory length is the size of the dump, unless `-l` is used. Only
256 and 768 bytes dumps are complete: with 768 bytes and an optical
module, the lane diagnostics and the thresholds are decoded as well.
'''

import json
import logging
import sys

from pyqsfpdd import config
from pyqsfpdd.config.log import setup_cli
from pyqsfpdd.decoder.args import parse_args
from pyqsfpdd.decoder.loader import get_loader
from pyqsfpdd.eeprom.describe import describe, format_lines
from pyqsfpdd.eeprom.exceptions import EEPROMError
from pyqsfpdd.eeprom.module_info import decode

LOG = logging.getLogger(__name__)


def run(argv=None):
    args = parse_args(argv)
    setup_cli(args.log_level)

    try:
        raw = get_loader(args).raw
        length = len(raw) if args.length is None else args.length
        info = decode(raw, length)
    except (EEPROMError, OSError) as e:
        LOG.error('%s: %s', args.data, e)
        return 1

    if args.output == 'json':
        print(json.dumps(info.dump(), indent=config.json_indent))
    else:
        print('\n'.join(format_lines(describe(info))))
    return 0


if __name__ == "__main__":
    sys.exit(run())
