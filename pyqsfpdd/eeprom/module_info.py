"""QSFP-DD module memory decoding

The entry point is `decode()`::

    from pyqsfpdd import decode

    with open('module.bin', 'rb') as f:
        data = f.read()
    info = decode(data, len(data))
    print(info.identity.vendor_name)
    for channel in info.diagnostics.channels:
        print(channel.lane, channel.rx_power)
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from pyqsfpdd.common import to_builtin
from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.capability import get_module_type, has_page
from pyqsfpdd.eeprom.diagnostics import DiagnosticsReport, get_diagnostics
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.media import (
    CableAssembly,
    LinkLengths,
    Technology,
    get_cable_assembly,
    get_link_lengths,
    get_media_technology,
)
from pyqsfpdd.eeprom.pages import Page
from pyqsfpdd.eeprom.sff8024 import (
    CMIS_IDENTIFIERS,
    describe_connector,
    describe_identifier,
)

LOG = getLogger(__name__)

# Signal integrity controls: bit 0 CDR implemented, bit 1 CDR bypass
SIG_INTEG_CDR_BIT = 0
SIG_INTEG_CDR_BYPASS_BIT = 1

POWER_UNIT = 0.25


@dataclass(frozen=True)
class Identity:
    identifier: int
    identifier_desc: str
    revision: tuple
    connector: int
    connector_desc: str
    vendor_name: str
    vendor_oui: bytes
    vendor_pn: str
    vendor_rev: str
    vendor_sn: str
    date_code: str
    clei_code: Optional[str] = None


@dataclass(frozen=True)
class PowerProfile:
    """Power class as 1-8, max power in W"""

    power_class: int
    max_power: float


@dataclass(frozen=True)
class CdrControls:
    cdr: bool
    cdr_bypass: bool


@dataclass(frozen=True)
class SignalIntegrityControls:
    tx: CdrControls
    rx: CdrControls


@dataclass(frozen=True)
class ModuleInfo:
    """Decoded module memory

    `signal_integrity` and `link_lengths` are None when page 0x01 is
    not in the dump.
    """

    length: int
    module_type: int
    identity: Identity
    power: PowerProfile
    cable: CableAssembly
    media: Technology
    signal_integrity: Optional[SignalIntegrityControls]
    link_lengths: Optional[LinkLengths]
    diagnostics: DiagnosticsReport

    def dump(self) -> dict:
        """JSON-friendly representation"""
        ret = to_builtin(self)
        ret['media']['variant'] = type(self.media).__name__
        return ret


def get_identity(memory: ModuleMemory) -> Identity:
    """Parsing of identifier, revision compliance and vendor
    information, defined in CMIS Rev. 4, sections 8.2.1 and 8.3

    :param memory: module memory
    :type memory: ModuleMemory
    :return: module identity
    :rtype: Identity
    """
    identifier = memory.u8(layout.ID)
    connector = memory.u8(layout.CONNECTOR)
    clei_code = None
    if memory.bit(layout.CLEI_PRESENT, layout.CLEI_PRESENT_BIT):
        clei_code = memory.ascii_range(layout.CLEI_START, layout.CLEI_END)

    return Identity(
        identifier=identifier,
        identifier_desc=describe_identifier(identifier),
        revision=(
            memory.bitfield(layout.REV_COMPLIANCE, 0xF0, 4),
            memory.bitfield(layout.REV_COMPLIANCE, 0x0F, 0),
        ),
        connector=connector,
        connector_desc=describe_connector(connector),
        vendor_name=memory.ascii_range(
            layout.VENDOR_NAME_START, layout.VENDOR_NAME_END
        ),
        vendor_oui=memory.raw_range(
            layout.VENDOR_OUI_START, layout.VENDOR_OUI_END
        ),
        vendor_pn=memory.ascii_range(
            layout.VENDOR_PN_START, layout.VENDOR_PN_END
        ),
        vendor_rev=memory.ascii_range(
            layout.VENDOR_REV_START, layout.VENDOR_REV_END
        ),
        vendor_sn=memory.ascii_range(
            layout.VENDOR_SN_START, layout.VENDOR_SN_END
        ),
        date_code=memory.ascii_range(
            layout.DATE_CODE_START, layout.DATE_CODE_END
        ),
        clei_code=clei_code,
    )


def get_power(memory: ModuleMemory) -> PowerProfile:
    """Parsing of module power characteristics, defined
    in CMIS Rev. 4, section 8.3.9
    """
    return PowerProfile(
        power_class=memory.bitfield(
            layout.PWR_CLASS, layout.PWR_CLASS_MASK, layout.PWR_CLASS_SHIFT
        )
        + 1,
        max_power=memory.u8(layout.PWR_MAX_POWER) * POWER_UNIT,
    )


def get_sig_integrity(memory: ModuleMemory) -> SignalIntegrityControls:
    """Parsing of signal integrity controls, defined
    in CMIS Rev. 4, section 8.4.10
    """
    return SignalIntegrityControls(
        *(
            CdrControls(
                cdr=memory.bit(address, SIG_INTEG_CDR_BIT),
                cdr_bypass=memory.bit(address, SIG_INTEG_CDR_BYPASS_BIT),
            )
            for address in (layout.SIG_INTEG_TX, layout.SIG_INTEG_RX)
        )
    )


def decode(data, length: int) -> ModuleInfo:
    """Decode a QSFP-DD module memory dump

    The dump must contain page 0x00 (256 bytes); modules with an
    optical interface may provide also pages 0x01, 0x02, 0x10 and 0x11
    (768 bytes), see `pyqsfpdd.eeprom.pages`.

    :param data: memory dump
    :type data: bytes
    :param length: declared length of the dump
    :type length: int
    :raises OutOfRange: a field is beyond the declared length
    :return: decoded module information
    :rtype: ModuleInfo
    """
    memory = ModuleMemory(data, length)

    identity = get_identity(memory)
    if identity.identifier not in CMIS_IDENTIFIERS:
        LOG.debug(
            'identifier %#04x does not use the CMIS memory map',
            identity.identifier,
        )

    with_page1 = has_page(memory, Page.ADVERTISING)
    if not with_page1:
        LOG.debug(
            'page %#04x is not in the dump, skip advertising fields',
            Page.ADVERTISING.cmis_page,
        )

    return ModuleInfo(
        length=memory.length,
        module_type=get_module_type(memory),
        identity=identity,
        power=get_power(memory),
        cable=get_cable_assembly(memory),
        media=get_media_technology(memory, with_page1),
        signal_integrity=get_sig_integrity(memory) if with_page1 else None,
        link_lengths=get_link_lengths(memory) if with_page1 else None,
        diagnostics=get_diagnostics(memory),
    )
