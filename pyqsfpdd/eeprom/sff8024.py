"""SFF-8024 identifier and connector references"""

from enum import IntEnum
from types import MappingProxyType


class Sff8024Id(IntEnum):
    """Module identifiers, defined in SFF-8024 specification, section 4.2"""

    UNKNOWN = 0x00
    GBIC = 0x01
    SOLDERED_MODULE = 0x02
    SFP = 0x03
    XBI_300_PIN = 0x04
    XENPAK = 0x05
    XFP = 0x06
    XFF = 0x07
    XFP_E = 0x08
    XPAK = 0x09
    X2 = 0x0A
    DWDM_SFP = 0x0B
    QSFP = 0x0C
    QSFP_PLUS = 0x0D
    CXP = 0x0E
    HD4X = 0x0F
    HD8X = 0x10
    QSFP28 = 0x11
    CXP2 = 0x12
    CDFP = 0x13
    HD4X_FANOUT = 0x14
    HD8X_FANOUT = 0x15
    CDFP_S3 = 0x16
    MICRO_QSFP = 0x17
    QSFP_DD = 0x18
    OSFP = 0x19
    DSFP = 0x1B
    QSFP_PLUS_CMIS = 0x1E
    SFP_DD_CMIS = 0x1F
    SFP_PLUS_CMIS = 0x20


class Sff8024Connector(IntEnum):
    """Connector references, defined in SFF-8024 specification, section 4.4"""

    UNKNOWN = 0x00
    SC = 0x01
    FC_STYLE_1 = 0x02
    FC_STYLE_2 = 0x03
    BNC_TNC = 0x04
    FC_COAX = 0x05
    FIBER_JACK = 0x06
    LC = 0x07
    MT_RJ = 0x08
    MU = 0x09
    SG = 0x0A
    OPT_PT = 0x0B
    MPO = 0x0C
    MPO_2 = 0x0D
    # 0E-1F are reserved
    HSDC_II = 0x20
    COPPER_PT = 0x21
    RJ45 = 0x22
    NO_SEPARABLE = 0x23
    MXC_2X16 = 0x24
    CS_OPTICAL = 0x25
    CS_OPTICAL_MINI = 0x26
    MPO_2X12 = 0x27
    MPO_1X16 = 0x28
    NO_SEP_QSFP_DD = 0x6F


# Identifiers of the modules using the CMIS memory map
CMIS_IDENTIFIERS = (
    Sff8024Id.QSFP_DD,
    Sff8024Id.OSFP,
    Sff8024Id.DSFP,
    Sff8024Id.QSFP_PLUS_CMIS,
    Sff8024Id.SFP_DD_CMIS,
    Sff8024Id.SFP_PLUS_CMIS,
)

VENDOR_SPECIFIC_START = 0x80

IDENTIFIER_DESC = MappingProxyType(
    {
        Sff8024Id.UNKNOWN: "no module present, unknown, or unspecified",
        Sff8024Id.GBIC: "GBIC",
        Sff8024Id.SOLDERED_MODULE: "module soldered to motherboard",
        Sff8024Id.SFP: "SFP",
        Sff8024Id.XBI_300_PIN: "300 pin XBI",
        Sff8024Id.XENPAK: "XENPAK",
        Sff8024Id.XFP: "XFP",
        Sff8024Id.XFF: "XFF",
        Sff8024Id.XFP_E: "XFP-E",
        Sff8024Id.XPAK: "XPAK",
        Sff8024Id.X2: "X2",
        Sff8024Id.DWDM_SFP: "DWDM-SFP",
        Sff8024Id.QSFP: "QSFP",
        Sff8024Id.QSFP_PLUS: "QSFP+",
        Sff8024Id.CXP: "CXP",
        Sff8024Id.HD4X: "Shielded Mini Multilane HD 4X",
        Sff8024Id.HD8X: "Shielded Mini Multilane HD 8X",
        Sff8024Id.QSFP28: "QSFP28",
        Sff8024Id.CXP2: "CXP2/CXP28",
        Sff8024Id.CDFP: "CDFP Style 1/Style 2",
        Sff8024Id.HD4X_FANOUT: "Shielded Mini Multilane HD 4X Fanout Cable",
        Sff8024Id.HD8X_FANOUT: "Shielded Mini Multilane HD 8X Fanout Cable",
        Sff8024Id.CDFP_S3: "CDFP Style 3",
        Sff8024Id.MICRO_QSFP: "microQSFP",
        Sff8024Id.QSFP_DD: (
            "QSFP-DD Double Density 8X Pluggable Transceiver (INF-8628)"
        ),
        Sff8024Id.OSFP: "OSFP 8X Pluggable Transceiver",
        Sff8024Id.DSFP: "DSFP Dual Small Form Factor Pluggable Transceiver",
        Sff8024Id.QSFP_PLUS_CMIS: (
            "QSFP+ or later with Common Management"
            " Interface Specification (CMIS)"
        ),
        Sff8024Id.SFP_DD_CMIS: (
            "SFP-DD Double Density 2X Pluggable Transceiver with"
            " Common Management Interface Specification (CMIS)"
        ),
        Sff8024Id.SFP_PLUS_CMIS: (
            "SFP+ and later with Common Management"
            " Interface Specification (CMIS)"
        ),
    }
)

CONNECTOR_DESC = MappingProxyType(
    {
        Sff8024Connector.UNKNOWN: "unknown or unspecified",
        Sff8024Connector.SC: "SC",
        Sff8024Connector.FC_STYLE_1: "Fibre Channel Style 1 copper",
        Sff8024Connector.FC_STYLE_2: "Fibre Channel Style 2 copper",
        Sff8024Connector.BNC_TNC: "BNC/TNC",
        Sff8024Connector.FC_COAX: "Fibre Channel coaxial headers",
        Sff8024Connector.FIBER_JACK: "FibreJack",
        Sff8024Connector.LC: "LC",
        Sff8024Connector.MT_RJ: "MT-RJ",
        Sff8024Connector.MU: "MU",
        Sff8024Connector.SG: "SG",
        Sff8024Connector.OPT_PT: "Optical pigtail",
        Sff8024Connector.MPO: "MPO Parallel Optic",
        Sff8024Connector.MPO_2: "MPO Parallel Optic - 2x16",
        Sff8024Connector.HSDC_II: "HSSDC II",
        Sff8024Connector.COPPER_PT: "Copper pigtail",
        Sff8024Connector.RJ45: "RJ45",
        Sff8024Connector.NO_SEPARABLE: "No separable connector",
        Sff8024Connector.MXC_2X16: "MXC 2x16",
        Sff8024Connector.CS_OPTICAL: "CS optical connector",
        Sff8024Connector.CS_OPTICAL_MINI: "Mini CS optical connector",
        Sff8024Connector.MPO_2X12: "MPO 2x12",
        Sff8024Connector.MPO_1X16: "MPO 1x16",
        Sff8024Connector.NO_SEP_QSFP_DD: "No separable connector",
    }
)


def _describe(table, code: int) -> str:
    if code in table:
        return table[code]
    if code >= VENDOR_SPECIFIC_START:
        return "vendor specific"
    return "reserved or unknown"


def describe_identifier(code: int) -> str:
    """Description of a module identifier, SFF-8024 section 4.2

    :param code: identifier byte
    :type code: int
    :return: description
    :rtype: str
    """
    return _describe(IDENTIFIER_DESC, code)


def describe_connector(code: int) -> str:
    """Description of a connector type, SFF-8024 section 4.4

    :param code: connector byte
    :type code: int
    :return: description
    :rtype: str
    """
    return _describe(CONNECTOR_DESC, code)
