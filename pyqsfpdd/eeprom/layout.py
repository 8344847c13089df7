"""Field addresses of the QSFP-DD memory map

Defined in CMIS Rev. 4, section 8. Every address is a `PageAddress`:
the page index in the dump and the CMIS byte offset in that page.
"""

from pyqsfpdd.eeprom.pages import Page, PageAddress


def _p0(offset):
    return PageAddress(Page.LOWER, offset)


def _p1(offset):
    return PageAddress(Page.ADVERTISING, offset)


def _p2(offset):
    return PageAddress(Page.THRESHOLDS, offset)


def _p11(offset):
    return PageAddress(Page.LANE_STATUS, offset)


# Identifier and revision compliance (page 0x00)
ID = _p0(0x00)
REV_COMPLIANCE = _p0(0x01)

# CLEI code (page 0x00)
CLEI_PRESENT = _p0(0x02)
CLEI_PRESENT_BIT = 5
CLEI_START = _p0(0xBE)
CLEI_END = _p0(0xC7)

# Module-level monitors (page 0x00)
CURR_TEMP = _p0(0x0E)
CURR_VOLTAGE = _p0(0x10)

MODULE_TYPE = _p0(0x55)

# Vendor related information (page 0x00)
VENDOR_NAME_START = _p0(0x81)
VENDOR_NAME_END = _p0(0x90)
VENDOR_OUI_START = _p0(0x91)
VENDOR_OUI_END = _p0(0x93)
VENDOR_PN_START = _p0(0x94)
VENDOR_PN_END = _p0(0xA3)
VENDOR_REV_START = _p0(0xA4)
VENDOR_REV_END = _p0(0xA5)
VENDOR_SN_START = _p0(0xA6)
VENDOR_SN_END = _p0(0xB5)
DATE_CODE_START = _p0(0xB6)
DATE_CODE_END = _p0(0xBD)

# Module power characteristics (page 0x00)
PWR_CLASS = _p0(0xC8)
PWR_CLASS_MASK = 0xE0
PWR_CLASS_SHIFT = 5
PWR_MAX_POWER = _p0(0xC9)

# Cable assembly length (page 0x00)
CBL_ASM_LEN = _p0(0xCA)

CONNECTOR = _p0(0xCB)

# Copper cable attenuation (page 0x00)
COPPER_ATT_5GHZ = _p0(0xCC)
COPPER_ATT_7GHZ = _p0(0xCD)
COPPER_ATT_12P9GHZ = _p0(0xCE)
COPPER_ATT_25P8GHZ = _p0(0xCF)

# Media interface technology (page 0x00)
MEDIA_INTF_TECH = _p0(0xD4)

# Supported link length (page 0x01)
SMF_LEN = _p1(0x84)
OM5_LEN = _p1(0x85)
OM4_LEN = _p1(0x86)
OM3_LEN = _p1(0x87)
OM2_LEN = _p1(0x88)

# Wavelength (page 0x01)
NOM_WAVELENGTH = _p1(0x8A)
WAVELENGTH_TOL = _p1(0x8C)

# Signal integrity controls (page 0x01)
SIG_INTEG_TX = _p1(0xA1)
SIG_INTEG_RX = _p1(0xA2)

# Module-level and lane-specific monitor thresholds (page 0x02),
# four values each: HA, LA, HW, LW
TEMP_THRS = _p2(0x80)
VOLT_THRS = _p2(0x88)
TX_PWR_THRS = _p2(0xB0)
BIAS_THRS = _p2(0xB8)
RX_PWR_THRS = _p2(0xC0)

# Lane-specific flags (page 0x11), one bit per lane
TX_PWR_HALRM = _p11(0x8B)
TX_PWR_LALRM = _p11(0x8C)
TX_PWR_HWARN = _p11(0x8D)
TX_PWR_LWARN = _p11(0x8E)
RX_PWR_HALRM = _p11(0x95)
RX_PWR_LALRM = _p11(0x96)
RX_PWR_HWARN = _p11(0x97)
RX_PWR_LWARN = _p11(0x98)

# Lane-specific monitors (page 0x11), two bytes per lane
TX_PWR = _p11(0x9A)
BIAS = _p11(0xAA)
RX_PWR = _p11(0xBA)
