"""Cable assembly, media interface technology and link lengths"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.sff8024 import VENDOR_SPECIFIC_START

# Length byte: multiplier code in bits 7-6, magnitude in bits 5-0
LEN_MUL_MASK = 0xC0
LEN_VAL_MASK = 0x3F

# Cable assembly length multipliers, in meters
CBL_ASM_MULTIPLIERS = (0.1, 1.0, 10.0, 100.0)
CBL_ASM_MAX_LEN = 0xFF
CBL_ASM_EXCEEDS_MAX = math.inf

# SMF length multipliers, in km; codes 10 and 11 are not defined
SMF_MULTIPLIERS = (0.1, 1.0, 1.0, 1.0)

# Multimode fiber lengths units, in meters
OM5_LEN_UNIT = 2
OM4_LEN_UNIT = 2
OM3_LEN_UNIT = 2
OM2_LEN_UNIT = 1

# Wavelength units, in nm
WAVELENGTH_UNIT = 0.05
WAVELENGTH_TOL_UNIT = 0.005


class MediaInterfaceTech(IntEnum):
    """Transmitter technology, defined in CMIS Rev. 4, section 8.3.14"""

    VCSEL_850 = 0x00
    VCSEL_1310 = 0x01
    VCSEL_1550 = 0x02
    FP_1310 = 0x03
    DFB_1310 = 0x04
    DFB_1550 = 0x05
    EML_1310 = 0x06
    EML_1550 = 0x07
    OTHERS = 0x08
    DFB_1490 = 0x09
    COPPER_UNEQUAL = 0x0A
    COPPER_PASS_EQUAL = 0x0B
    COPPER_NF_EQUAL = 0x0C
    COPPER_F_EQUAL = 0x0D
    COPPER_N_EQUAL = 0x0E
    COPPER_LINEAR_EQUAL = 0x0F

    @property
    def description(self):
        return _MEDIA_TECH_DESC[self]


# Codes from this one on describe copper cables
COPPER_THRESHOLD = MediaInterfaceTech.COPPER_UNEQUAL

_MEDIA_TECH_DESC = (
    "850 nm VCSEL",
    "1310 nm VCSEL",
    "1550 nm VCSEL",
    "1310 nm FP",
    "1310 nm DFB",
    "1550 nm DFB",
    "1310 nm EML",
    "1550 nm EML",
    "Others/Undefined",
    "1490 nm DFB",
    "Copper cable, unequalized",
    "Copper cable, passive equalized",
    "Copper cable, near and far end limiting active equalizers",
    "Copper cable, far end limiting active equalizers",
    "Copper cable, near end limiting active equalizers",
    "Copper cable, linear active equalizers",
)


@dataclass(frozen=True)
class CableAssembly:
    """Cable assembly length, in meters"""

    length: float

    @property
    def exceeds_max(self) -> bool:
        """The length exceeds 6.3 km and is not encoded"""
        return math.isinf(self.length)


@dataclass(frozen=True)
class MediaTechnology:
    code: int
    description: str


@dataclass(frozen=True)
class OpticalTechnology(MediaTechnology):
    """Laser transmitter; the wavelength is not known when page
    0x01 is missing from the dump
    """

    tech: MediaInterfaceTech
    wavelength: Optional[float] = None
    wavelength_tolerance: Optional[float] = None


@dataclass(frozen=True)
class CopperTechnology(MediaTechnology):
    """Copper cable, attenuation in dB"""

    attenuation_5ghz: int
    attenuation_7ghz: int
    attenuation_12p9ghz: int
    attenuation_25p8ghz: int


@dataclass(frozen=True)
class UnrecognizedTechnology(CopperTechnology):
    """Reserved or vendor specific code above the copper range"""

    pass


Technology = Union[OpticalTechnology, CopperTechnology]


@dataclass(frozen=True)
class LinkLengths:
    """Maximum supported fiber media length; SMF in km, others in m"""

    smf: float
    om5: int
    om4: int
    om3: int
    om2: int


def get_cable_assembly(memory: ModuleMemory) -> CableAssembly:
    """Parsing of cable assembly length, defined
    in CMIS Rev. 4, section 8.3.10

    :param memory: module memory
    :type memory: ModuleMemory
    :return: decoded length
    :rtype: CableAssembly
    """
    return CableAssembly(
        memory.scaled_length(
            layout.CBL_ASM_LEN,
            LEN_MUL_MASK,
            LEN_VAL_MASK,
            CBL_ASM_MULTIPLIERS,
            CBL_ASM_MAX_LEN,
            CBL_ASM_EXCEEDS_MAX,
        )
    )


def get_media_technology(
    memory: ModuleMemory, with_page1: bool = True
) -> Technology:
    """Parsing of media interface technology, defined in CMIS Rev. 4,
    section 8.3.14 (code), 8.4.3 (wavelength) and 8.3.11 (attenuation)

    Only the fields of the family matching the code are read: the
    wavelength for the optical codes, the attenuation for the copper
    ones.

    :param memory: module memory
    :type memory: ModuleMemory
    :param with_page1: page 0x01 is in the dump, defaults to True
    :type with_page1: bool
    :return: decoded technology
    :rtype: Technology
    """
    code = memory.u8(layout.MEDIA_INTF_TECH)

    if code < COPPER_THRESHOLD:
        tech = MediaInterfaceTech(code)
        if not with_page1:
            return OpticalTechnology(code, tech.description, tech)
        return OpticalTechnology(
            code,
            tech.description,
            tech,
            memory.u16_be(layout.NOM_WAVELENGTH) * WAVELENGTH_UNIT,
            memory.u16_be(layout.WAVELENGTH_TOL) * WAVELENGTH_TOL_UNIT,
        )

    attenuation = (
        memory.u8(layout.COPPER_ATT_5GHZ),
        memory.u8(layout.COPPER_ATT_7GHZ),
        memory.u8(layout.COPPER_ATT_12P9GHZ),
        memory.u8(layout.COPPER_ATT_25P8GHZ),
    )
    if code <= MediaInterfaceTech.COPPER_LINEAR_EQUAL:
        return CopperTechnology(
            code, MediaInterfaceTech(code).description, *attenuation
        )
    if code >= VENDOR_SPECIFIC_START:
        desc = "vendor specific"
    else:
        desc = "reserved or unknown"
    return UnrecognizedTechnology(code, desc, *attenuation)


def get_link_lengths(memory: ModuleMemory) -> LinkLengths:
    """Parsing of supported link lengths, defined
    in CMIS Rev. 4, section 8.4.2

    :param memory: module memory
    :type memory: ModuleMemory
    :return: decoded lengths
    :rtype: LinkLengths
    """
    return LinkLengths(
        smf=memory.scaled_length(
            layout.SMF_LEN, LEN_MUL_MASK, LEN_VAL_MASK, SMF_MULTIPLIERS
        ),
        om5=memory.u8(layout.OM5_LEN) * OM5_LEN_UNIT,
        om4=memory.u8(layout.OM4_LEN) * OM4_LEN_UNIT,
        om3=memory.u8(layout.OM3_LEN) * OM3_LEN_UNIT,
        om2=memory.u8(layout.OM2_LEN) * OM2_LEN_UNIT,
    )
