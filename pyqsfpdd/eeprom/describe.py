"""Human readable rendering of the decoded module information"""

import math
from enum import Enum
from typing import Mapping, Union

from pyqsfpdd.common import hexdump
from pyqsfpdd.eeprom.diagnostics import (
    AlarmWarningType,
    Direction,
    Quantity,
    ThresholdSet,
)
from pyqsfpdd.eeprom.media import CopperTechnology, OpticalTechnology
from pyqsfpdd.eeprom.module_info import ModuleInfo

FIELD_WIDTH = 41


class ModuleInfoField(Enum):
    """List of parsed fields describing the module information"""

    IDENTIFIER = "Identifier"
    POWER_CLASS = "Power class"
    MAX_POWER = "Max power"
    CONNECTOR = "Connector"
    CBL_ASM_LEN = "Cable assembly length"
    TX_CDR_BYPASS = "Tx CDR bypass control"
    RX_CDR_BYPASS = "Rx CDR bypass control"
    TX_CDR = "Tx CDR"
    RX_CDR = "Rx CDR"
    TRANSMITTER_TECH = "Transmitter technology"
    ATT_5GHZ = "Attenuation at 5GHz"
    ATT_7GHZ = "Attenuation at 7GHz"
    ATT_12P9GHZ = "Attenuation at 12.9GHz"
    ATT_25P8GHZ = "Attenuation at 25.8GHz"
    LASER_WAVELENGTH = "Laser wavelength"
    LASER_WAVELENGTH_TOL = "Laser wavelength tolerance"
    TEMP = "Module temperature"
    VCC = "Module voltage"
    BIAS = "Tx bias current monitor"
    TX_PWR = "Tx output optical power"
    RX_PWR = "Rx input optical power"
    LENGTH_SMF = "Length (SMF)"
    LENGTH_OM5 = "Length (OM5)"
    LENGTH_OM4 = "Length (OM4)"
    LENGTH_OM3 = "Length (OM3 50/125um)"
    LENGTH_OM2 = "Length (OM2 50/125um)"
    VENDOR_NAME = "Vendor name"
    VENDOR_OUI = "Vendor OUI"
    VENDOR_PN = "Vendor PN"
    VENDOR_REV = "Vendor rev"
    VENDOR_SN = "Vendor SN"
    DATE_CODE = "Date code"
    CLEI_CODE = "CLEI code"
    REV_COMPLIANCE = "Revision compliance"


# Threshold labels and the order they are printed in
THRESHOLD_LABELS = (
    (Quantity.BIAS, "Laser bias current"),
    (Quantity.TX_POWER, "Laser output power"),
    (Quantity.TEMP, "Module temperature"),
    (Quantity.VOLTAGE, "Module voltage"),
    (Quantity.RX_POWER, "Laser rx power"),
)

AW_LABELS = {
    AlarmWarningType.HIGH_ALARM: "high alarm",
    AlarmWarningType.LOW_ALARM: "low alarm",
    AlarmWarningType.HIGH_WARNING: "high warning",
    AlarmWarningType.LOW_WARNING: "low warning",
}

# Lane flags labels, aligned as ethtool prints them
LANE_AW_LABELS = (
    "%s power high alarm   (Channel %d)",
    "%s power low alarm    (Channel %d)",
    "%s power high warning (Channel %d)",
    "%s power low warning  (Channel %d)",
)

Pairs = list[tuple[str, str]]


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def on_off(value: bool) -> str:
    return "On" if value else "Off"


def format_temp(value: float) -> str:
    return f"{value:.2f} degrees C / {value * 1.8 + 32:.2f} degrees F"


def format_vcc(value: float) -> str:
    return f"{value:.4f} V"


def format_bias(value: float) -> str:
    return f"{value:.3f} mA"


def format_power(value: float) -> str:
    """Optical power in mW and dBm"""
    dbm = 10 * math.log10(value) if value > 0 else -math.inf
    return f"{value:.4f} mW / {dbm:.2f} dBm"


FORMATTERS = {
    Quantity.TEMP: format_temp,
    Quantity.VOLTAGE: format_vcc,
    Quantity.BIAS: format_bias,
    Quantity.TX_POWER: format_power,
    Quantity.RX_POWER: format_power,
}


def _code(code: int, desc: str) -> str:
    return f"{code:#04x} ({desc})"


def _field(name: Union[ModuleInfoField, str], value: str) -> tuple[str, str]:
    if isinstance(name, ModuleInfoField):
        name = name.value
    return (name, value)


def describe_media(info: ModuleInfo) -> Pairs:
    media = info.media
    ret = [
        _field(
            ModuleInfoField.TRANSMITTER_TECH,
            _code(media.code, media.description),
        )
    ]
    if isinstance(media, CopperTechnology):
        ret.extend(
            _field(name, f"{value}db")
            for name, value in (
                (ModuleInfoField.ATT_5GHZ, media.attenuation_5ghz),
                (ModuleInfoField.ATT_7GHZ, media.attenuation_7ghz),
                (ModuleInfoField.ATT_12P9GHZ, media.attenuation_12p9ghz),
                (ModuleInfoField.ATT_25P8GHZ, media.attenuation_25p8ghz),
            )
        )
    elif isinstance(media, OpticalTechnology) and media.wavelength is not None:
        ret.append(
            _field(
                ModuleInfoField.LASER_WAVELENGTH,
                f"{media.wavelength:.3f}nm",
            )
        )
        ret.append(
            _field(
                ModuleInfoField.LASER_WAVELENGTH_TOL,
                f"{media.wavelength_tolerance:.3f}nm",
            )
        )
    return ret


def describe_thresholds(thresholds: Mapping) -> Pairs:
    ret = []
    for quantity, label in THRESHOLD_LABELS:
        values: ThresholdSet = thresholds[quantity]
        for aw_type, value in zip(AlarmWarningType, values):
            ret.append(
                _field(
                    f"{label} {AW_LABELS[aw_type]} threshold",
                    FORMATTERS[quantity](value),
                )
            )
    return ret


def describe_diagnostics(info: ModuleInfo) -> Pairs:
    diag = info.diagnostics
    ret = [
        _field(ModuleInfoField.TEMP, format_temp(diag.temperature)),
        _field(ModuleInfoField.VCC, format_vcc(diag.voltage)),
    ]
    if not diag.extended:
        return ret

    for name, attr, formatter in (
        (ModuleInfoField.BIAS, 'bias', format_bias),
        (ModuleInfoField.TX_PWR, 'tx_power', format_power),
        (ModuleInfoField.RX_PWR, 'rx_power', format_power),
    ):
        for channel in diag.channels:
            ret.append(
                _field(
                    f"{name.value} (Channel {channel.lane + 1})",
                    formatter(getattr(channel, attr)),
                )
            )

    for direction in (Direction.RX, Direction.TX):
        for channel in diag.channels:
            for label, flag in zip(LANE_AW_LABELS, channel.flags(direction)):
                ret.append(
                    _field(
                        label % (direction.value, channel.lane + 1),
                        on_off(flag),
                    )
                )

    ret.extend(describe_thresholds(diag.thresholds))
    return ret


def describe(info: ModuleInfo) -> Pairs:
    """Module information as (field, value) pairs, in the
    order ethtool prints them for QSFP-DD modules

    :param info: decoded module information
    :type info: ModuleInfo
    :return: field names and rendered values
    :rtype: list[tuple[str, str]]
    """
    identity = info.identity
    ret = [
        _field(
            ModuleInfoField.IDENTIFIER,
            _code(identity.identifier, identity.identifier_desc),
        ),
        _field(ModuleInfoField.POWER_CLASS, str(info.power.power_class)),
        _field(ModuleInfoField.MAX_POWER, f"{info.power.max_power:.2f}W"),
        _field(
            ModuleInfoField.CONNECTOR,
            _code(identity.connector, identity.connector_desc),
        ),
    ]

    if info.cable.exceeds_max:
        ret.append(_field(ModuleInfoField.CBL_ASM_LEN, "> 6.3km"))
    else:
        ret.append(
            _field(ModuleInfoField.CBL_ASM_LEN, f"{info.cable.length:.2f}m")
        )

    si = info.signal_integrity
    if si is not None:
        ret.extend(
            (
                _field(
                    ModuleInfoField.TX_CDR_BYPASS, yes_no(si.tx.cdr_bypass)
                ),
                _field(
                    ModuleInfoField.RX_CDR_BYPASS, yes_no(si.rx.cdr_bypass)
                ),
                _field(ModuleInfoField.TX_CDR, yes_no(si.tx.cdr)),
                _field(ModuleInfoField.RX_CDR, yes_no(si.rx.cdr)),
            )
        )

    ret.extend(describe_media(info))
    ret.extend(describe_diagnostics(info))

    lengths = info.link_lengths
    if lengths is not None:
        ret.extend(
            (
                _field(ModuleInfoField.LENGTH_SMF, f"{lengths.smf:.2f}km"),
                _field(ModuleInfoField.LENGTH_OM5, f"{lengths.om5}m"),
                _field(ModuleInfoField.LENGTH_OM4, f"{lengths.om4}m"),
                _field(ModuleInfoField.LENGTH_OM3, f"{lengths.om3}m"),
                _field(ModuleInfoField.LENGTH_OM2, f"{lengths.om2}m"),
            )
        )

    ret.extend(
        (
            _field(ModuleInfoField.VENDOR_NAME, identity.vendor_name),
            _field(ModuleInfoField.VENDOR_OUI, hexdump(identity.vendor_oui)),
            _field(ModuleInfoField.VENDOR_PN, identity.vendor_pn),
            _field(ModuleInfoField.VENDOR_REV, identity.vendor_rev),
            _field(ModuleInfoField.VENDOR_SN, identity.vendor_sn),
            _field(ModuleInfoField.DATE_CODE, identity.date_code),
        )
    )
    if identity.clei_code is not None:
        ret.append(_field(ModuleInfoField.CLEI_CODE, identity.clei_code))

    major, minor = identity.revision
    ret.append(_field(ModuleInfoField.REV_COMPLIANCE, f"Rev. {major}.{minor}"))
    return ret


def format_lines(pairs: Pairs) -> list[str]:
    return [f"\t{name:<{FIELD_WIDTH}} : {value}" for name, value in pairs]
