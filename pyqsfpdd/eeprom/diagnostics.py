"""Module-level and lane-specific diagnostics

Relevant documents, CMIS Rev. 4:

* section 8.2.4, module-level monitors
* section 8.5.1 and 8.5.2, module and lane thresholds
* section 8.8.2 and 8.8.3, lane flags and lane monitors
"""

from dataclasses import dataclass, field
from enum import Enum
from logging import getLogger
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.capability import has_extended_diagnostics
from pyqsfpdd.eeprom.fields import ModuleMemory
from pyqsfpdd.eeprom.pages import PageAddress

LOG = getLogger(__name__)

MAX_CHANNELS = 8


class Quantity(Enum):
    """Monitored quantities"""

    TEMP = "TEMP"
    VOLTAGE = "VCC"
    BIAS = "BIAS"
    TX_POWER = "TX_PWR"
    RX_POWER = "RX_PWR"


class AlarmWarningType(Enum):
    """Threshold classes, in the order used by the memory map"""

    HIGH_ALARM = "HALRM"
    LOW_ALARM = "LALRM"
    HIGH_WARNING = "HWARN"
    LOW_WARNING = "LWARN"


class Direction(Enum):
    TX = "Tx"
    RX = "Rx"


class Measure(NamedTuple):
    signed: bool
    # raw value -> engineering unit
    convert: Callable[[int], float]


# temperature: signed, 1/256 °C
# voltage: 0.1 mV, in V
# bias current: 2 uA, in mA
# optical power: 0.1 uW, in mW
MEASURES = MappingProxyType(
    {
        Quantity.TEMP: Measure(True, lambda x: x / 256),
        Quantity.VOLTAGE: Measure(False, lambda x: x / 10000),
        Quantity.BIAS: Measure(False, lambda x: x / 500),
        Quantity.TX_POWER: Measure(False, lambda x: x / 10000),
        Quantity.RX_POWER: Measure(False, lambda x: x / 10000),
    }
)

# Four 2-bytes values per quantity, see AlarmWarningType for the order
THRESHOLDS = (
    (Quantity.TEMP, layout.TEMP_THRS),
    (Quantity.VOLTAGE, layout.VOLT_THRS),
    (Quantity.BIAS, layout.BIAS_THRS),
    (Quantity.TX_POWER, layout.TX_PWR_THRS),
    (Quantity.RX_POWER, layout.RX_PWR_THRS),
)

# Eight 2-bytes values per quantity, one per lane
LANE_MONITORS = (
    (Quantity.BIAS, layout.BIAS),
    (Quantity.TX_POWER, layout.TX_PWR),
    (Quantity.RX_POWER, layout.RX_PWR),
)

# One byte per class and direction, bit N is lane N
LANE_FLAGS = MappingProxyType(
    {
        Direction.TX: (
            layout.TX_PWR_HALRM,
            layout.TX_PWR_LALRM,
            layout.TX_PWR_HWARN,
            layout.TX_PWR_LWARN,
        ),
        Direction.RX: (
            layout.RX_PWR_HALRM,
            layout.RX_PWR_LALRM,
            layout.RX_PWR_HWARN,
            layout.RX_PWR_LWARN,
        ),
    }
)


class AlarmWarningFlags(NamedTuple):
    high_alarm: bool
    low_alarm: bool
    high_warning: bool
    low_warning: bool


class ThresholdSet(NamedTuple):
    high_alarm: float
    low_alarm: float
    high_warning: float
    low_warning: float


@dataclass(frozen=True)
class ChannelDiagnostics:
    """Monitors and flags of one lane; lanes are numbered from 0"""

    lane: int
    bias: float
    tx_power: float
    rx_power: float
    tx_flags: AlarmWarningFlags
    rx_flags: AlarmWarningFlags

    def flags(self, direction: Direction) -> AlarmWarningFlags:
        if direction == Direction.TX:
            return self.tx_flags
        return self.rx_flags


@dataclass(frozen=True)
class DiagnosticsReport:
    """Module temperature and voltage are always present; lane
    diagnostics and thresholds are either all present, or all absent
    """

    temperature: float
    voltage: float
    channels: tuple = ()
    thresholds: Mapping[Quantity, ThresholdSet] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def extended(self) -> bool:
        return len(self.channels) > 0


def read_measure(
    memory: ModuleMemory, quantity: Quantity, address: PageAddress
) -> float:
    """Read a 2-bytes value and convert it to the quantity unit

    :param memory: module memory
    :type memory: ModuleMemory
    :param quantity: monitored quantity
    :type quantity: Quantity
    :param address: address of the MSB
    :type address: PageAddress
    :return: value in the quantity unit
    :rtype: float
    """
    measure = MEASURES[quantity]
    if measure.signed:
        raw = memory.s16_be(address)
    else:
        raw = memory.u16_be(address)
    return measure.convert(raw)


def get_lane_flags(
    memory: ModuleMemory, direction: Direction, lane: int
) -> AlarmWarningFlags:
    return AlarmWarningFlags(
        *(memory.bit(address, lane) for address in LANE_FLAGS[direction])
    )


def get_channel(memory: ModuleMemory, lane: int) -> ChannelDiagnostics:
    """Lane monitors are laid out by quantity, so the value of the
    lane N is 2 * N bytes after the value of the lane 0
    """
    monitors = {
        quantity: read_measure(memory, quantity, base.shifted(lane * 2))
        for quantity, base in LANE_MONITORS
    }
    return ChannelDiagnostics(
        lane=lane,
        bias=monitors[Quantity.BIAS],
        tx_power=monitors[Quantity.TX_POWER],
        rx_power=monitors[Quantity.RX_POWER],
        tx_flags=get_lane_flags(memory, Direction.TX, lane),
        rx_flags=get_lane_flags(memory, Direction.RX, lane),
    )


def get_thresholds(memory: ModuleMemory) -> Mapping[Quantity, ThresholdSet]:
    return MappingProxyType(
        {
            quantity: ThresholdSet(
                *(
                    read_measure(memory, quantity, base.shifted(index * 2))
                    for index, _ in enumerate(AlarmWarningType)
                )
            )
            for quantity, base in THRESHOLDS
        }
    )


def get_diagnostics(memory: ModuleMemory) -> DiagnosticsReport:
    """Parsing of module and lane diagnostics

    The current temperature and voltage are always decoded. The lane
    monitors, the lane flags and the thresholds are decoded only if
    `has_extended_diagnostics()` allows it.

    :param memory: module memory
    :type memory: ModuleMemory
    :return: diagnostics report
    :rtype: DiagnosticsReport
    """
    temperature = read_measure(memory, Quantity.TEMP, layout.CURR_TEMP)
    voltage = read_measure(memory, Quantity.VOLTAGE, layout.CURR_VOLTAGE)

    if not has_extended_diagnostics(memory):
        return DiagnosticsReport(temperature, voltage)

    channels = tuple(get_channel(memory, lane) for lane in range(MAX_CHANNELS))
    thresholds = get_thresholds(memory)
    LOG.debug('decoded %d lanes and thresholds', len(channels))
    return DiagnosticsReport(temperature, voltage, channels, thresholds)
