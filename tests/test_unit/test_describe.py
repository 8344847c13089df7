import pytest
from eeprom_image import optical_image

from pyqsfpdd import decode, describe, format_lines
from pyqsfpdd.eeprom import layout
from pyqsfpdd.eeprom.capability import ModuleType
from pyqsfpdd.eeprom.describe import (
    FIELD_WIDTH,
    format_bias,
    format_power,
    format_temp,
    format_vcc,
    on_off,
    yes_no,
)
from pyqsfpdd.eeprom.diagnostics import LANE_FLAGS, Direction


def describe_image(image):
    return describe(decode(bytes(image), len(image)))


def test_formatters():
    assert format_temp(25.5) == "25.50 degrees C / 77.90 degrees F"
    assert format_vcc(3.3) == "3.3000 V"
    assert format_bias(6.0) == "6.000 mA"
    assert format_power(1.0) == "1.0000 mW / 0.00 dBm"
    assert format_power(0.5) == "0.5000 mW / -3.01 dBm"
    assert format_power(0) == "0.0000 mW / -inf dBm"
    assert yes_no(True) == "Yes"
    assert on_off(False) == "Off"


def test_describe_optical():
    pairs = describe_image(optical_image())
    names = [name for name, _ in pairs]
    fields = dict(pairs)

    assert names[0] == "Identifier"
    assert names[-1] == "Revision compliance"
    assert fields["Identifier"].startswith("0x18 (QSFP-DD")
    assert fields["Power class"] == "4"
    assert fields["Max power"] == "12.00W"
    assert fields["Connector"] == "0x0c (MPO Parallel Optic)"
    assert fields["Cable assembly length"] == "0.00m"
    assert fields["Transmitter technology"] == "0x04 (1310 nm DFB)"
    assert fields["Laser wavelength"] == "1310.000nm"
    assert fields["Laser wavelength tolerance"] == "6.500nm"
    assert fields["Module temperature"].startswith("25.50 degrees C")
    assert fields["Module voltage"] == "3.3000 V"
    assert fields["Length (SMF)"] == "10.00km"
    assert fields["Vendor name"] == "ACME OPTICS"
    assert fields["Vendor OUI"] == "00:90:65"
    assert fields["Date code"] == "210315"
    assert fields["Revision compliance"] == "Rev. 4.0"
    assert "CLEI code" not in fields
    assert "Attenuation at 5GHz" not in fields
    # 8 lanes, 3 monitors, 2 x 4 flags; 5 x 4 thresholds
    assert len([x for x in names if "(Channel" in x]) == 8 * (3 + 8)
    assert len([x for x in names if x.endswith("threshold")]) == 20


def test_describe_order():
    names = [name for name, _ in describe_image(optical_image())]
    index = names.index
    assert index("Connector") < index("Cable assembly length")
    assert index("Rx CDR") < index("Transmitter technology")
    assert index("Module voltage") < index(
        "Tx bias current monitor (Channel 1)"
    )
    assert index("Rx input optical power (Channel 8)") < index(
        "Rx power high alarm   (Channel 1)"
    )
    assert index("Rx power low warning  (Channel 8)") < index(
        "Tx power high alarm   (Channel 1)"
    )
    assert index("Tx power low warning  (Channel 8)") < index(
        "Laser bias current high alarm threshold"
    )
    assert index("Laser rx power low warning threshold") < index(
        "Length (SMF)"
    )


@pytest.mark.parametrize('direction', tuple(Direction))
def test_describe_flags(direction):
    image = optical_image()
    image.set_bit(LANE_FLAGS[direction][0], 2)
    fields = dict(describe_image(image))
    other = Direction.RX if direction == Direction.TX else Direction.TX
    on = f"{direction.value} power high alarm   (Channel 3)"
    off = f"{other.value} power high alarm   (Channel 3)"
    assert fields[on] == "On"
    assert fields[off] == "Off"
    assert fields[f"{direction.value} power low alarm    (Channel 3)"] == (
        "Off"
    )


def test_describe_thresholds():
    image = optical_image()
    image.set_u16(layout.TEMP_THRS, 75 * 256)
    fields = dict(describe_image(image))
    assert fields["Module temperature high alarm threshold"] == (
        "75.00 degrees C / 167.00 degrees F"
    )
    assert fields["Laser output power low warning threshold"] == (
        "0.0000 mW / -inf dBm"
    )


def test_describe_copper():
    image = optical_image(ModuleType.PASSIVE_COPPER, length=256)
    image.set(layout.MEDIA_INTF_TECH, 0x0A)
    image.set(layout.COPPER_ATT_5GHZ, 3, 5, 8, 12)
    image.set(layout.CBL_ASM_LEN, 0xFF)
    image.set_bit(layout.CLEI_PRESENT, layout.CLEI_PRESENT_BIT)
    fields = dict(describe_image(image))
    assert fields["Cable assembly length"] == "> 6.3km"
    assert fields["Attenuation at 5GHz"] == "3db"
    assert fields["Attenuation at 25.8GHz"] == "12db"
    assert fields["CLEI code"] == "WMOTE00ARA"
    assert "Laser wavelength" not in fields
    assert "Tx CDR" not in fields
    assert "Length (SMF)" not in fields
    assert not any("(Channel" in x for x in fields)


def test_format_lines():
    lines = format_lines([("Identifier", "0x18"), ("Vendor SN", "X0042")])
    assert lines[0] == "\tIdentifier" + " " * (FIELD_WIDTH - 10) + " : 0x18"
    assert lines[1].endswith(" : X0042")
    assert len(lines[0].split(" : ")[0]) == FIELD_WIDTH + 1
