"""
Section record models for GX-700 patch messages.

One record type per section id. Records are immutable and only ever built
from a message that passed envelope validation; there is no partially
filled record.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import ClassVar, Iterator, Tuple, Union

from gx700.utils.tables import SECTION_NAMES
from gx700.utils.values import SignedValue
from gx700.models.fields import UnmappedField
from gx700.models.modulation import ModulationEffect


@dataclass(frozen=True)
class SectionRecord:
    """Base for all decoded section records."""

    SECTION_ID: ClassVar[int] = -1

    patch_number: int

    @property
    def section_id(self) -> int:
        return self.SECTION_ID

    @property
    def section_name(self) -> str:
        return SECTION_NAMES[self.section_id]

    @property
    def enabled(self) -> bool:
        return True


@dataclass(frozen=True)
class Disabled(SectionRecord):
    """A section that is switched off; its field bytes are not read."""

    disabled_section_id: int

    @property
    def section_id(self) -> int:
        return self.disabled_section_id

    @property
    def enabled(self) -> bool:
        return False


@dataclass(frozen=True)
class Header(SectionRecord):
    """
    Patch header (section 0).

    Only the name is decoded. The blocks around it are kept raw.

    Attributes:
        name: Patch name with trailing spaces removed
        name_raw: The 12 name bytes as stored
        leading: Bytes 8-22, undecoded
        reserved: The 40-byte block at bytes 35-74, undecoded
        checksum: Byte 75, not verified
    """

    SECTION_ID: ClassVar[int] = 0

    name: str
    name_raw: bytes
    leading: bytes
    reserved: bytes
    checksum: int


@dataclass(frozen=True)
class Compression(SectionRecord):
    SECTION_ID: ClassVar[int] = 1

    compressor_type: str
    sustain: int
    attack: int
    tone: SignedValue
    level: int
    unmapped: Tuple[UnmappedField, ...] = ()


# -----------------------------------------------------------------------------
# Wah
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class WahMode:
    """Base for the wah sub-layouts selected by byte 10."""

    MODE: ClassVar[str] = ""


@dataclass(frozen=True)
class PedalWah(WahMode):
    MODE: ClassVar[str] = "Pedal Wah"

    pedal: str
    pedal_min: int
    pedal_max: int
    effect_level: int


@dataclass(frozen=True)
class TouchWah(WahMode):
    MODE: ClassVar[str] = "Touch Wah"

    polarity: str
    sensitivity: int
    manual: int
    peak: int
    effect_level: int


@dataclass(frozen=True)
class AutoWah(WahMode):
    MODE: ClassVar[str] = "Auto Wah"

    polarity: str
    sensitivity: int
    manual: int
    peak: int
    rate: int
    depth: int
    effect_level: int


@dataclass(frozen=True)
class Wah(SectionRecord):
    SECTION_ID: ClassVar[int] = 2

    mode: Union[PedalWah, TouchWah, AutoWah]
    unmapped: Tuple[UnmappedField, ...] = ()


@dataclass(frozen=True)
class Overdrive(SectionRecord):
    SECTION_ID: ClassVar[int] = 3

    distortion_type: str
    drive: int
    bass: SignedValue
    treble: SignedValue
    effect_level: int


@dataclass(frozen=True)
class Preamp(SectionRecord):
    SECTION_ID: ClassVar[int] = 4

    preamp_type: str
    volume: int
    bass: int
    middle: int
    treble: int
    presence: int
    master: int
    bright: str
    gain: str


@dataclass(frozen=True)
class Loop(SectionRecord):
    SECTION_ID: ClassVar[int] = 5

    mode: str
    send_level: int
    return_level: int


@dataclass(frozen=True)
class Equalization(SectionRecord):
    SECTION_ID: ClassVar[int] = 6

    low_gain: SignedValue
    mid_frequency: str
    mid_q: str
    mid_gain: SignedValue
    high_gain: SignedValue
    level: SignedValue


@dataclass(frozen=True)
class SpeakerSimulation(SectionRecord):
    SECTION_ID: ClassVar[int] = 7

    speaker_type: str
    mic_setting: int
    mic_level: int
    direct_level: int


@dataclass(frozen=True)
class NoiseSuppression(SectionRecord):
    SECTION_ID: ClassVar[int] = 8

    threshold: int
    release: int
    detect: str
    effect_level: int


@dataclass(frozen=True)
class Modulation(SectionRecord):
    """Modulation block; ``effect`` holds the layout for the selected kind."""

    SECTION_ID: ClassVar[int] = 9

    effect: ModulationEffect
    unmapped: Tuple[UnmappedField, ...] = ()


# -----------------------------------------------------------------------------
# Delay
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class DelayMode:
    """Base for the delay sub-layouts selected by byte 10."""

    MODE: ClassVar[str] = ""


@dataclass(frozen=True)
class NormalDelay(DelayMode):
    """Center/left/right taps. Times are in milliseconds."""

    MODE: ClassVar[str] = "Normal"

    time_c: int
    time_l: int
    time_r: int
    feedback: int
    level_c: int
    level_l: int
    level_r: int
    direct_level: int


@dataclass(frozen=True)
class DualDelay(DelayMode):
    """Two independent delay lines. Times are in milliseconds."""

    MODE: ClassVar[str] = "Dual"

    time_1: int
    feedback_1: int
    level_1: int
    time_2: int
    feedback_2: int
    level_2: int
    direct_level: int


@dataclass(frozen=True)
class Delay(SectionRecord):
    SECTION_ID: ClassVar[int] = 10

    mode: Union[NormalDelay, DualDelay]


@dataclass(frozen=True)
class Chorus(SectionRecord):
    SECTION_ID: ClassVar[int] = 11

    mode: str
    rate: int
    depth: int
    effect_level: int
    unmapped: Tuple[UnmappedField, ...] = ()


@dataclass(frozen=True)
class TremoloPan(SectionRecord):
    SECTION_ID: ClassVar[int] = 12

    mode: str
    rate: int
    depth: int
    wave: str


@dataclass(frozen=True)
class Reverb(SectionRecord):
    SECTION_ID: ClassVar[int] = 13

    reverb_type: str
    time_raw: int
    pre_delay: int
    low_cut: str
    high_cut: str
    diffusion: int
    effect_level: int
    direct_level: int

    @property
    def time_seconds(self) -> float:
        """Reverb time; stored in tenths of a second."""
        return self.time_raw / 10


def iter_unmapped(record) -> Iterator[UnmappedField]:
    """Yield every unmapped field in a record, including nested variants."""
    if not is_dataclass(record):
        return
    for f in fields(record):
        value = getattr(record, f.name)
        if f.name == "unmapped":
            yield from value
        elif is_dataclass(value):
            yield from iter_unmapped(value)
