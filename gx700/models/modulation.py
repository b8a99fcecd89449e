"""
Modulation effect models.

The modulation block (section 9) stores the parameters of all seven
effect kinds side by side; byte 10 selects which one is active. Each
kind is its own record type holding only that kind's parameters.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from gx700.models.fields import UnmappedField
from gx700.utils.values import PanPair, SignedValue


@dataclass(frozen=True)
class ModulationEffect:
    """Base for modulation kinds."""

    KIND: ClassVar[str] = ""


@dataclass(frozen=True)
class Flanger(ModulationEffect):
    KIND: ClassVar[str] = "Flanger"

    rate: int
    depth: int
    manual: int
    resonance: int
    separation: int
    effect_level: int


@dataclass(frozen=True)
class Phaser(ModulationEffect):
    KIND: ClassVar[str] = "Phaser"

    stages: str
    rate: int
    depth: int
    manual: int
    resonance: int
    effect_level: int


@dataclass(frozen=True)
class PitchShifterVoice:
    """
    One pitch shifter voice.

    Attributes:
        pitch: Interval in semitones (bias 24, -24..+24)
        fine: Fine tune in cents (bias 50, -50..+50)
        pre_delay: Milliseconds, packed base 128
        level: Voice level
        pan: Voice position
    """

    pitch: SignedValue
    fine: SignedValue
    pre_delay: int
    level: int
    pan: PanPair


@dataclass(frozen=True)
class PitchShifter(ModulationEffect):
    KIND: ClassVar[str] = "Pitch Shifter"

    voices: str
    speed: str
    voice_1: PitchShifterVoice
    voice_2: PitchShifterVoice
    feedback: int
    direct_level: int


@dataclass(frozen=True)
class Harmonist(ModulationEffect):
    """
    Intelligent pitch shifter.

    Only the key, the first voice and the balance are mapped. The second
    voice and the per-voice pan bytes are surfaced as unmapped.
    """

    KIND: ClassVar[str] = "Harmonist"

    key: str
    interval_1: str
    level_1: int
    balance: int
    unmapped: Tuple[UnmappedField, ...] = ()


@dataclass(frozen=True)
class Vibrato(ModulationEffect):
    KIND: ClassVar[str] = "Vibrato"

    rate: int
    depth: int
    rise_time: int
    unmapped: Tuple[UnmappedField, ...] = ()


@dataclass(frozen=True)
class RingModulator(ModulationEffect):
    KIND: ClassVar[str] = "Ring Modulator"

    mode: str
    frequency: int
    effect_level: int
    direct_level: int


@dataclass(frozen=True)
class Humanizer(ModulationEffect):
    KIND: ClassVar[str] = "Humanizer"

    vowel_1: str
    vowel_2: str
    rate: int
    depth: int
    effect_level: int
    unmapped: Tuple[UnmappedField, ...] = ()
