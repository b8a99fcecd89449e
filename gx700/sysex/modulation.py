"""
Modulation section decoder (section 9, 88 bytes).

Byte 10 selects the active effect kind. The 75 bytes after it hold a
fixed region per kind, followed by a tail shared by all kinds:

    11-16  Flanger
    17-22  Phaser
    23-38  Pitch Shifter
    39-54  Harmonist
    55-60  Vibrato
    61-64  Ring Modulator
    65-73  Humanizer
    74-85  shared tail (unmapped)
    86     checksum
"""

from gx700.models.modulation import (
    Flanger,
    Harmonist,
    Humanizer,
    Phaser,
    PitchShifter,
    PitchShifterVoice,
    RingModulator,
    Vibrato,
)
from gx700.models.sections import Modulation
from gx700.sysex.fields import FieldReader
from gx700.utils.tables import (
    HARMONIST_INTERVALS,
    HARMONIST_KEYS,
    HUMANIZER_VOWELS,
    MODULATION_TYPES,
    PHASER_STAGES,
    PITCH_SHIFTER_SPEEDS,
    PITCH_SHIFTER_VOICES,
    RING_MOD_MODES,
)

PITCH_BIAS = 24
FINE_BIAS = 50

# Pre-delay is milliseconds in two 7-bit bytes
PRE_DELAY_BASE = 128
# Harmonist balance is stored high * 256 + low
BALANCE_BASE = 256

TAIL_START = 74
TAIL_STOP = 86


def _flanger(r: FieldReader) -> Flanger:
    return Flanger(
        rate=r.byte(11),
        depth=r.byte(12),
        manual=r.byte(13),
        resonance=r.byte(14),
        separation=r.byte(15),
        effect_level=r.byte(16),
    )


def _phaser(r: FieldReader) -> Phaser:
    return Phaser(
        stages=r.lookup(17, PHASER_STAGES, "phaser stages"),
        rate=r.byte(18),
        depth=r.byte(19),
        manual=r.byte(20),
        resonance=r.byte(21),
        effect_level=r.byte(22),
    )


def _pitch_voice(r: FieldReader, start: int) -> PitchShifterVoice:
    return PitchShifterVoice(
        pitch=r.signed(start, PITCH_BIAS),
        fine=r.signed(start + 1, FINE_BIAS),
        pre_delay=r.packed(start + 2, PRE_DELAY_BASE),
        level=r.byte(start + 4),
        pan=r.pan(start + 5),
    )


def _pitch_shifter(r: FieldReader) -> PitchShifter:
    return PitchShifter(
        voices=r.lookup(23, PITCH_SHIFTER_VOICES, "pitch shifter voices"),
        speed=r.lookup(24, PITCH_SHIFTER_SPEEDS, "pitch shifter speed"),
        voice_1=_pitch_voice(r, 25),
        voice_2=_pitch_voice(r, 31),
        feedback=r.byte(37),
        direct_level=r.byte(38),
    )


def _harmonist(r: FieldReader) -> Harmonist:
    return Harmonist(
        key=r.lookup(39, HARMONIST_KEYS, "harmonist key"),
        interval_1=r.lookup(40, HARMONIST_INTERVALS, "harmonist interval 1"),
        level_1=r.byte(41),
        balance=r.packed(42, BALANCE_BASE),
        unmapped=r.unmapped(44, 55, "harmonist voice 2 / pan (unmapped)"),
    )


def _vibrato(r: FieldReader) -> Vibrato:
    return Vibrato(
        rate=r.byte(55),
        depth=r.byte(56),
        rise_time=r.byte(57),
        unmapped=r.unmapped(58, 61, "vibrato trigger / pedal (unmapped)"),
    )


def _ring_modulator(r: FieldReader) -> RingModulator:
    return RingModulator(
        mode=r.lookup(61, RING_MOD_MODES, "ring modulator mode"),
        frequency=r.byte(62),
        effect_level=r.byte(63),
        direct_level=r.byte(64),
    )


def _humanizer(r: FieldReader) -> Humanizer:
    return Humanizer(
        vowel_1=r.lookup(65, HUMANIZER_VOWELS, "humanizer vowel 1"),
        vowel_2=r.lookup(66, HUMANIZER_VOWELS, "humanizer vowel 2"),
        rate=r.byte(67),
        depth=r.byte(68),
        effect_level=r.byte(69),
        unmapped=r.unmapped(70, 74, "humanizer trigger / pedal (unmapped)"),
    )


# Index = modulation type byte, same order as MODULATION_TYPES
MODULATION_DECODERS = (
    _flanger,
    _phaser,
    _pitch_shifter,
    _harmonist,
    _vibrato,
    _ring_modulator,
    _humanizer,
)


def decode_modulation(data: bytes, patch_number: int) -> Modulation:
    r = FieldReader(data)
    kind = r.variant(10, MODULATION_TYPES, "modulation type")
    return Modulation(
        patch_number=patch_number,
        effect=MODULATION_DECODERS[kind](r),
        unmapped=r.unmapped(TAIL_START, TAIL_STOP),
    )
