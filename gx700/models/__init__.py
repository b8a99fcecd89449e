"""Data models for GX-700 patch representation."""

from gx700.models.fields import UnmappedField
from gx700.models.modulation import (
    Flanger,
    Harmonist,
    Humanizer,
    ModulationEffect,
    Phaser,
    PitchShifter,
    PitchShifterVoice,
    RingModulator,
    Vibrato,
)
from gx700.models.sections import (
    AutoWah,
    Chorus,
    Compression,
    Delay,
    Disabled,
    DualDelay,
    Equalization,
    Header,
    Loop,
    Modulation,
    NoiseSuppression,
    NormalDelay,
    Overdrive,
    PedalWah,
    Preamp,
    Reverb,
    SectionRecord,
    SpeakerSimulation,
    TouchWah,
    TremoloPan,
    Wah,
)
from gx700.models.envelope import Envelope
from gx700.models.patch import Patch, PatchBank

__all__ = [
    "UnmappedField",
    "Envelope",
    "Patch",
    "PatchBank",
    "SectionRecord",
    "Disabled",
    "Header",
    "Compression",
    "Wah",
    "PedalWah",
    "TouchWah",
    "AutoWah",
    "Overdrive",
    "Preamp",
    "Loop",
    "Equalization",
    "SpeakerSimulation",
    "NoiseSuppression",
    "Modulation",
    "ModulationEffect",
    "Flanger",
    "Phaser",
    "PitchShifter",
    "PitchShifterVoice",
    "Harmonist",
    "Vibrato",
    "RingModulator",
    "Humanizer",
    "Delay",
    "NormalDelay",
    "DualDelay",
    "Chorus",
    "TremoloPan",
    "Reverb",
]
