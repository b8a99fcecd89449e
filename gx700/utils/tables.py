"""
GX-700 Lookup Tables.

Each table maps a raw parameter byte (the tuple index) to the label shown
on the unit. Order is the decode table: never sort or reorder these.
"""

from typing import Tuple

# =============================================================================
# SECTIONS
# =============================================================================
# Index = section id (byte 7 of every patch message)
SECTION_NAMES: Tuple[str, ...] = (
    "Header",
    "Compression",
    "Wah",
    "Overdrive / Distortion",
    "Preamp",
    "Loop",
    "Equalization",
    "Speaker Simulation",
    "Noise Suppression",
    "Modulation",
    "Delay",
    "Chorus",
    "Tremolo / Panning",
    "Reverb",
)

# =============================================================================
# GENERIC SWITCHES
# =============================================================================
OFF_ON: Tuple[str, ...] = ("Off", "On")

POLARITIES: Tuple[str, ...] = ("Down", "Up")

# =============================================================================
# COMPRESSION
# =============================================================================
COMPRESSOR_TYPES: Tuple[str, ...] = ("Compressor", "Limiter")

# =============================================================================
# WAH
# =============================================================================
WAH_MODES: Tuple[str, ...] = ("Pedal Wah", "Touch Wah", "Auto Wah")

# Values past the end of this list select a MIDI controller number
WAH_PEDALS: Tuple[str, ...] = ("Expression Pedal", "Control Pedal")

# =============================================================================
# OVERDRIVE / DISTORTION
# =============================================================================
DISTORTION_TYPES: Tuple[str, ...] = (
    "Vintage OD",
    "Turbo OD",
    "Blues",
    "Distortion",
    "Turbo DS",
    "Metal",
    "Fuzz",
)

# =============================================================================
# PREAMP
# =============================================================================
PREAMP_TYPES: Tuple[str, ...] = (
    "JC-120",
    "Clean Twin",
    "Match Drive",
    "BG Lead",
    "MS1959 (I)",
    "MS1959 (II)",
    "MS1959 (I+II)",
    "SLDN Lead",
    "Metal 5150",
    "Metal Lead",
)

PREAMP_GAINS: Tuple[str, ...] = ("Low", "Middle", "High")

# =============================================================================
# LOOP
# =============================================================================
LOOP_MODES: Tuple[str, ...] = ("Series", "Parallel")

# =============================================================================
# EQUALIZATION
# =============================================================================
EQ_MID_FREQUENCIES: Tuple[str, ...] = (
    "100Hz",
    "125Hz",
    "160Hz",
    "200Hz",
    "250Hz",
    "315Hz",
    "400Hz",
    "500Hz",
    "630Hz",
    "800Hz",
    "1.00kHz",
    "1.25kHz",
    "1.60kHz",
    "2.00kHz",
    "2.50kHz",
    "3.15kHz",
    "4.00kHz",
    "5.00kHz",
    "6.30kHz",
    "8.00kHz",
    "10.0kHz",
)

EQ_MID_Q: Tuple[str, ...] = ("0.5", "1", "2", "4", "8", "16")

# =============================================================================
# SPEAKER SIMULATION
# =============================================================================
SPEAKER_TYPES: Tuple[str, ...] = (
    "Small",
    "Middle",
    "JC-120",
    "Built In 1",
    "Built In 2",
    "Built In 3",
    "Built In 4",
    "BG Stack 1",
    "BG Stack 2",
    "MS Stack 1",
    "MS Stack 2",
    "Metal Stack",
)

# =============================================================================
# NOISE SUPPRESSION
# =============================================================================
NS_DETECT_SOURCES: Tuple[str, ...] = ("Guitar In", "NS In")

# =============================================================================
# MODULATION
# =============================================================================
MODULATION_TYPES: Tuple[str, ...] = (
    "Flanger",
    "Phaser",
    "Pitch Shifter",
    "Harmonist",
    "Vibrato",
    "Ring Modulator",
    "Humanizer",
)

PHASER_STAGES: Tuple[str, ...] = ("4 Stage", "8 Stage", "12 Stage", "Bi-Phase")

PITCH_SHIFTER_VOICES: Tuple[str, ...] = ("1 Voice", "2 Voice")

PITCH_SHIFTER_SPEEDS: Tuple[str, ...] = ("Fast", "Medium", "Slow", "Mono")

HARMONIST_KEYS: Tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

HARMONIST_INTERVALS: Tuple[str, ...] = (
    "-2oct",
    "-14th",
    "-13th",
    "-12th",
    "-11th",
    "-10th",
    "-9th",
    "-1oct",
    "-7th",
    "-6th",
    "-5th",
    "-4th",
    "-3rd",
    "-2nd",
    "Tonic",
    "+2nd",
    "+3rd",
    "+4th",
    "+5th",
    "+6th",
    "+7th",
    "+1oct",
    "+9th",
    "+10th",
    "+11th",
    "+12th",
    "+13th",
    "+14th",
    "+2oct",
)

RING_MOD_MODES: Tuple[str, ...] = ("Normal", "Intelligent")

HUMANIZER_VOWELS: Tuple[str, ...] = ("a", "e", "i", "o", "u")

# =============================================================================
# DELAY
# =============================================================================
DELAY_MODES: Tuple[str, ...] = ("Normal", "Dual")

# =============================================================================
# CHORUS
# =============================================================================
CHORUS_MODES: Tuple[str, ...] = ("Mono", "Stereo")

# =============================================================================
# TREMOLO / PAN
# =============================================================================
TREMOLO_MODES: Tuple[str, ...] = ("Tremolo", "Pan")

TREMOLO_WAVES: Tuple[str, ...] = ("Triangle", "Square")

# =============================================================================
# REVERB
# =============================================================================
REVERB_TYPES: Tuple[str, ...] = ("Room1", "Room2", "Hall1", "Hall2", "Plate")

LOW_CUT_FREQUENCIES: Tuple[str, ...] = (
    "Flat",
    "55Hz",
    "110Hz",
    "165Hz",
    "200Hz",
    "280Hz",
    "340Hz",
    "400Hz",
    "500Hz",
    "630Hz",
    "800Hz",
)

HIGH_CUT_FREQUENCIES: Tuple[str, ...] = (
    "500Hz",
    "630Hz",
    "800Hz",
    "1.00kHz",
    "1.25kHz",
    "1.60kHz",
    "2.00kHz",
    "2.50kHz",
    "3.15kHz",
    "4.00kHz",
    "5.00kHz",
    "6.30kHz",
    "8.00kHz",
    "10.0kHz",
    "12.5kHz",
    "Flat",
)


def get_section_name(section_id: int) -> str:
    """Get section name from its id byte."""
    if 0 <= section_id < len(SECTION_NAMES):
        return SECTION_NAMES[section_id]
    return f"Unknown (0x{section_id:02X})"
