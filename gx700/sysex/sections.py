"""
Section field decoders.

One decoder per section id. Each takes the validated message bytes and
the patch number and returns the section record. Offsets are absolute
positions in the message; the byte before F7 is the checksum and is never
read as a field.
"""

from gx700.models.sections import (
    AutoWah,
    Chorus,
    Compression,
    Delay,
    DualDelay,
    Equalization,
    Header,
    Loop,
    NoiseSuppression,
    NormalDelay,
    Overdrive,
    PedalWah,
    Preamp,
    Reverb,
    SpeakerSimulation,
    TouchWah,
    TremoloPan,
    Wah,
)
from gx700.sysex.fields import FieldReader
from gx700.utils.tables import (
    CHORUS_MODES,
    COMPRESSOR_TYPES,
    DELAY_MODES,
    DISTORTION_TYPES,
    EQ_MID_FREQUENCIES,
    EQ_MID_Q,
    HIGH_CUT_FREQUENCIES,
    LOOP_MODES,
    LOW_CUT_FREQUENCIES,
    NS_DETECT_SOURCES,
    OFF_ON,
    POLARITIES,
    PREAMP_GAINS,
    PREAMP_TYPES,
    REVERB_TYPES,
    SPEAKER_TYPES,
    TREMOLO_MODES,
    TREMOLO_WAVES,
    WAH_MODES,
    WAH_PEDALS,
)

# Header layout
NAME_START = 23
NAME_LENGTH = 12
RESERVED_START = NAME_START + NAME_LENGTH
RESERVED_LENGTH = 40

# Common bias values
TONE_BIAS = 50
EQ_GAIN_BIAS = 20

# Delay times are stored as two 7-bit bytes
DELAY_TIME_BASE = 128


def decode_header(data: bytes, patch_number: int) -> Header:
    """
    Decode the patch header message (section 0).

    Only the 12-character name is interpreted. The 40-byte block after it
    normally reads
    03 07 00 00 00 64 00 00 00 7F 03 07 00 00 00 64 0B 00 00 7F
    00 00 00 00 00 64 01 00 00 7F 00 00 00 00 00 64 24 00 00 7F
    but its meaning is unknown, so it is kept raw.
    """
    name_raw = data[NAME_START : NAME_START + NAME_LENGTH]
    name = name_raw.decode("ascii", errors="replace").rstrip(" \x00")
    return Header(
        patch_number=patch_number,
        name=name,
        name_raw=name_raw,
        leading=data[8:NAME_START],
        reserved=data[RESERVED_START : RESERVED_START + RESERVED_LENGTH],
        checksum=data[-2],
    )


def decode_compression(data: bytes, patch_number: int) -> Compression:
    r = FieldReader(data)
    return Compression(
        patch_number=patch_number,
        compressor_type=r.lookup(10, COMPRESSOR_TYPES, "compressor type"),
        sustain=r.byte(11),
        attack=r.byte(12),
        tone=r.signed(13, TONE_BIAS),
        level=r.byte(14),
        unmapped=r.unmapped(15, 17),
    )


def _pedal_wah(r: FieldReader) -> PedalWah:
    return PedalWah(
        pedal=r.lookup(11, WAH_PEDALS, "wah pedal"),
        pedal_min=r.byte(12),
        pedal_max=r.byte(13),
        effect_level=r.byte(17),
    )


def _touch_wah(r: FieldReader) -> TouchWah:
    return TouchWah(
        polarity=r.lookup(11, POLARITIES, "wah polarity"),
        sensitivity=r.byte(12),
        manual=r.byte(13),
        peak=r.byte(14),
        effect_level=r.byte(17),
    )


def _auto_wah(r: FieldReader) -> AutoWah:
    return AutoWah(
        polarity=r.lookup(11, POLARITIES, "wah polarity"),
        sensitivity=r.byte(12),
        manual=r.byte(13),
        peak=r.byte(14),
        rate=r.byte(15),
        depth=r.byte(16),
        effect_level=r.byte(17),
    )


# Index = wah mode byte, same order as WAH_MODES
WAH_MODE_DECODERS = (_pedal_wah, _touch_wah, _auto_wah)


def decode_wah(data: bytes, patch_number: int) -> Wah:
    r = FieldReader(data)
    mode = r.variant(10, WAH_MODES, "wah mode")
    return Wah(
        patch_number=patch_number,
        mode=WAH_MODE_DECODERS[mode](r),
        unmapped=r.unmapped(18, 22),
    )


def decode_overdrive(data: bytes, patch_number: int) -> Overdrive:
    r = FieldReader(data)
    return Overdrive(
        patch_number=patch_number,
        distortion_type=r.lookup(10, DISTORTION_TYPES, "distortion type"),
        drive=r.byte(11),
        bass=r.signed(12, TONE_BIAS),
        treble=r.signed(13, TONE_BIAS),
        effect_level=r.byte(14),
    )


def decode_preamp(data: bytes, patch_number: int) -> Preamp:
    r = FieldReader(data)
    return Preamp(
        patch_number=patch_number,
        preamp_type=r.lookup(10, PREAMP_TYPES, "preamp type"),
        volume=r.byte(11),
        bass=r.byte(12),
        middle=r.byte(13),
        treble=r.byte(14),
        presence=r.byte(15),
        master=r.byte(16),
        bright=r.lookup(17, OFF_ON, "bright"),
        gain=r.lookup(18, PREAMP_GAINS, "preamp gain"),
    )


def decode_loop(data: bytes, patch_number: int) -> Loop:
    r = FieldReader(data)
    return Loop(
        patch_number=patch_number,
        mode=r.lookup(10, LOOP_MODES, "loop mode"),
        send_level=r.byte(11),
        return_level=r.byte(12),
    )


def decode_equalization(data: bytes, patch_number: int) -> Equalization:
    r = FieldReader(data)
    return Equalization(
        patch_number=patch_number,
        low_gain=r.signed(10, EQ_GAIN_BIAS),
        mid_frequency=r.lookup(11, EQ_MID_FREQUENCIES, "EQ mid frequency"),
        mid_q=r.lookup(12, EQ_MID_Q, "EQ mid Q"),
        mid_gain=r.signed(13, EQ_GAIN_BIAS),
        high_gain=r.signed(14, EQ_GAIN_BIAS),
        level=r.signed(15, EQ_GAIN_BIAS),
    )


def decode_speaker_simulation(data: bytes, patch_number: int) -> SpeakerSimulation:
    r = FieldReader(data)
    return SpeakerSimulation(
        patch_number=patch_number,
        speaker_type=r.lookup(10, SPEAKER_TYPES, "speaker type"),
        mic_setting=r.byte(11),
        mic_level=r.byte(12),
        direct_level=r.byte(13),
    )


def decode_noise_suppression(data: bytes, patch_number: int) -> NoiseSuppression:
    r = FieldReader(data)
    return NoiseSuppression(
        patch_number=patch_number,
        threshold=r.byte(10),
        release=r.byte(11),
        detect=r.lookup(12, NS_DETECT_SOURCES, "NS detect"),
        effect_level=r.byte(13),
    )


def _normal_delay(r: FieldReader) -> NormalDelay:
    return NormalDelay(
        time_c=r.packed(11, DELAY_TIME_BASE),
        time_l=r.packed(13, DELAY_TIME_BASE),
        time_r=r.packed(15, DELAY_TIME_BASE),
        feedback=r.byte(17),
        level_c=r.byte(18),
        level_l=r.byte(19),
        level_r=r.byte(20),
        direct_level=r.byte(21),
    )


def _dual_delay(r: FieldReader) -> DualDelay:
    return DualDelay(
        time_1=r.packed(22, DELAY_TIME_BASE),
        feedback_1=r.byte(24),
        level_1=r.byte(25),
        time_2=r.packed(26, DELAY_TIME_BASE),
        feedback_2=r.byte(28),
        level_2=r.byte(29),
        direct_level=r.byte(21),
    )


# Index = delay mode byte, same order as DELAY_MODES
DELAY_MODE_DECODERS = (_normal_delay, _dual_delay)


def decode_delay(data: bytes, patch_number: int) -> Delay:
    r = FieldReader(data)
    mode = r.variant(10, DELAY_MODES, "delay mode")
    return Delay(patch_number=patch_number, mode=DELAY_MODE_DECODERS[mode](r))


def decode_chorus(data: bytes, patch_number: int) -> Chorus:
    r = FieldReader(data)
    return Chorus(
        patch_number=patch_number,
        mode=r.lookup(10, CHORUS_MODES, "chorus mode"),
        rate=r.byte(11),
        depth=r.byte(12),
        effect_level=r.byte(17),
        unmapped=r.unmapped(13, 17),
    )


def decode_tremolo_pan(data: bytes, patch_number: int) -> TremoloPan:
    r = FieldReader(data)
    return TremoloPan(
        patch_number=patch_number,
        mode=r.lookup(10, TREMOLO_MODES, "tremolo mode"),
        rate=r.byte(11),
        depth=r.byte(12),
        wave=r.lookup(13, TREMOLO_WAVES, "tremolo wave"),
    )


def decode_reverb(data: bytes, patch_number: int) -> Reverb:
    r = FieldReader(data)
    return Reverb(
        patch_number=patch_number,
        reverb_type=r.lookup(10, REVERB_TYPES, "reverb type"),
        time_raw=r.byte(11),
        pre_delay=r.byte(12),
        low_cut=r.lookup(13, LOW_CUT_FREQUENCIES, "reverb low cut"),
        high_cut=r.lookup(14, HIGH_CUT_FREQUENCIES, "reverb high cut"),
        diffusion=r.byte(15),
        effect_level=r.byte(16),
        direct_level=r.byte(17),
    )
