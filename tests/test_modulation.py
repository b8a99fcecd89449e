"""Tests for the Modulation section (section 9)."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from gx700.errors import IndexOutOfRange, UnknownVariant
from gx700.models.modulation import (
    Flanger,
    Harmonist,
    Humanizer,
    Phaser,
    PitchShifter,
    RingModulator,
    Vibrato,
)
from gx700.models.sections import Modulation, iter_unmapped
from gx700.sysex.decoder import parse_message

MODULATION = 9


class TestModulationKinds:
    def test_flanger(self, build_message):
        values = {10: 0, 11: 20, 12: 60, 13: 45, 14: 70, 15: 10, 16: 55}
        record = parse_message(build_message(MODULATION, values))
        assert isinstance(record, Modulation)
        assert isinstance(record.effect, Flanger)
        assert record.effect.KIND == "Flanger"
        assert record.effect.rate == 20
        assert record.effect.depth == 60
        assert record.effect.manual == 45
        assert record.effect.resonance == 70
        assert record.effect.separation == 10
        assert record.effect.effect_level == 55

    def test_flanger_ignores_other_regions(self, build_message):
        """Bytes belonging to other effect kinds do not change the decoded flanger."""
        plain = parse_message(build_message(MODULATION, {11: 20}))
        noisy = parse_message(build_message(MODULATION, {11: 20, 17: 3, 40: 99, 62: 50}))
        assert plain.effect == noisy.effect

    def test_phaser(self, build_message):
        values = {10: 1, 17: 3, 18: 30, 19: 40, 20: 50, 21: 60, 22: 70}
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, Phaser)
        assert effect.stages == "Bi-Phase"
        assert (effect.rate, effect.depth, effect.manual) == (30, 40, 50)
        assert effect.resonance == 60
        assert effect.effect_level == 70

    def test_pitch_shifter(self, build_message):
        values = {
            10: 2,
            23: 1,
            24: 3,
            # Voice 1: +7 semitones, -10 cents, 200ms, level 90, pan 0
            25: 31,
            26: 40,
            27: 1,
            28: 72,
            29: 90,
            30: 0,
            # Voice 2: -12 semitones, 0 cents, 0ms, level 80, pan 100
            31: 12,
            32: 50,
            33: 0,
            34: 0,
            35: 80,
            36: 100,
            37: 15,
            38: 100,
        }
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, PitchShifter)
        assert effect.voices == "2 Voice"
        assert effect.speed == "Mono"

        v1 = effect.voice_1
        assert str(v1.pitch) == "+7"
        assert str(v1.fine) == "-10"
        assert v1.pre_delay == 200
        assert v1.level == 90
        assert (v1.pan.left, v1.pan.right) == (100, 0)

        v2 = effect.voice_2
        assert v2.pitch.value == -12
        assert str(v2.fine) == "0"
        assert v2.pre_delay == 0
        assert v2.level == 80
        assert (v2.pan.left, v2.pan.right) == (0, 100)

        assert effect.feedback == 15
        assert effect.direct_level == 100

    def test_harmonist(self, build_message):
        values = {10: 3, 39: 9, 40: 18, 41: 85, 42: 1, 43: 10, 44: 0x33}
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, Harmonist)
        assert effect.key == "A"
        assert effect.interval_1 == "+5th"
        assert effect.level_1 == 85
        assert effect.balance == 266
        assert [u.offset for u in effect.unmapped] == list(range(44, 55))
        assert effect.unmapped[0].raw == 0x33

    def test_vibrato(self, build_message):
        values = {10: 4, 55: 70, 56: 50, 57: 20, 58: 1}
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, Vibrato)
        assert (effect.rate, effect.depth, effect.rise_time) == (70, 50, 20)
        assert [(u.offset, u.raw) for u in effect.unmapped] == [(58, 1), (59, 0), (60, 0)]

    def test_ring_modulator(self, build_message):
        values = {10: 5, 61: 1, 62: 64, 63: 80, 64: 20}
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, RingModulator)
        assert effect.mode == "Intelligent"
        assert effect.frequency == 64
        assert effect.effect_level == 80
        assert effect.direct_level == 20

    def test_humanizer(self, build_message):
        values = {10: 6, 65: 0, 66: 4, 67: 30, 68: 90, 69: 75}
        effect = parse_message(build_message(MODULATION, values)).effect
        assert isinstance(effect, Humanizer)
        assert effect.vowel_1 == "a"
        assert effect.vowel_2 == "u"
        assert (effect.rate, effect.depth, effect.effect_level) == (30, 90, 75)
        assert [u.offset for u in effect.unmapped] == [70, 71, 72, 73]


class TestModulationErrors:
    def test_unknown_kind(self, build_message):
        with pytest.raises(UnknownVariant) as exc:
            parse_message(build_message(MODULATION, {10: 7}))
        assert exc.value.raw == 7
        assert exc.value.offset == 10

    def test_bad_harmonist_interval(self, build_message):
        with pytest.raises(IndexOutOfRange) as exc:
            parse_message(build_message(MODULATION, {10: 3, 40: 29}))
        assert exc.value.table_size == 29

    def test_bad_interval_ignored_for_other_kinds(self, build_message):
        """Only the active kind's region is interpreted."""
        record = parse_message(build_message(MODULATION, {10: 0, 40: 29}))
        assert isinstance(record.effect, Flanger)


class TestModulationUnmapped:
    def test_shared_tail(self, build_message):
        record = parse_message(build_message(MODULATION, {74: 5, 85: 6}))
        assert [u.offset for u in record.unmapped] == list(range(74, 86))
        assert record.unmapped[0].raw == 5
        assert record.unmapped[-1].raw == 6

    def test_iter_unmapped_includes_effect(self, build_message):
        """Harmonist unmapped bytes come first, then the shared tail."""
        record = parse_message(build_message(MODULATION, {10: 3}))
        offsets = [u.offset for u in iter_unmapped(record)]
        assert offsets == list(range(44, 55)) + list(range(74, 86))

    def test_checksum_not_unmapped(self, build_message):
        record = parse_message(build_message(MODULATION))
        assert 86 not in [u.offset for u in iter_unmapped(record)]
