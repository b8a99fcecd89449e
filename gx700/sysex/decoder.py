"""
GX-700 patch message decoder.

Validates the envelope and routes the message to the decoder for its
section id. ``decode`` is the main entry point; it never raises for a
malformed message and instead returns the error in the result.

Example:
    result = decode(message)
    if result.ok:
        print(result.record)
    else:
        print(f"Rejected: {result.error}")
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from gx700.errors import DecodeError
from gx700.models.sections import Disabled, SectionRecord, iter_unmapped
from gx700.sysex.envelope import RawMessage, validate_envelope
from gx700.sysex.modulation import decode_modulation
from gx700.sysex.sections import (
    decode_chorus,
    decode_compression,
    decode_delay,
    decode_equalization,
    decode_header,
    decode_loop,
    decode_noise_suppression,
    decode_overdrive,
    decode_preamp,
    decode_reverb,
    decode_speaker_simulation,
    decode_tremolo_pan,
    decode_wah,
)
from gx700.utils.diagnostics import UnmappedSink

logger = logging.getLogger(__name__)

SectionDecoder = Callable[[bytes, int], SectionRecord]

SECTION_DECODERS: Dict[int, SectionDecoder] = {
    0: decode_header,
    1: decode_compression,
    2: decode_wah,
    3: decode_overdrive,
    4: decode_preamp,
    5: decode_loop,
    6: decode_equalization,
    7: decode_speaker_simulation,
    8: decode_noise_suppression,
    9: decode_modulation,
    10: decode_delay,
    11: decode_chorus,
    12: decode_tremolo_pan,
    13: decode_reverb,
}


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding one message.

    Exactly one of ``record`` and ``error`` is set.
    """

    record: Optional[SectionRecord] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SectionRecord:
        """Return the record, raising the decode error if there is none."""
        if self.error is not None:
            raise self.error
        return self.record


def parse_message(data: RawMessage, sink: Optional[UnmappedSink] = None) -> SectionRecord:
    """
    Decode one framed message, raising on failure.

    Args:
        data: Complete message including F0 and F7
        sink: Optional callable receiving (patch_number, section_id, field)
            for every unmapped byte in the decoded record

    Returns:
        The section record

    Raises:
        DecodeError: If the envelope or any field is invalid
    """
    envelope = validate_envelope(data)

    if envelope.section_enabled is False:
        logger.debug(
            "Patch %d %s: disabled", envelope.patch_number, envelope.section_name
        )
        return Disabled(envelope.patch_number, envelope.section_id)

    decoder = SECTION_DECODERS[envelope.section_id]
    record = decoder(envelope.raw, envelope.patch_number)
    logger.debug("Patch %d %s: decoded", envelope.patch_number, envelope.section_name)

    if sink is not None:
        for field in iter_unmapped(record):
            sink(envelope.patch_number, envelope.section_id, field)

    return record


def decode(data: RawMessage, sink: Optional[UnmappedSink] = None) -> DecodeResult:
    """
    Decode one framed message.

    Args:
        data: Complete message including F0 and F7
        sink: Optional unmapped-field collector (see UnmappedCollector)

    Returns:
        DecodeResult holding either the record or the error
    """
    try:
        return DecodeResult(record=parse_message(data, sink))
    except DecodeError as e:
        logger.debug("Message rejected: %s", e)
        return DecodeResult(error=e)
