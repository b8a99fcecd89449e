"""
GX-700 SysEx file reader.

Reads .syx files containing GX-700 patch dumps (as saved by a librarian
or a MIDI monitor) and assembles the decoded messages into a PatchBank.

Messages are located by their F0/F7 framing; each one is decoded on its
own. A message that fails to decode is recorded in ``PatchBank.errors``
and reading continues with the next one.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from gx700.models.patch import PatchBank
from gx700.sysex.decoder import decode
from gx700.utils.diagnostics import UnmappedSink

logger = logging.getLogger(__name__)

SYSEX_START = 0xF0
SYSEX_END = 0xF7


def split_messages(data: bytes) -> List[bytes]:
    """
    Split raw data into individual F0..F7 framed messages.

    Bytes outside a frame are ignored. An F0 inside an unterminated frame
    restarts the frame.
    """
    messages = []
    start = None

    for i, byte in enumerate(data):
        if byte == SYSEX_START:
            start = i
        elif byte == SYSEX_END and start is not None:
            messages.append(data[start : i + 1])
            start = None

    return messages


class GX700Reader:
    """
    Reader for GX-700 SysEx patch files.

    Example:
        bank = GX700Reader.read("patches.syx")
        for patch in bank:
            print(patch)
    """

    def __init__(self, sink: Optional[UnmappedSink] = None):
        self.sink = sink
        self.messages: List[bytes] = []

    @classmethod
    def read(cls, filepath: Union[str, Path], sink: Optional[UnmappedSink] = None) -> PatchBank:
        """
        Read a .syx file and return the decoded bank.

        Args:
            filepath: Path to .syx file
            sink: Optional unmapped-field collector

        Returns:
            PatchBank with every successfully decoded message
        """
        reader = cls(sink)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> PatchBank:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: Union[bytes, bytearray]) -> PatchBank:
        """
        Decode every framed message in data.

        Args:
            data: Raw SysEx data

        Returns:
            PatchBank with every successfully decoded message
        """
        self.messages = split_messages(bytes(data))
        bank = PatchBank()

        for index, message in enumerate(self.messages):
            result = decode(message, self.sink)
            if result.ok:
                bank.add(result.record)
            else:
                logger.debug("Message %d skipped: %s", index, result.error)
                bank.errors.append((index, result.error))

        logger.debug(
            "Read %d messages: %d patches, %d errors",
            len(self.messages),
            len(bank),
            len(bank.errors),
        )
        return bank
