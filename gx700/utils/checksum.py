"""
Roland SysEx checksum utilities.

Roland DT1 (data set) messages end with a checksum byte computed as:
1. Sum all address and data bytes
2. Take the sum modulo 128
3. Subtract from 128
4. If the result is 128, use 0 instead

GX-700 patch messages are DT1 messages with a four-byte address starting
at byte 5 (``00 pp ss 00``), so the checksum covers bytes 5..N-3. Whether
the unit always fills this byte consistently (in particular in the header
message) is not confirmed, so the result is only ever reported, never
enforced.
"""

from typing import List, Union

# First address byte in a GX-700 patch message
ADDRESS_OFFSET = 5


def calculate_roland_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate the Roland checksum over address + data bytes.

    Args:
        data: Bytes to calculate checksum over

    Returns:
        Checksum value (0-127)
    """
    return (128 - (sum(data) % 128)) % 128


def verify_checksum(data: Union[bytes, List[int]], expected_checksum: int) -> bool:
    """
    Verify a Roland checksum.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_roland_checksum(data) == expected_checksum


def message_checksum_matches(message: bytes) -> bool:
    """Check the checksum byte (N-2) of a complete framed message."""
    if len(message) < ADDRESS_OFFSET + 3:
        return False
    return verify_checksum(message[ADDRESS_OFFSET:-2], message[-2])
