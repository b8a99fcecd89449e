"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from gx700.sysex.envelope import EXPECTED_LENGTHS, SIGNATURE
from gx700.utils.checksum import calculate_roland_checksum


def make_message(section_id, values=None, patch_index=0, enable=1, length=None, checksum=None):
    """
    Build a framed GX-700 patch message.

    Args:
        section_id: Section id byte (0-13)
        values: {absolute offset: byte} for field bytes
        patch_index: Patch byte (0-based)
        enable: Enable byte (ignored for the header)
        length: Total length, defaults to the section's expected length
        checksum: Checksum byte, defaults to the Roland checksum
    """
    n = EXPECTED_LENGTHS[section_id] if length is None else length
    msg = bytearray(n)
    msg[0 : len(SIGNATURE)] = SIGNATURE
    msg[6] = patch_index
    msg[7] = section_id
    if section_id != 0:
        msg[9] = enable
    for offset, value in (values or {}).items():
        msg[offset] = value
    msg[-2] = calculate_roland_checksum(msg[5:-2]) if checksum is None else checksum
    msg[-1] = 0xF7
    return bytes(msg)


def make_header(name, patch_index=0):
    """Build a header message carrying a 12-character patch name."""
    values = {23 + i: b for i, b in enumerate(name.encode("ascii").ljust(12))}
    return make_message(0, values, patch_index=patch_index)


def make_patch(patch_index=0, name="TEST PATCH"):
    """Header plus all 13 section messages, every section enabled with zeroed fields."""
    messages = [make_header(name, patch_index)]
    for section_id in range(1, len(EXPECTED_LENGTHS)):
        messages.append(make_message(section_id, patch_index=patch_index))
    return messages


@pytest.fixture
def build_message():
    """Return the message builder."""
    return make_message


@pytest.fixture
def build_header():
    """Return the header message builder."""
    return make_header


@pytest.fixture
def patch_messages():
    """Return all 14 messages of patch 1."""
    return make_patch(0, "LANDAU JUICE")


@pytest.fixture
def dump_data():
    """
    Return a small dump: full patch 1, header and Delay of patch 2, and one
    truncated message.
    """
    data = b"".join(make_patch(0, "LANDAU JUICE"))
    data += make_header("CLEAN", patch_index=1)
    data += make_message(10, {11: 1, 12: 10}, patch_index=1)
    data += make_message(1, length=18)
    return data


@pytest.fixture
def dump_file(tmp_path, dump_data):
    """Write the sample dump to a .syx file and return its path."""
    path = tmp_path / "patches.syx"
    path.write_bytes(dump_data)
    return path
