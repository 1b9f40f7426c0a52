"""
Intel HEX Checksum Calculations
===============================

Every Intel HEX record ends with a one-byte checksum:

- Algorithm: sum of the byte count, both address bytes, the record type
  and every data byte, truncated to 8 bits, then negated (two's complement)
- Property: adding the checksum to that sum gives 0 modulo 256

Example:
    :0300300002337A1E
    03 + 00 + 30 + 00 + 02 + 33 + 7A = 0xE2, and (-0xE2) & 0xFF = 0x1E

Reference
---------
- Intel HEX format: https://en.wikipedia.org/wiki/Intel_HEX
"""

from typing import Iterable


def sum_record_bytes(
    data_length: int,
    address: int,
    record_type: int,
    data: Iterable[int] = b"",
) -> int:
    """
    Sum the checksummed fields of a record, modulo 256.

    Args:
        data_length: Byte count field (0-255)
        address: 16-bit load offset
        record_type: Record type byte
        data: Data bytes

    Returns:
        8-bit sum of all fields
    """
    total = data_length + ((address >> 8) & 0xFF) + (address & 0xFF) + record_type
    for byte in data:
        total += byte
    return total & 0xFF


def calculate_record_checksum(
    data_length: int,
    address: int,
    record_type: int,
    data: Iterable[int] = b"",
) -> int:
    """
    Calculate the checksum byte for an Intel HEX record.

    Args:
        data_length: Byte count field (0-255)
        address: 16-bit load offset
        record_type: Record type byte
        data: Data bytes

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_record_checksum(0, 0x0000, 0x01)  # End Of File
        255
    """
    return (-sum_record_bytes(data_length, address, record_type, data)) & 0xFF


def verify_record_checksum(
    data_length: int,
    address: int,
    record_type: int,
    data: Iterable[int],
    checksum: int,
) -> bool:
    """Return True if checksum matches the one computed from the fields."""
    return calculate_record_checksum(data_length, address, record_type, data) == checksum
