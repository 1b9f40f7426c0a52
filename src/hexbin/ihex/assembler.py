"""
Intel HEX Image Assembler
=========================

This module assembles parsed records into a flat binary image.

Two Passes
----------
Assembly runs in two separate passes over the records, in file order:

**Pass 1 (sizing)**: Track the running base address and find the highest
``base + address + data_length`` over all records. This is the image size.
Addresses may overlap or leave gaps; gaps stay zero in the image.

**Pass 2 (assembly)**: Allocate a zero-filled image of that size, reset the
base to 0 and walk the records again, copying each Data record's bytes to
``base + address``. An End Of File record stops the walk.

Base Address
------------
- Extended/Start Segment Address: base = (d0 << 8 | d1) << 4
- Extended Linear Address:        base = (d0 << 8 | d1) << 16

Usage Examples
--------------
    >>> from hexbin.ihex import convert_hex
    >>> convert_hex(":020000000102FB\\n:00000001FF\\n")
    b'\\x01\\x02'
"""

from typing import Sequence
import logging

from hexbin.errors import (
    BufferOverflowError,
    MalformedLineError,
    UnsupportedRecordTypeError,
)
from hexbin.ihex.parser import RecordTypePolicy, parse_records
from hexbin.ihex.records import Record, RecordType

# Logger for this module
logger = logging.getLogger(__name__)


def _next_base(record: Record) -> int:
    """Base address set by an address-extension record."""
    try:
        return record.base_address()
    except ValueError as e:
        raise MalformedLineError(
            str(e),
            line_number=record.line_number,
            source_line=record.source_line,
        ) from e


# =============================================================================
# Pass 1 - Image Size
# =============================================================================

def compute_image_size(records: Sequence[Record]) -> int:
    """
    Compute the output image size from the records.

    Every record counts, including any after an End Of File record.

    Args:
        records: Parsed records in file order

    Returns:
        Image size in bytes (0 if no record addresses any data)
    """
    base = 0
    size = 0
    for record in records:
        if RecordType.is_address_extension(record.record_type):
            base = _next_base(record)
        size = max(size, base + record.end_address)
    logger.debug(f"Image size: {size} bytes")
    return size


# =============================================================================
# Pass 2 - Assembly
# =============================================================================

def _write_data(record: Record, base: int, image: bytearray) -> None:
    """Copy a Data record's bytes into the image."""
    start = base + record.address
    end = start + record.data_length
    if end > len(image):
        raise BufferOverflowError(
            index=end - 1,
            size=len(image),
            line_number=record.line_number,
            source_line=record.source_line,
        )
    image[start:end] = record.data


def assemble_image(records: Sequence[Record], size: int) -> bytes:
    """
    Assemble records into a zero-filled image of a fixed size.

    Args:
        records: Parsed records in file order
        size: Image size from compute_image_size()

    Returns:
        The assembled image

    Raises:
        BufferOverflowError: If a Data record writes past the image
        UnsupportedRecordTypeError: For Start Linear Address records and
            undefined record types
        MalformedLineError: If an address-extension record has fewer than
            two data bytes
    """
    image = bytearray(size)
    base = 0

    for record in records:
        record_type = record.record_type

        if record_type == RecordType.DATA:
            _write_data(record, base, image)
        elif record_type == RecordType.END_OF_FILE:
            logger.debug(f"End Of File at line {record.line_number}")
            break
        elif RecordType.is_address_extension(record_type):
            base = _next_base(record)
            logger.debug(f"Base address 0x{base:08X} at line {record.line_number}")
        elif record_type == RecordType.START_LINEAR_ADDRESS:
            raise UnsupportedRecordTypeError(
                record_type,
                line_number=record.line_number,
                source_line=record.source_line,
                hint="Start Linear Address (05) records are not supported",
            )
        else:
            raise UnsupportedRecordTypeError(
                record_type,
                line_number=record.line_number,
                source_line=record.source_line,
            )

    return bytes(image)


def convert_hex(
    text: str,
    policy: RecordTypePolicy = RecordTypePolicy.STRICT,
) -> bytes:
    """
    Convert the text of an Intel HEX file into a flat binary image.

    Args:
        text: Full decoded text of a HEX file
        policy: How to check record type bytes while parsing

    Returns:
        The binary image; byte i holds the data loaded at address i

    Raises:
        HexFormatError: Any parse, validation or assembly error
    """
    records = parse_records(text, policy=policy)
    size = compute_image_size(records)
    return assemble_image(records, size)
