"""
Intel HEX Line Parser
=====================

This module turns the text of an Intel HEX file into validated Record
objects. It performs no file I/O: callers pass in the decoded text.

Parsing a line
--------------
1. Check the minimum length (11 characters) and the ':' start code
2. Decode byte count, address and record type from their fixed offsets
3. Check the line is long enough for the declared data and checksum
4. Decode the data bytes and the checksum byte
5. Verify the checksum
6. Apply the record type policy

Record Type Policy
------------------
The check on the record type byte is an explicit choice:

- **STRICT** (default): the type byte must be one of the six defined
  record types; anything else fails at parse time.
- **LENIENT**: any type byte is accepted at parse time. Undefined types
  are still rejected when the image is assembled.

Usage Examples
--------------
    >>> from hexbin.ihex import parse_line
    >>> record = parse_line(":0300300002337A1E")
    >>> record.address, record.data.hex()
    (48, '02337a')
"""

from enum import Enum
from typing import Optional
import logging
import re
import string

from hexbin.errors import (
    ChecksumMismatchError,
    MalformedLineError,
    UnsupportedRecordTypeError,
)
from hexbin.ihex.records import (
    ADDRESS_LENGTH,
    ADDRESS_OFFSET,
    BYTE_COUNT_LENGTH,
    BYTE_COUNT_OFFSET,
    CHECKSUM_LENGTH,
    DATA_OFFSET,
    HEX_DIGITS_PER_BYTE,
    MIN_LINE_LENGTH,
    RECORD_TYPE_LENGTH,
    RECORD_TYPE_OFFSET,
    START_CODE,
    START_CODE_OFFSET,
    Record,
    RecordType,
)

# Logger for this module
logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class RecordTypePolicy(Enum):
    """How the record type byte is checked when a line is parsed."""
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_name(cls, name: str) -> "RecordTypePolicy":
        """Look up a policy by name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Invalid record type policy '{name}'. Choose from: {choices}")


# =============================================================================
# Line Splitting
# =============================================================================

def split_lines(text: str) -> list[tuple[int, str]]:
    """
    Split HEX file text into numbered, non-empty lines.

    Lines end at LF, CRLF or CR; other control characters stay part of the
    line. Zero-length lines are dropped; line numbers still count them so
    errors point at the right place in the file.

    Args:
        text: Full decoded text of a HEX file

    Returns:
        List of (line_number, line) tuples, line numbers 1-indexed
    """
    return [
        (number, line)
        for number, line in enumerate(_LINE_BREAK.split(text), start=1)
        if line
    ]


# =============================================================================
# Line Parsing
# =============================================================================

def _decode_hex(
    line: str,
    offset: int,
    length: int,
    field_name: str,
    line_number: Optional[int],
) -> int:
    """Decode one fixed-width hex field of a line."""
    text = line[offset:offset + length]
    if len(text) != length or not _HEX_DIGITS.issuperset(text):
        raise MalformedLineError(
            f"invalid {field_name} field {text!r} at column {offset + 1}",
            line_number=line_number,
            source_line=line,
        )
    return int(text, 16)


def parse_line(
    line: str,
    policy: RecordTypePolicy = RecordTypePolicy.STRICT,
    line_number: Optional[int] = None,
) -> Record:
    """
    Parse a single line into a validated Record.

    Args:
        line: One line of Intel HEX text, without line terminator
        policy: How to check the record type byte
        line_number: 1-indexed line number, for error messages

    Returns:
        The parsed Record

    Raises:
        MalformedLineError: If the line is too short, lacks the start code,
            or contains non-hex characters
        ChecksumMismatchError: If the declared checksum is wrong
        UnsupportedRecordTypeError: If the policy is STRICT and the type
            byte is not a defined record type
    """
    if len(line) < MIN_LINE_LENGTH:
        raise MalformedLineError(
            f"line is shorter than the minimum length of {MIN_LINE_LENGTH}",
            line_number=line_number,
            source_line=line,
        )
    if line[START_CODE_OFFSET] != START_CODE:
        raise MalformedLineError(
            f"line does not start with the start code '{START_CODE}'",
            line_number=line_number,
            source_line=line,
        )

    data_length = _decode_hex(line, BYTE_COUNT_OFFSET, BYTE_COUNT_LENGTH, "byte count", line_number)
    address = _decode_hex(line, ADDRESS_OFFSET, ADDRESS_LENGTH, "address", line_number)
    record_type = _decode_hex(line, RECORD_TYPE_OFFSET, RECORD_TYPE_LENGTH, "record type", line_number)

    checksum_offset = DATA_OFFSET + data_length * HEX_DIGITS_PER_BYTE
    expected_length = checksum_offset + CHECKSUM_LENGTH
    if len(line) < expected_length:
        raise MalformedLineError(
            f"line declares {data_length} data bytes but is only {len(line)} "
            f"characters long (need {expected_length})",
            line_number=line_number,
            source_line=line,
        )
    if len(line) > expected_length:
        logger.debug(
            f"Line {line_number}: ignoring {len(line) - expected_length} trailing characters"
        )

    data = bytes(
        _decode_hex(line, DATA_OFFSET + i * HEX_DIGITS_PER_BYTE, HEX_DIGITS_PER_BYTE, "data", line_number)
        for i in range(data_length)
    )
    declared_checksum = _decode_hex(line, checksum_offset, CHECKSUM_LENGTH, "checksum", line_number)

    record = Record(
        record_type=record_type,
        address=address,
        data=data,
        line_number=line_number,
        source_line=line,
    )

    if record.checksum != declared_checksum:
        raise ChecksumMismatchError(
            expected=record.checksum,
            actual=declared_checksum,
            line_number=line_number,
            source_line=line,
        )

    if policy is RecordTypePolicy.STRICT and not RecordType.is_defined(record_type):
        raise UnsupportedRecordTypeError(
            record_type,
            line_number=line_number,
            source_line=line,
            hint="defined record types are 00 to 05",
        )

    return record


def parse_records(
    text: str,
    policy: RecordTypePolicy = RecordTypePolicy.STRICT,
) -> list[Record]:
    """
    Parse every non-empty line of a HEX file.

    All lines are parsed and validated, including any that follow an
    End Of File record.

    Args:
        text: Full decoded text of a HEX file
        policy: How to check the record type byte

    Returns:
        Records in file order
    """
    records = [
        parse_line(line, policy=policy, line_number=number)
        for number, line in split_lines(text)
    ]
    logger.debug(f"Parsed {len(records)} records")
    return records
