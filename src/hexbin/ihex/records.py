"""
Intel HEX Record Definitions
============================

This module defines the data structures for Intel HEX records. Each line
of a HEX file holds exactly one record.

Line Format
-----------
    :LLAAAATT[DD...]CC

    :     Start code (1 char)
    LL    Byte count (2 hex chars, 0-255)
    AAAA  Load offset (4 hex chars, big-endian)
    TT    Record type (2 hex chars)
    DD    Data bytes (2 hex chars each, LL of them)
    CC    Checksum (2 hex chars)

Record Types
------------
- $00: Data
- $01: End Of File
- $02: Extended Segment Address (base = value << 4)
- $03: Start Segment Address (treated like $02 when assembling)
- $04: Extended Linear Address (base = value << 16)
- $05: Start Linear Address (not supported when assembling)

All record kinds share the same wire shape, so a single Record class
tagged by its type byte represents every one of them.

Reference
---------
- Intel HEX format: https://en.wikipedia.org/wiki/Intel_HEX
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from hexbin.ihex.checksum import calculate_record_checksum

if TYPE_CHECKING:
    from hexbin.ihex.parser import RecordTypePolicy


# =============================================================================
# Line Layout
# =============================================================================

START_CODE = ":"

START_CODE_OFFSET = 0
START_CODE_LENGTH = 1
BYTE_COUNT_OFFSET = START_CODE_OFFSET + START_CODE_LENGTH
BYTE_COUNT_LENGTH = 2
ADDRESS_OFFSET = BYTE_COUNT_OFFSET + BYTE_COUNT_LENGTH
ADDRESS_LENGTH = 4
RECORD_TYPE_OFFSET = ADDRESS_OFFSET + ADDRESS_LENGTH
RECORD_TYPE_LENGTH = 2
DATA_OFFSET = RECORD_TYPE_OFFSET + RECORD_TYPE_LENGTH
CHECKSUM_LENGTH = 2

# Characters per data byte
HEX_DIGITS_PER_BYTE = 2

MIN_LINE_LENGTH = (
    START_CODE_LENGTH + BYTE_COUNT_LENGTH + ADDRESS_LENGTH
    + RECORD_TYPE_LENGTH + CHECKSUM_LENGTH
)

MAX_DATA_LENGTH = 0xFF
MAX_ADDRESS = 0xFFFF


# =============================================================================
# Enumeration Types
# =============================================================================

class RecordType(IntEnum):
    """Intel HEX record type identifiers."""
    DATA = 0x00
    END_OF_FILE = 0x01
    EXTENDED_SEGMENT_ADDRESS = 0x02
    START_SEGMENT_ADDRESS = 0x03
    EXTENDED_LINEAR_ADDRESS = 0x04
    START_LINEAR_ADDRESS = 0x05

    @classmethod
    def is_defined(cls, type_byte: int) -> bool:
        """Check if a type byte is one of the six defined record types."""
        try:
            cls(type_byte)
        except ValueError:
            return False
        return True

    @classmethod
    def is_segment_address(cls, type_byte: int) -> bool:
        """Check if a type byte sets a segment base (shifted left by 4)."""
        return type_byte in (cls.EXTENDED_SEGMENT_ADDRESS, cls.START_SEGMENT_ADDRESS)

    @classmethod
    def is_address_extension(cls, type_byte: int) -> bool:
        """Check if a type byte updates the running base address."""
        return (cls.is_segment_address(type_byte)
                or type_byte == cls.EXTENDED_LINEAR_ADDRESS)

    @classmethod
    def get_name(cls, type_byte: int) -> str:
        """Get a human-readable name for a record type."""
        names = {
            0x00: "Data",
            0x01: "End Of File",
            0x02: "Extended Segment Address",
            0x03: "Start Segment Address",
            0x04: "Extended Linear Address",
            0x05: "Start Linear Address",
        }
        return names.get(type_byte, f"Unknown (0x{type_byte:02X})")


# =============================================================================
# Record
# =============================================================================

@dataclass
class Record:
    """
    One parsed Intel HEX line.

    Attributes:
        record_type: Type byte; a RecordType member for the defined types
        address: 16-bit load offset, not yet combined with any base
        data: Payload bytes
        line_number: 1-indexed line in the source text (not compared)
        source_line: Original line text (not compared)

    Example:
        >>> record = Record(RecordType.DATA, 0x0100, bytes([0x01, 0x02]))
        >>> record.to_line()
        ':020100000102FA'
    """
    record_type: int
    address: int = 0
    data: bytes = b""

    # Source location, for error reporting only
    line_number: Optional[int] = field(default=None, compare=False)
    source_line: Optional[str] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if not 0 <= self.address <= MAX_ADDRESS:
            raise ValueError(f"Address out of range: 0x{self.address:X}")
        if len(self.data) > MAX_DATA_LENGTH:
            raise ValueError(f"Too many data bytes: {len(self.data)} (max {MAX_DATA_LENGTH})")
        if not 0 <= self.record_type <= 0xFF:
            raise ValueError(f"Record type out of range: {self.record_type}")
        self.data = bytes(self.data)
        if RecordType.is_defined(self.record_type):
            self.record_type = RecordType(self.record_type)

    @property
    def data_length(self) -> int:
        """Declared byte count (equal to the payload length)."""
        return len(self.data)

    @property
    def checksum(self) -> int:
        """Checksum byte computed from the record fields."""
        return calculate_record_checksum(
            self.data_length, self.address, self.record_type, self.data
        )

    @property
    def end_address(self) -> int:
        """Offset one past the last data byte, relative to the current base."""
        return self.address + self.data_length

    def base_address(self) -> int:
        """
        Base address set by an address-extension record.

        Segment records give a 16-bit paragraph number (shifted left by 4),
        extended linear records give the upper 16 address bits (shifted
        left by 16).

        Raises:
            ValueError: If the record is not an address-extension record
                or carries fewer than two data bytes
        """
        if not RecordType.is_address_extension(self.record_type):
            raise ValueError(
                f"{RecordType.get_name(self.record_type)} record does not set a base address"
            )
        if self.data_length < 2:
            raise ValueError(
                f"{RecordType.get_name(self.record_type)} record needs 2 data bytes, "
                f"has {self.data_length}"
            )
        value = (self.data[0] << 8) | self.data[1]
        if self.record_type == RecordType.EXTENDED_LINEAR_ADDRESS:
            return value << 16
        return value << 4

    def to_line(self) -> str:
        """Render the record as an Intel HEX line (upper-case, no newline)."""
        return (
            f"{START_CODE}{self.data_length:02X}{self.address:04X}"
            f"{self.record_type:02X}{self.data.hex().upper()}{self.checksum:02X}"
        )

    @classmethod
    def from_line(
        cls,
        line: str,
        policy: Optional["RecordTypePolicy"] = None,
        line_number: Optional[int] = None,
    ) -> "Record":
        """
        Parse a single Intel HEX line.

        Args:
            line: One line of Intel HEX text
            policy: Record type policy (default: STRICT)
            line_number: 1-indexed line number, for error messages

        Raises:
            MalformedLineError: If the line cannot be decoded
            ChecksumMismatchError: If the checksum is wrong
            UnsupportedRecordTypeError: If the policy is STRICT and the type
                byte is undefined
        """
        from hexbin.ihex.parser import RecordTypePolicy, parse_line
        if policy is None:
            policy = RecordTypePolicy.STRICT
        return parse_line(line, policy=policy, line_number=line_number)

    def __str__(self) -> str:
        return self.to_line()
