"""
hexbin Error Hierarchy
======================

This module defines the exception hierarchy for hexbin. All exceptions
inherit from HexError, allowing callers to catch every conversion error
with a single except clause if desired.

Exception Hierarchy
-------------------
HexError (base)
├── InvalidInputError - input path is empty or has the wrong extension
└── HexFormatError - problem with the content of a HEX file
    ├── MalformedLineError - line too short, bad start code, non-hex digits
    ├── ChecksumMismatchError - declared checksum disagrees with computed one
    ├── UnsupportedRecordTypeError - StartLinearAddress or undefined type
    └── BufferOverflowError - data lands outside the computed image

Design Philosophy
-----------------
Every error is fatal: conversion either produces a complete image or raises
exactly one of these exceptions. Format errors carry the line number and the
offending line text so the user can locate the fault.

Error messages follow this format:
    line N: error: description
        :10010000214601360121470136007EFE09D2190140
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HexError(Exception):
    """
    Base exception for all hexbin errors.

        try:
            image = convert_hex(text)
        except HexError as e:
            print(f"Error: {e}")
    """
    pass


class InvalidInputError(HexError):
    """
    Invalid input file.

    Raised when:
    - The supplied path is empty
    - The file does not have an accepted extension (normally .hex)
    """
    pass


# =============================================================================
# Format Exceptions
# =============================================================================

class HexFormatError(HexError):
    """
    Base exception for errors in the content of an Intel HEX file.

    Attributes:
        message: The error description
        line_number: 1-indexed line number in the source text (optional)
        source_line: The offending line text (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.line_number = line_number
        self.source_line = source_line
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source line, and hint.

        Example output:
            line 3: error: checksum mismatch: expected 0x40, got 0x41
                :10010000214601360121470136007EFE09D2190141
        """
        parts = []

        if self.line_number is not None:
            parts.append(f"line {self.line_number}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class MalformedLineError(HexFormatError):
    """
    A line that cannot be decoded as an Intel HEX record.

    Examples:
        - Line shorter than the 11-character minimum
        - Missing ':' start code
        - Fewer data characters than the byte count declares
        - Non-hexadecimal characters in a field
    """
    pass


class ChecksumMismatchError(HexFormatError):
    """
    Declared checksum does not match the computed checksum.

    Attributes:
        expected: Checksum computed from the record fields
        actual: Checksum byte found at the end of the line
    """

    def __init__(
        self,
        expected: int,
        actual: int,
        line_number: Optional[int] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"checksum mismatch: expected 0x{expected:02X}, got 0x{actual:02X}",
            line_number=line_number,
            source_line=source_line,
        )


class UnsupportedRecordTypeError(HexFormatError):
    """
    Record type that cannot be assembled.

    StartLinearAddress (0x05) records are not supported, and neither is
    any type byte outside the six types defined by the format.
    """

    def __init__(
        self,
        record_type: int,
        line_number: Optional[int] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.record_type = record_type
        super().__init__(
            f"record type 0x{record_type:02X} not supported",
            line_number=line_number,
            source_line=source_line,
            hint=hint,
        )


class BufferOverflowError(HexFormatError):
    """
    Data record writes past the end of the output image.

    The image is sized in a first pass using the same address arithmetic
    as assembly, so this indicates an internal inconsistency rather than
    bad input.
    """

    def __init__(
        self,
        index: int,
        size: int,
        line_number: Optional[int] = None,
        source_line: Optional[str] = None,
    ):
        self.index = index
        self.size = size
        super().__init__(
            f"image is too small: need at least {index + 1} bytes, have {size}",
            line_number=line_number,
            source_line=source_line,
        )
