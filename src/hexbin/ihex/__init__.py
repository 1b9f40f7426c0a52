"""
Intel HEX Handling
==================

This module converts Intel HEX files into flat binary images.

Overview
--------
An Intel HEX file is a sequence of text records, each carrying up to 255
data bytes and a 16-bit load offset. Address-extension records move a base
address so that data can be placed anywhere in a 32-bit address space.
Conversion maps every Data record onto one zero-filled image.

This module provides:
- **Record / RecordType**: One parsed line and its type identifiers
- **Checksum utilities**: Calculate and verify record checksums
- **Parser**: Split text into lines and parse them under a type policy
- **Assembler**: Size the image, then assemble it (two passes)
- **File helpers**: Read .hex files and write images

Quick Start
-----------
Converting text:

    >>> from hexbin.ihex import convert_hex
    >>> image = convert_hex(":020000000102FB\\n:00000001FF\\n")

Converting a file:

    >>> from hexbin.ihex import convert_hex_file, write_image
    >>> image = convert_hex_file("firmware.hex")
    >>> write_image(image, "firmware.bin")

Reference
---------
- Intel HEX format: https://en.wikipedia.org/wiki/Intel_HEX
"""

# =============================================================================
# Public API Exports
# =============================================================================

# Record type definitions and layout
from hexbin.ihex.records import (
    RecordType,
    Record,
    START_CODE,
    MIN_LINE_LENGTH,
)

# Checksum utilities
from hexbin.ihex.checksum import (
    sum_record_bytes,
    calculate_record_checksum,
    verify_record_checksum,
)

# Parser
from hexbin.ihex.parser import (
    RecordTypePolicy,
    split_lines,
    parse_line,
    parse_records,
)

# Assembler
from hexbin.ihex.assembler import (
    compute_image_size,
    assemble_image,
    convert_hex,
)

# File input/output
from hexbin.ihex.files import (
    OutputFormat,
    validate_hex_path,
    read_hex_file,
    convert_hex_file,
    format_image,
    write_image,
)

__all__ = [
    # Records
    "RecordType",
    "Record",
    "START_CODE",
    "MIN_LINE_LENGTH",
    # Checksum
    "sum_record_bytes",
    "calculate_record_checksum",
    "verify_record_checksum",
    # Parser
    "RecordTypePolicy",
    "split_lines",
    "parse_line",
    "parse_records",
    # Assembler
    "compute_image_size",
    "assemble_image",
    "convert_hex",
    # Files
    "OutputFormat",
    "validate_hex_path",
    "read_hex_file",
    "convert_hex_file",
    "format_image",
    "write_image",
]
