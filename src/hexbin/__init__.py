"""
hexbin - Intel HEX to Binary Image Converter
============================================

This package converts firmware and data files in the Intel HEX text format
into contiguous binary images.

Main Components
---------------
- **ihex**: Record model, line parser and two-pass image assembler
    Converts the text of a .hex file into a flat byte image

- **config**: Converter settings, with environment variable overrides

- **cli**: Command-line tool (hex2bin)

Quick Start
-----------
Convert text:
    >>> from hexbin import convert_hex
    >>> image = convert_hex(open("firmware.hex").read())

Convert a file:
    >>> from hexbin import convert_hex_file, write_image
    >>> write_image(convert_hex_file("firmware.hex"), "firmware.bin")

Or use the command-line tool:
    $ hex2bin firmware.hex -o firmware.bin

Reference Documentation
-----------------------
- Intel HEX format: https://en.wikipedia.org/wiki/Intel_HEX

Version History
---------------
1.0.0 - Initial release with parser, assembler and hex2bin
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from hexbin.errors import (
    HexError,
    InvalidInputError,
    HexFormatError,
    MalformedLineError,
    ChecksumMismatchError,
    UnsupportedRecordTypeError,
    BufferOverflowError,
)

from hexbin.ihex import (
    RecordType,
    Record,
    RecordTypePolicy,
    OutputFormat,
    parse_line,
    parse_records,
    compute_image_size,
    assemble_image,
    convert_hex,
    convert_hex_file,
    read_hex_file,
    write_image,
)

from hexbin.config import ConverterConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "HexError",
    "InvalidInputError",
    "HexFormatError",
    "MalformedLineError",
    "ChecksumMismatchError",
    "UnsupportedRecordTypeError",
    "BufferOverflowError",
    # Records and parsing
    "RecordType",
    "Record",
    "RecordTypePolicy",
    "OutputFormat",
    "parse_line",
    "parse_records",
    "compute_image_size",
    "assemble_image",
    "convert_hex",
    "convert_hex_file",
    "read_hex_file",
    "write_image",
    # Configuration
    "ConverterConfig",
]
