"""
HEX File Input and Image Output
===============================

File handling around the converter core. The core (convert_hex) works on
text and returns bytes; this module reads .hex files from disk and writes
the resulting image.

Output Formats
--------------
- **BINARY**: the raw image bytes
- **DECIMAL**: one decimal byte value per line ("1\\n2\\n...")
"""

from enum import Enum
from pathlib import Path
from typing import Iterable, Union
import logging

from hexbin.errors import InvalidInputError
from hexbin.ihex.assembler import convert_hex
from hexbin.ihex.parser import RecordTypePolicy

# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".hex",)


class OutputFormat(Enum):
    """How an assembled image is written out."""
    BINARY = "binary"
    DECIMAL = "decimal"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Look up an output format by name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Invalid output format '{name}'. Choose from: {choices}")


# =============================================================================
# Input
# =============================================================================

def validate_hex_path(
    filepath: Union[str, Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Path:
    """
    Check that a path names an Intel HEX file.

    Args:
        filepath: Path to check
        extensions: Accepted suffixes, compared case-insensitively

    Returns:
        The path as a Path object

    Raises:
        InvalidInputError: If the path is empty or the suffix is not accepted
    """
    if not str(filepath):
        raise InvalidInputError("No input file given")

    filepath = Path(filepath)
    accepted = [ext.lower() for ext in extensions]
    if filepath.suffix.lower() not in accepted:
        raise InvalidInputError(
            f"File is not a hex file: {filepath} (expected {', '.join(accepted)})"
        )
    return filepath


def read_hex_file(
    filepath: Union[str, Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    encoding: str = "utf-8",
) -> str:
    """
    Read the full text of an Intel HEX file.

    Raises:
        InvalidInputError: If the path is empty, has the wrong extension,
            or the file is not valid text in the given encoding
        FileNotFoundError: If the file doesn't exist
    """
    filepath = validate_hex_path(filepath, extensions)
    try:
        text = filepath.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"File is not {encoding} text: {filepath} ({e})") from e
    logger.debug(f"Read {len(text)} characters from {filepath}")
    return text


def convert_hex_file(
    filepath: Union[str, Path],
    policy: RecordTypePolicy = RecordTypePolicy.STRICT,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    encoding: str = "utf-8",
) -> bytes:
    """
    Read an Intel HEX file and convert it into a binary image.

    Example:
        >>> image = convert_hex_file("firmware.hex")
        >>> print(f"{len(image)} bytes")
    """
    text = read_hex_file(filepath, extensions=extensions, encoding=encoding)
    return convert_hex(text, policy=policy)


# =============================================================================
# Output
# =============================================================================

def format_image(image: bytes, output_format: OutputFormat = OutputFormat.BINARY) -> bytes:
    """Render an image in the given output format."""
    if output_format is OutputFormat.DECIMAL:
        return "".join(f"{byte}\n" for byte in image).encode("ascii")
    return bytes(image)


def write_image(
    image: bytes,
    filepath: Union[str, Path],
    output_format: OutputFormat = OutputFormat.BINARY,
) -> int:
    """
    Write an image to disk.

    Args:
        image: The assembled image
        filepath: Destination path
        output_format: BINARY or DECIMAL

    Returns:
        Number of bytes written
    """
    filepath = Path(filepath)
    data = format_image(image, output_format)
    filepath.write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes ({output_format.value}) to {filepath}")
    return len(data)
