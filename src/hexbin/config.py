"""
hexbin Configuration
====================

Converter settings. Configuration can come from:
- Default values (defined here)
- Environment variables (ConverterConfig.from_env)
- Command-line options, which override both

Environment variables (all optional):
    HEXBIN_TYPE_POLICY: "strict" or "lenient"
    HEXBIN_OUTPUT_FORMAT: "binary" or "decimal"
    HEXBIN_ENCODING: Text encoding of input files (e.g., "latin-1")
    HEXBIN_EXTENSIONS: Comma-separated accepted suffixes (e.g., ".hex,.ihx")
"""

from dataclasses import dataclass, field
import codecs
import logging
import os

from hexbin.ihex.files import DEFAULT_EXTENSIONS, OutputFormat
from hexbin.ihex.parser import RecordTypePolicy

# Logger for this module
logger = logging.getLogger(__name__)


@dataclass
class ConverterConfig:
    """
    Settings for converting HEX files.

    Attributes:
        type_policy: How record type bytes are checked (default: STRICT)
        output_format: How images are written (default: BINARY)
        encoding: Text encoding of input files (default: utf-8)
        extensions: Accepted input suffixes (default: .hex)
    """
    type_policy: RecordTypePolicy = RecordTypePolicy.STRICT
    output_format: OutputFormat = OutputFormat.BINARY
    encoding: str = "utf-8"
    extensions: tuple[str, ...] = field(default_factory=lambda: DEFAULT_EXTENSIONS)

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """
        Create a ConverterConfig from environment variables.

        Invalid values are logged and ignored.
        """
        config = cls()

        if policy := os.environ.get("HEXBIN_TYPE_POLICY"):
            try:
                config.type_policy = RecordTypePolicy.from_name(policy)
            except ValueError as e:
                logger.warning(f"Ignoring HEXBIN_TYPE_POLICY: {e}")

        if output_format := os.environ.get("HEXBIN_OUTPUT_FORMAT"):
            try:
                config.output_format = OutputFormat.from_name(output_format)
            except ValueError as e:
                logger.warning(f"Ignoring HEXBIN_OUTPUT_FORMAT: {e}")

        if encoding := os.environ.get("HEXBIN_ENCODING"):
            try:
                codecs.lookup(encoding)
                config.encoding = encoding
            except LookupError:
                logger.warning(f"Ignoring HEXBIN_ENCODING: unknown encoding '{encoding}'")

        if extensions := os.environ.get("HEXBIN_EXTENSIONS"):
            parsed = tuple(
                ext if ext.startswith(".") else f".{ext}"
                for ext in (e.strip() for e in extensions.split(","))
                if ext
            )
            if parsed:
                config.extensions = parsed

        return config
