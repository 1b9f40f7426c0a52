"""
hex2bin - Intel HEX to Binary Command-Line Interface
====================================================

Converts an Intel HEX file into a flat binary image.

Usage Examples
--------------
Basic conversion (writes firmware.bin):
    $ hex2bin firmware.hex

With output file:
    $ hex2bin firmware.hex -o image.bin

Decimal text output, one byte value per line:
    $ hex2bin firmware.hex -o image.txt -f decimal

Accept undefined record types while parsing:
    $ hex2bin --lenient firmware.hex

Defaults can also be set through HEXBIN_* environment variables
(see hexbin.config).
"""

from pathlib import Path
from typing import Optional
import logging

import click

from hexbin import __version__
from hexbin.cli.errors import handle_cli_exception
from hexbin.config import ConverterConfig
from hexbin.ihex import OutputFormat, RecordTypePolicy, convert_hex_file, write_image


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: input with .bin suffix)",
)
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format: binary (raw bytes) or decimal (one value per line). "
         "Default: binary, or HEXBIN_OUTPUT_FORMAT.",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject undefined record types while parsing (strict, default) "
         "or only when assembling (lenient).",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hex2bin")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: Optional[str],
    strict: Optional[bool],
    verbose: bool,
) -> None:
    """
    Convert an Intel HEX file to a binary image.

    INPUT_FILE is the Intel HEX file (.hex) to convert.

    Data records are placed at their absolute addresses in a zero-filled
    image; byte 0 of the output is address 0.

    \b
    Examples:
        hex2bin firmware.hex                  # Outputs firmware.bin
        hex2bin firmware.hex -o image.bin     # Specify output file
        hex2bin firmware.hex -f decimal       # Decimal text output
    """
    setup_logging(verbose)

    config = ConverterConfig.from_env()
    if output_format is not None:
        config.output_format = OutputFormat.from_name(output_format)
    if strict is not None:
        config.type_policy = RecordTypePolicy.STRICT if strict else RecordTypePolicy.LENIENT

    output_file = output if output is not None else input_file.with_suffix(".bin")

    try:
        if verbose:
            click.echo(f"Converting {input_file} ({config.type_policy.value} record types)...")

        image = convert_hex_file(
            input_file,
            policy=config.type_policy,
            extensions=config.extensions,
            encoding=config.encoding,
        )
        bytes_written = write_image(image, output_file, config.output_format)

        if verbose:
            click.echo(f"Image size: {len(image)} bytes")
            click.echo(f"Wrote {bytes_written} bytes ({config.output_format.value}) to {output_file}")
        else:
            click.echo(f"Created {output_file} ({len(image)} bytes)")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
