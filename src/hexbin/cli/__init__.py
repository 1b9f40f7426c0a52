"""
hexbin Command-Line Interface
=============================

This package provides the command-line tools for hexbin:

- **hex2bin**: Intel HEX to binary image converter

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["hex2bin"]
