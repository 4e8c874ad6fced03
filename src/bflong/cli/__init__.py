"""
bflong Command-Line Interface
=============================

This package provides the `bflong` command-line tool:

- **bflong compile**: Compile Brainfuck source to `.long` files
- **bflong replay**: Print the output values encoded in a `.long` file

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["bflong"]
