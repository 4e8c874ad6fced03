"""
bflong - Brainfuck Long-Form Compiler
=====================================

This package compiles Brainfuck programs into their "long form": the
sequence of values the program outputs, written as deltas between
consecutive outputs.

    +++.+.   ->   outputs 3, 4   ->   "3+1+"

Main Components
---------------
- **lexer**: Source text to instruction tokens (non-instructions are comments)
- **position**: Forward-only cursor used to walk token streams
- **simulator**: Runs tokens on a virtual tape and records output events
- **encoder**: Delta-encodes output values, and replays long form back
- **compiler**: Orchestrates the pipeline and hands results to the sink
- **sink**: Writes `<name>.long` files into the output directory

Quick Start
-----------
    >>> from bflong import compile_long
    >>> compile_long("+.+.+.")
    '1+1+1+'

Write files into ./dist:
    >>> from bflong import BfLongCompiler, CompilerOptions
    >>> compiler = BfLongCompiler(CompilerOptions(destinations=["hello"]))
    >>> result = compiler.compile_file("hello.bf")   # writes dist/hello.long

Or use the command-line tool:
    $ bflong compile hello.bf -n hello
    $ bflong replay dist/hello.long
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from bflong.errors import (
    BfLongError,
    SourceLocation,
    LongFormatError,
    SinkError,
    OutputDirectoryError,
    OutputWriteError,
)
from bflong.position import Position
from bflong.lexer import (
    Instruction,
    INSTRUCTION_SYMBOLS,
    Token,
    BfLexer,
    parse,
    instructions,
)
from bflong.simulator import OutputEvent, Tape, Simulator, simulate
from bflong.encoder import encode, replay
from bflong.sink import write_long_output
from bflong.compiler import (
    BfLongCompiler,
    CompilerOptions,
    CompiledOutput,
    CompilerResult,
    compile_long,
)

__all__ = [
    "__version__",
    # Errors
    "BfLongError",
    "SourceLocation",
    "LongFormatError",
    "SinkError",
    "OutputDirectoryError",
    "OutputWriteError",
    # Lexer
    "Position",
    "Instruction",
    "INSTRUCTION_SYMBOLS",
    "Token",
    "BfLexer",
    "parse",
    "instructions",
    # Simulator
    "OutputEvent",
    "Tape",
    "Simulator",
    "simulate",
    # Encoder
    "encode",
    "replay",
    # Compiler and sink
    "write_long_output",
    "BfLongCompiler",
    "CompilerOptions",
    "CompiledOutput",
    "CompilerResult",
    "compile_long",
]
