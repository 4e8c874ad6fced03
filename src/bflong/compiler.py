"""
Long-Form Compiler Main Module
==============================

This module provides the main compiler interface. It orchestrates the
complete compilation process:

    Source → Lex → Simulate → Encode → Sink

Usage
-----
Command line:
    $ bflong compile hello.bf

Programmatic:
    >>> from bflong import compile_long
    >>> compile_long("+++.")
    '3+'

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Filter the source down to instruction tokens
2. **Simulation**: Run the tokens on a fresh tape, recording each output
3. **Encoding**: Delta-encode the recorded values as long-form text
4. **Output**: Write the text to one `.long` file per destination

Stages 1 to 3 never fail; only writing output can raise (SinkError).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
import logging

from bflong.encoder import encode
from bflong.lexer import parse
from bflong.simulator import OutputEvent, Simulator
from bflong.sink import DEFAULT_EXTENSION, write_long_output

# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_DESTINATION = "compiled"
DEFAULT_OUTPUT_DIRNAME = "dist"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        destinations: Output file names, without extension
        output_dir: Directory receiving the output files. None means
                    "<current directory>/dist", resolved when the options
                    are created.
        extension: Suffix appended to each destination name
        write_output: If False, compile without touching the filesystem
    """
    destinations: list[str] = field(
        default_factory=lambda: [DEFAULT_DESTINATION]
    )
    output_dir: Optional[Path] = None
    extension: str = DEFAULT_EXTENSION
    write_output: bool = True

    def __post_init__(self):
        if self.output_dir is None:
            self.output_dir = Path.cwd() / DEFAULT_OUTPUT_DIRNAME
        else:
            self.output_dir = Path(self.output_dir)


@dataclass(frozen=True)
class CompiledOutput:
    """
    The encoded program plus where it should be written.

    Attributes:
        destinations: Destination names, without extension
        compiled: The long-form text
    """
    destinations: tuple[str, ...]
    compiled: str


@dataclass
class CompilerResult:
    """
    Result of a compilation run.

    Attributes:
        filename: Source filename
        token_count: Number of instruction tokens in the source
        events: Output events recorded by the simulator
        output: The compiled output handed to the sink
        written: Paths written by the sink (empty when output is disabled)
    """
    filename: str = "<input>"
    token_count: int = 0
    events: list[OutputEvent] = field(default_factory=list)
    output: Optional[CompiledOutput] = None
    written: list[Path] = field(default_factory=list)

    @property
    def compiled(self) -> str:
        """The long-form text, or an empty string before compilation."""
        return self.output.compiled if self.output else ""


class BfLongCompiler:
    """
    Compiles Brainfuck source to long form.

    Example:
        compiler = BfLongCompiler(CompilerOptions(destinations=["hello"]))
        result = compiler.compile_file("hello.bf")
        print(result.compiled)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(
        self,
        source: str,
        filename: str = "<input>",
    ) -> CompilerResult:
        """
        Compile source text to long form.

        Args:
            source: Brainfuck source code
            filename: Source filename for token locations

        Returns:
            CompilerResult with the compiled output and diagnostics

        Raises:
            SinkError: If writing output is enabled and fails
        """
        result = CompilerResult(filename=filename)

        tokens = parse(source, filename)
        result.token_count = len(tokens)
        logger.debug(f"{filename}: {len(tokens)} instruction tokens")

        result.events = Simulator().run(tokens)

        compiled = encode(result.events)
        logger.debug(f"{filename}: encoded {len(result.events)} outputs as {compiled!r}")

        result.output = CompiledOutput(
            destinations=tuple(self.options.destinations),
            compiled=compiled,
        )

        if self.options.write_output:
            result.written = write_long_output(
                result.output,
                self.options.output_dir,
                self.options.extension,
            )
            logger.info(f"Compiled {filename} -> {len(result.written)} file(s) in {self.options.output_dir}")

        return result

    def compile_file(self, path: Union[str, Path]) -> CompilerResult:
        """
        Compile a source file.

        Bytes that are not valid UTF-8 decode to U+FFFD and are treated
        as comments like any other non-instruction character.

        Raises:
            FileNotFoundError: If path does not exist
            SinkError: If writing output is enabled and fails
        """
        path = Path(path)
        source = path.read_text(encoding="utf-8", errors="replace")
        return self.compile_source(source, str(path))


def compile_long(source: str) -> str:
    """
    Compile source to long-form text without writing any files.

    Args:
        source: Brainfuck source code

    Returns:
        The long-form string
    """
    compiler = BfLongCompiler(CompilerOptions(write_output=False))
    return compiler.compile_source(source).compiled
