"""
bflong - Long-Form Compiler Command-Line Interface
==================================================

This module implements the command-line interface for the long-form
compiler.

Commands
--------
- **compile**: Compile a Brainfuck source file to one or more `.long` files
- **replay**: Print the output values recorded in a `.long` file

Usage Examples
--------------
Compile into ./dist/compiled.long:
    $ bflong compile hello.bf

Choose the output directory and file names:
    $ bflong compile hello.bf -o build -n hello -n hello_copy

Print the long form instead of writing files:
    $ bflong compile hello.bf --stdout

Read a long-form file back:
    $ bflong replay dist/hello.long
    $ bflong replay --text dist/hello.long
"""

import logging
from pathlib import Path
from typing import Optional

import click

from bflong import __version__
from bflong.cli.errors import handle_cli_exception
from bflong.compiler import BfLongCompiler, CompilerOptions, DEFAULT_DESTINATION
from bflong.encoder import replay


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="bflong")
def main() -> None:
    """
    Brainfuck long-form compiler.

    Runs a Brainfuck program on a virtual tape and records everything it
    outputs as a compact delta-encoded string.

    \b
    Commands:
      compile   Compile source to .long files
      replay    Print the values encoded in a .long file

    \b
    Examples:
      bflong compile hello.bf
      bflong compile hello.bf -o build -n hello
      bflong replay dist/compiled.long
    """
    pass


# =============================================================================
# Compile Command
# =============================================================================

@main.command("compile")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: ./dist)",
)
@click.option(
    "-n", "--name",
    "names",
    multiple=True,
    help=f"Output file name without extension (default: {DEFAULT_DESTINATION}, can be repeated)",
)
@click.option(
    "--stdout",
    is_flag=True,
    help="Print the long form instead of writing files",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def cmd_compile(
    input_file: Path,
    output_dir: Optional[Path],
    names: tuple[str, ...],
    stdout: bool,
    verbose: bool,
) -> None:
    """
    Compile a Brainfuck source file to long form.

    INPUT_FILE is the Brainfuck source. Every character that is not one
    of + - < > . , [ ] is treated as a comment.

    \b
    Examples:
      bflong compile hello.bf               # Writes dist/compiled.long
      bflong compile hello.bf -n hello      # Writes dist/hello.long
      bflong compile hello.bf --stdout      # Prints the long form
    """
    setup_logging(verbose)

    options = CompilerOptions(
        output_dir=output_dir,
        write_output=not stdout,
    )
    if names:
        options.destinations = list(names)

    try:
        if verbose:
            click.echo(f"Compiling {input_file}...")

        result = BfLongCompiler(options).compile_file(input_file)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} instructions")
            click.echo(f"Simulated: {len(result.events)} outputs")

        if stdout:
            click.echo(result.compiled)
            return

        for path in result.written:
            click.echo(f"Compiled {input_file} -> {path}")

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Replay Command
# =============================================================================

@main.command("replay")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-t", "--text",
    is_flag=True,
    help="Print values as characters (value modulo 256) instead of numbers",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def cmd_replay(input_file: Path, text: bool, verbose: bool) -> None:
    """
    Print the output values encoded in a long-form file.

    INPUT_FILE is a `.long` file produced by `bflong compile`.

    \b
    Examples:
      bflong replay dist/compiled.long
      bflong replay --text dist/compiled.long
    """
    setup_logging(verbose)

    try:
        long_form = input_file.read_text(encoding="utf-8", errors="replace").strip()
        values = replay(long_form, str(input_file))

        if verbose:
            click.echo(f"Replayed {len(values)} outputs from {input_file}")

        if text:
            click.echo("".join(chr(v % 256) for v in values), nl=False)
            return

        for value in values:
            click.echo(value)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
