"""
Brainfuck Lexer
===============

This module converts Brainfuck source text into a list of instruction
tokens for the simulator.

Instruction Set
---------------
| Symbol | Instruction | Simulated |
|--------|-------------|-----------|
| +      | INCREMENT   | yes       |
| -      | DECREMENT   | yes       |
| <      | MOVE_LEFT   | yes       |
| >      | MOVE_RIGHT  | yes       |
| .      | OUTPUT      | yes       |
| ,      | INPUT       | no-op     |
| [      | LOOP_START  | no-op     |
| ]      | LOOP_END    | no-op     |

Comments
--------
Every character outside the instruction set is a comment. The lexer skips
it silently, so tokenizing never fails: an empty or instruction-free source
simply yields no tokens.

Example Usage
-------------
>>> from bflong.lexer import parse
>>> for token in parse("+ +\\n."):
...     print(token)
Token(INCREMENT, 1:1)
Token(INCREMENT, 1:3)
Token(OUTPUT, 2:1)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Iterable

from bflong.errors import SourceLocation


# =============================================================================
# Instruction Enumeration
# =============================================================================

class Instruction(Enum):
    """
    The closed set of Brainfuck instructions.

    Each member's value is its source symbol.
    """

    INCREMENT = "+"
    DECREMENT = "-"
    MOVE_LEFT = "<"
    MOVE_RIGHT = ">"
    OUTPUT = "."
    INPUT = ","
    LOOP_START = "["
    LOOP_END = "]"

    @property
    def symbol(self) -> str:
        return self.value

    def is_linear(self) -> bool:
        """Return True for the instructions the simulator executes."""
        return self in LINEAR_INSTRUCTIONS


# Map source symbols to their instructions. Shared by lexer and simulator.
INSTRUCTION_SYMBOLS: dict[str, Instruction] = {
    instruction.value: instruction for instruction in Instruction
}

LINEAR_INSTRUCTIONS = frozenset({
    Instruction.INCREMENT,
    Instruction.DECREMENT,
    Instruction.MOVE_LEFT,
    Instruction.MOVE_RIGHT,
    Instruction.OUTPUT,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single instruction read from source.

    Attributes:
        instruction: The decoded Instruction
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    instruction: Instruction
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.instruction.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for diagnostics."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Lexer Implementation
# =============================================================================

class BfLexer:
    """
    Tokenizes Brainfuck source code.

    Usage:
        lexer = BfLexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for token locations)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects in source order
        """
        while not self._at_end():
            line, column = self._line, self._column
            char = self._advance()

            instruction = INSTRUCTION_SYMBOLS.get(char)
            if instruction is None:
                continue

            yield Token(instruction, line, column, self.filename)

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _advance(self) -> str:
        """
        Consume and return the current character.

        Updates line and column tracking.
        """
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize source text into a list of instruction tokens.

    Args:
        source: Brainfuck source text
        filename: Source filename recorded in each token

    Returns:
        Tokens in source order; empty when source has no instructions
    """
    return list(BfLexer(source, filename).tokenize())


def instructions(tokens: Iterable[Token]) -> list[Instruction]:
    """Strip positions from tokens, keeping only the instruction stream."""
    return [token.instruction for token in tokens]
