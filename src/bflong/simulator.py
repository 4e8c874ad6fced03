"""
Tape Simulator
==============

Executes a token stream against a virtual tape and records every output
event. This is the first half of long-form compilation: the encoder then
turns the recorded values into text.

Tape Model
----------
The tape is a sparse mapping of cell index to Python int, so cell values
never wrap or overflow. It starts with a single allocated cell (index 0,
value 0) and grows to the right as the pointer moves onto new cells.

Left Edge Clamp
---------------
Moving left from cell 0 is a no-op: the pointer stays at 0 and no error is
raised. Programs that run off the left edge therefore keep operating on the
first cell. Compiled output depends on this, so it must not become an error.

Unsupported Instructions
------------------------
Only the five linear instructions (+ - < > .) are executed. Input and loop
instructions are skipped without assuming any semantics for them.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union
import logging

from bflong.lexer import Instruction, Token
from bflong.position import Position

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Data Types
# =============================================================================

@dataclass(frozen=True)
class OutputEvent:
    """
    Snapshot of the current cell taken when an OUTPUT instruction runs.

    Attributes:
        value: The cell value at the time of output
        pointer: The tape index that was output
        token_index: Index of the OUTPUT instruction in the token stream
    """
    value: int
    pointer: int = 0
    token_index: int = 0


class Tape:
    """
    Sparse, zero-initialized tape with a clamped pointer.

    The pointer always refers to an allocated cell.
    """

    def __init__(self) -> None:
        self.cells: dict[int, int] = {0: 0}
        self.pointer = 0

    @property
    def value(self) -> int:
        """Value of the cell under the pointer."""
        return self.cells[self.pointer]

    def add(self, amount: int) -> None:
        self.cells[self.pointer] += amount

    def move_left(self) -> None:
        # Clamped at the left edge
        if self.pointer > 0:
            self.pointer -= 1

    def move_right(self) -> None:
        self.pointer += 1
        self.cells.setdefault(self.pointer, 0)

    def snapshot(self) -> list[int]:
        """Return cells 0..max allocated index as a dense list."""
        return [self.cells.get(i, 0) for i in range(max(self.cells) + 1)]

    def __repr__(self) -> str:
        return f"Tape(pointer={self.pointer}, cells={self.snapshot()})"


# =============================================================================
# Simulator
# =============================================================================

class Simulator:
    """
    Runs a token stream against a fresh tape and collects output events.

    One Simulator holds the state of a single run. Use a new instance (or
    run() again, which resets state) for each program.

    Example:
        >>> from bflong.lexer import parse
        >>> sim = Simulator()
        >>> [e.value for e in sim.run(parse("+.+."))]
        [1, 2]

    Attributes:
        tape: The virtual tape
        events: Output events recorded so far, in execution order
    """

    def __init__(self) -> None:
        self.tape = Tape()
        self.events: list[OutputEvent] = []
        self._position = Position()

    def run(
        self,
        tokens: Sequence[Union[Token, Instruction]],
    ) -> list[OutputEvent]:
        """
        Execute every token once, left to right.

        Args:
            tokens: Tokens from the lexer, or bare Instructions

        Returns:
            The recorded output events
        """
        self.tape = Tape()
        self.events = []
        self._position.reset()

        item = self._position.current(tokens)
        while item is not None:
            instruction = item.instruction if isinstance(item, Token) else item
            self.step(instruction)
            self._position.advance()
            item = self._position.current(tokens)

        logger.debug(
            f"Simulated {len(tokens)} instructions: "
            f"{len(self.events)} outputs, {len(self.tape.cells)} cells"
        )
        return self.events

    def step(self, instruction: Optional[Instruction]) -> None:
        """Apply a single instruction to the tape."""
        tape = self.tape

        if instruction is Instruction.INCREMENT:
            tape.add(1)
        elif instruction is Instruction.DECREMENT:
            tape.add(-1)
        elif instruction is Instruction.MOVE_LEFT:
            tape.move_left()
        elif instruction is Instruction.MOVE_RIGHT:
            tape.move_right()
        elif instruction is Instruction.OUTPUT:
            self.events.append(
                OutputEvent(tape.value, tape.pointer, self._position.index)
            )
        else:
            logger.debug(f"Skipping unsupported instruction {instruction!r}")


def simulate(tokens: Sequence[Union[Token, Instruction]]) -> list[OutputEvent]:
    """Run tokens on a fresh tape and return the output event log."""
    return Simulator().run(tokens)
