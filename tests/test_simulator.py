"""
Tests for the tape simulator.

Covers every linear instruction, the left-edge pointer clamp, unsupported
instructions and the output event log.
"""

import pytest

from bflong.lexer import Instruction, parse
from bflong.simulator import OutputEvent, Simulator, Tape, simulate


def values(source: str) -> list[int]:
    """Simulate source and return the output values only."""
    return [event.value for event in simulate(parse(source))]


# =============================================================================
# Tape Tests
# =============================================================================

class TestTape:
    """Tests for the sparse tape."""

    def test_initial_state(self):
        tape = Tape()
        assert tape.pointer == 0
        assert tape.value == 0
        assert tape.cells == {0: 0}

    def test_move_right_allocates_zero(self):
        tape = Tape()
        tape.add(5)
        tape.move_right()
        assert tape.pointer == 1
        assert tape.value == 0
        assert tape.snapshot() == [5, 0]

    def test_move_right_keeps_existing_cell(self):
        tape = Tape()
        tape.move_right()
        tape.add(7)
        tape.move_left()
        tape.move_right()
        assert tape.value == 7

    def test_move_left_clamped(self):
        tape = Tape()
        tape.move_left()
        tape.move_left()
        assert tape.pointer == 0

    def test_values_unbounded(self):
        """Cells are Python ints: no wrap at 255 or 0."""
        tape = Tape()
        tape.add(300)
        assert tape.value == 300
        tape.add(-301)
        assert tape.value == -1


# =============================================================================
# Instruction Semantics
# =============================================================================

class TestInstructions:
    """Each linear instruction's effect on the tape."""

    def test_increment(self):
        sim = Simulator()
        sim.step(Instruction.INCREMENT)
        assert sim.tape.value == 1

    def test_decrement_goes_negative(self):
        sim = Simulator()
        sim.step(Instruction.DECREMENT)
        assert sim.tape.value == -1

    def test_output_records_event(self):
        sim = Simulator()
        sim.step(Instruction.INCREMENT)
        sim.step(Instruction.OUTPUT)
        assert sim.events == [OutputEvent(1, 0, 0)]

    def test_cells_independent(self):
        assert values("++>+++.<.") == [3, 2]

    def test_event_diagnostics(self):
        events = simulate(parse(">+."))
        assert events[0].pointer == 1
        assert events[0].token_index == 2

    @pytest.mark.parametrize("instruction", [
        Instruction.INPUT,
        Instruction.LOOP_START,
        Instruction.LOOP_END,
        None,
        "?",
    ])
    def test_unsupported_is_noop(self, instruction):
        sim = Simulator()
        sim.step(Instruction.INCREMENT)
        sim.step(instruction)
        assert sim.tape.value == 1
        assert sim.tape.pointer == 0
        assert sim.events == []

    def test_loops_not_executed(self):
        """Loop brackets are skipped; the body runs exactly once."""
        assert values("+[.-]") == [1]


# =============================================================================
# Pointer Clamp Invariant
# =============================================================================

class TestPointerClamp:
    """The pointer never goes negative."""

    @pytest.mark.parametrize("source", [
        "<<<+.",
        "<><<<>>><<<<<<",
        ">>>" + "<" * 10 + "+.",
        "+<-<+<.",
    ])
    def test_never_negative_at_any_step(self, source):
        sim = Simulator()
        for token in parse(source):
            sim.step(token.instruction)
            assert sim.tape.pointer >= 0

    def test_left_moves_before_any_right(self):
        """Scenario: '<<<+.' stays on cell 0."""
        assert values("<<<+.") == [1]

    def test_clamp_then_move_right(self):
        assert values("+<<>+.<.") == [1, 1]


# =============================================================================
# Run Behaviour
# =============================================================================

class TestRun:
    """Whole-program simulation."""

    def test_scenarios(self):
        assert values("+++.") == [3]
        assert values("+++---.") == [0]
        assert values("+.+.+.") == [1, 2, 3]
        assert values("+.-.") == [1, 0]

    def test_no_instructions(self):
        assert simulate(parse("hello world")) == []

    def test_accepts_bare_instructions(self):
        events = simulate([Instruction.INCREMENT, Instruction.OUTPUT])
        assert [e.value for e in events] == [1]

    def test_run_resets_state(self):
        sim = Simulator()
        sim.run(parse("+++."))
        events = sim.run(parse("+."))
        assert [e.value for e in events] == [1]
        assert sim.tape.cells == {0: 1}

    def test_separate_runs_do_not_share_tape(self):
        first = simulate(parse(">+++."))
        second = simulate(parse("."))
        assert first[0].value == 3
        assert second[0].value == 0
