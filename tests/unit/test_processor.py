"""Tests for StackProcessor functionality."""

import pytest

from crashlyfix.core.processor import ProcessorState, StackProcessor, process_stack
from crashlyfix.core.resolver import PositionResolver
from crashlyfix.models.stack import PassthroughEntry, ResolvedFrame
from crashlyfix.utils.errors import StackParseError


@pytest.fixture
def processor(app_resolver: PositionResolver) -> StackProcessor:
    """Create a StackProcessor over the app map."""
    return StackProcessor(app_resolver)


class TestProcess:
    """Tests for process on well-formed traces."""

    def test_header_and_frames(self, processor: StackProcessor) -> None:
        """Test that the first unmatched line is passed through."""
        entries = processor.process(["JavascriptException: boom", "foo@12:5", "at bar (app.js:20:3)"])

        assert entries == [
            PassthroughEntry(text="JavascriptException: boom"),
            ResolvedFrame("src/foo.js", 3, 1, "foo", raw="foo@12:5"),
            ResolvedFrame("src/bar.js", 8, 2, "bar", raw="at bar (app.js:20:3)"),
        ]

    def test_first_line_may_be_a_frame(self, processor: StackProcessor) -> None:
        """Test that a matching first line is resolved, not passed through."""
        entries = processor.process(["foo@12:5", "bar@20:3"])
        assert all(isinstance(entry, ResolvedFrame) for entry in entries)
        assert len(entries) == 2

    def test_empty_first_line_passes_through(self, processor: StackProcessor) -> None:
        """Test that a blank first line is a header, not a terminator."""
        entries = processor.process(["", "foo@12:5"])
        assert entries[0] == PassthroughEntry(text="")
        assert len(entries) == 2

    def test_blank_line_terminates(self, processor: StackProcessor) -> None:
        """Test that lines after a blank line are ignored, even garbage."""
        entries = processor.process(
            ["JavascriptException: boom", "foo@12:5", "", "not a frame", "bar@20:3"]
        )
        assert len(entries) == 2
        assert entries[-1] == ResolvedFrame("src/foo.js", 3, 1, "foo", raw="foo@12:5")

    def test_unmapped_frame_kept(self, processor: StackProcessor) -> None:
        """Test that an unmapped position yields an unmapped frame."""
        entries = processor.process(["Error", "foo@12:2"])
        frame = entries[1]
        assert isinstance(frame, ResolvedFrame)
        assert not frame.is_mapped
        assert frame.raw == "foo@12:2"

    def test_empty_input(self, processor: StackProcessor) -> None:
        """Test that no lines give no entries."""
        assert processor.process([]) == []

    def test_process_stack_helper(self, app_resolver: PositionResolver) -> None:
        """Test the module-level helper."""
        entries = process_stack(["Error", "foo@12:5"], app_resolver)
        assert len(entries) == 2


class TestProcessErrors:
    """Tests for parse failures."""

    def test_unrecognized_line_raises(self, processor: StackProcessor) -> None:
        """Test that a garbage line after the header fails with its line number."""
        with pytest.raises(StackParseError) as exc_info:
            processor.process(["JavascriptException: boom", "foo@12:5", "this is not a frame"])

        assert exc_info.value.line_number == 3
        assert exc_info.value.text == "this is not a frame"
        assert str(exc_info.value) == "Stack trace parse error at line 3: this is not a frame"

    def test_second_line_unrecognized(self, processor: StackProcessor) -> None:
        """Test that only the first line may be a non-frame."""
        with pytest.raises(StackParseError) as exc_info:
            processor.process(["Header", "Another header"])
        assert exc_info.value.line_number == 2

    def test_whitespace_only_line_is_not_blank(self, processor: StackProcessor) -> None:
        """Test that a line of spaces does not terminate the trace."""
        with pytest.raises(StackParseError):
            processor.process(["Header", "foo@12:5", "   "])


class TestStep:
    """Tests for the parsing state machine."""

    def test_header_moves_to_frames(self, processor: StackProcessor) -> None:
        """Test the transition out of the header state."""
        entries: list = []
        state = processor._step(ProcessorState.AWAITING_HEADER_OR_FRAME, 0, "Header", entries)
        assert state is ProcessorState.IN_FRAMES
        assert entries == [PassthroughEntry(text="Header")]

    def test_blank_moves_to_done(self, processor: StackProcessor) -> None:
        """Test that a blank line in frames ends parsing."""
        entries: list = []
        state = processor._step(ProcessorState.IN_FRAMES, 4, "", entries)
        assert state is ProcessorState.DONE
        assert entries == []

    def test_frame_stays_in_frames(self, processor: StackProcessor) -> None:
        """Test that a frame keeps the machine in the frames state."""
        entries: list = []
        state = processor._step(ProcessorState.IN_FRAMES, 1, "foo@12:5", entries)
        assert state is ProcessorState.IN_FRAMES
        assert len(entries) == 1
