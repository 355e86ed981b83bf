"""Tests for stack data models."""

import pytest

from crashlyfix.models.stack import MatchResult, OriginalPosition, PassthroughEntry, ResolvedFrame


class TestOriginalPosition:
    """Test OriginalPosition dataclass."""

    def test_default_is_unmapped(self) -> None:
        """Test that an empty position is unmapped."""
        position = OriginalPosition()
        assert position.source is None
        assert not position.is_mapped

    def test_mapped(self) -> None:
        """Test that a position with a source is mapped."""
        assert OriginalPosition(source="a.js", line=1, column=0).is_mapped


class TestResolvedFrame:
    """Test ResolvedFrame dataclass."""

    def test_from_position(self) -> None:
        """Test building a frame from a lookup result."""
        position = OriginalPosition(source="src/foo.js", line=3, column=1, name="foo")
        frame = ResolvedFrame.from_position(position, raw="foo@12:5")

        assert frame == ResolvedFrame("src/foo.js", 3, 1, "foo", raw="foo@12:5")
        assert frame.is_mapped

    def test_frozen(self) -> None:
        """Test that frames are immutable."""
        frame = ResolvedFrame("a.js", 1, 0, None)
        with pytest.raises(AttributeError):
            frame.source = "b.js"  # type: ignore[misc]


class TestEntries:
    """Test the entry variants."""

    def test_passthrough_is_not_a_frame(self) -> None:
        """Test that the two variants are distinct."""
        entry = PassthroughEntry(text="Error")
        assert not isinstance(entry, ResolvedFrame)

    def test_match_result_file_optional(self) -> None:
        """Test that the generated file defaults to None."""
        assert MatchResult(name="f", line=1, column=2).file is None
