"""Source map position resolver.

Wraps a parsed source map and answers "where did this generated position
come from" queries. The map is decoded once at construction and then
queried read-only for every frame of the trace.

Coordinates follow the convention the tool has always used: lines are
1-based on both sides, columns are 0-based source map columns and are
passed through from the trace text unchanged.
"""

from __future__ import annotations

import json
from bisect import bisect_right
from pathlib import Path
from typing import Any, Protocol

import sourcemap
import structlog
from sourcemap.exceptions import SourceMapDecodeError

from crashlyfix.models.stack import OriginalPosition
from crashlyfix.utils.errors import MapLoadError

log = structlog.get_logger()


class SourceMapLookup(Protocol):
    """Anything that can look up a 0-based generated position.

    ``lookup`` returns a token with ``src``, ``src_line``, ``src_col`` and
    ``name`` attributes, or raises ``IndexError`` when nothing is mapped
    at or before the column on that line.
    """

    def lookup(self, line: int, column: int) -> Any: ...


class SectionedSourceMap:
    """Lookup over an index map, whose "sections" each embed a regular map.

    Section offsets are 0-based generated positions. A position belongs to
    the last section starting at or before it; the column offset only
    applies on the section's first line.
    """

    def __init__(self, sections: list[tuple[tuple[int, int], SourceMapLookup]]) -> None:
        self._offsets = [offset for offset, _ in sections]
        self._indices = [index for _, index in sections]

    @classmethod
    def from_sections(cls, sections: list[dict[str, Any]]) -> SectionedSourceMap:
        """Decode every embedded map of an index map.

        Raises:
            KeyError: If a section has no offset or no embedded map
        """
        decoded = []
        for section in sections:
            offset = section["offset"]
            decoded.append(
                (
                    (int(offset["line"]), int(offset["column"])),
                    sourcemap.loads(json.dumps(section["map"])),
                )
            )
        decoded.sort(key=lambda item: item[0])
        return cls(decoded)

    def lookup(self, line: int, column: int) -> Any:
        i = bisect_right(self._offsets, (line, column))
        if not i:
            raise IndexError((line, column))
        offset_line, offset_column = self._offsets[i - 1]
        if line == offset_line:
            column -= offset_column
        return self._indices[i - 1].lookup(line - offset_line, column)


def _index_map_sections(content: str) -> list[dict[str, Any]] | None:
    """Return the "sections" of an index map, or None for a regular map."""
    try:
        raw = json.loads(content)
    except ValueError:
        return None
    if isinstance(raw, dict) and "sections" in raw:
        return raw["sections"]
    return None


class PositionResolver:
    """Maps generated (line, column) positions to original positions.

    Example:
        resolver = PositionResolver.from_file(Path("bundle.js.map"))
        position = resolver.resolve(None, 12, 5)
        if position.is_mapped:
            print(position.source, position.line)
    """

    def __init__(self, index: SourceMapLookup) -> None:
        """Initialize the resolver with an already decoded source map."""
        self._index = index

    @classmethod
    def from_string(cls, content: str, path: Path | str | None = None) -> PositionResolver:
        """Decode a source map from its JSON text.

        Args:
            content: Source map JSON
            path: Where the content came from, for error reporting

        Returns:
            PositionResolver over the decoded map

        Raises:
            MapLoadError: If the content is not a valid source map
        """
        try:
            sections = _index_map_sections(content)
            index: SourceMapLookup
            if sections is not None:
                index = SectionedSourceMap.from_sections(sections)
            else:
                index = sourcemap.loads(content)
        except SourceMapDecodeError as e:
            raise MapLoadError(f"Invalid source map mappings: {e}", path=path) from e
        except (ValueError, KeyError, TypeError, IndexError, AttributeError) as e:
            raise MapLoadError(f"Malformed source map: {e!r}", path=path) from e

        log.debug("source_map_loaded", path=str(path) if path else None)
        return cls(index)

    @classmethod
    def from_file(cls, path: Path | str) -> PositionResolver:
        """Read and decode a source map file.

        Raises:
            MapLoadError: If the file cannot be read or is not a valid map
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MapLoadError(f"Could not read source map {path}: {e}", path=path) from e
        return cls.from_string(content, path=path)

    def resolve(self, name: str | None, line: int, column: int) -> OriginalPosition:
        """Find the original position for a generated one.

        Args:
            name: Symbol name seen in the trace (the map's name wins)
            line: 1-based generated line
            column: 0-based generated column

        Returns:
            OriginalPosition, with all fields None if the position is unmapped
        """
        if line < 1 or column < 0:
            return OriginalPosition()

        try:
            token = self._index.lookup(line - 1, column)
        except IndexError:
            log.debug("position_unmapped", line=line, column=column, name=name)
            return OriginalPosition()

        if token.src is None:
            return OriginalPosition()

        return OriginalPosition(
            source=token.src,
            line=token.src_line + 1,
            column=token.src_col,
            name=token.name or None,
        )
