"""Shared test fixtures for crashlyfix."""

from pathlib import Path

import pytest

from crashlyfix.core.resolver import PositionResolver

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
MAPS_DIR = FIXTURES_DIR / "maps"
TRACES_DIR = FIXTURES_DIR / "traces"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def app_map_path() -> Path:
    """Path to a map with foo at 12:5 and bar at 20:3."""
    return MAPS_DIR / "app.js.map"


@pytest.fixture
def bundle_map_path() -> Path:
    """Path to a map of a bundle with absolute project sources."""
    return MAPS_DIR / "bundle.js.map"


@pytest.fixture
def app_resolver(app_map_path: Path) -> PositionResolver:
    """Resolver over the small app map."""
    return PositionResolver.from_file(app_map_path)


@pytest.fixture
def bundle_resolver(bundle_map_path: Path) -> PositionResolver:
    """Resolver over the bundle map."""
    return PositionResolver.from_file(bundle_map_path)


@pytest.fixture
def simple_trace_path() -> Path:
    """Path to a report with a single short JavaScript block."""
    return TRACES_DIR / "simple.txt"


@pytest.fixture
def crash_report_path() -> Path:
    """Path to a multi-block crash report."""
    return TRACES_DIR / "crash_report.txt"


@pytest.fixture
def malformed_trace_path() -> Path:
    """Path to a report whose JavaScript block has a garbage line."""
    return TRACES_DIR / "malformed.txt"


@pytest.fixture
def native_only_trace_path() -> Path:
    """Path to a report with no JavaScript block."""
    return TRACES_DIR / "native_only.txt"
