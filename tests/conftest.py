#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import json
import pathlib
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsize.duration import LanguageRegistry

PIRATE_LANGUAGE = {
    "language_code": "xp",
    "language_name": "Pirate",
    "time": {
        "format": "{value} {unit}",
        "separator": " an' ",
        "less_than_second": "a blink o' an eye",
        "second": "tick",
        "seconds": "ticks",
        "minute": "glass",
        "minutes": "glasses",
        "hour": "bell",
        "hours": "bells",
        "day": "watch",
        "days": "watches",
    },
}


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def registry() -> LanguageRegistry:
    """Fresh registry with the bundled languages."""
    return LanguageRegistry.with_defaults()


@pytest.fixture
def empty_registry() -> LanguageRegistry:
    return LanguageRegistry()


@pytest.fixture
def pirate_language() -> dict:
    return json.loads(json.dumps(PIRATE_LANGUAGE))


@pytest.fixture
def language_file(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """Fixture to write a language table file (.py or .json) into a temporary directory."""

    def _write(name: str, table: dict | None = None, source: str | None = None) -> pathlib.Path:
        path = tmp_path / name
        if source is not None:
            path.write_text(source, encoding="utf-8")
        elif path.suffix == ".json":
            path.write_text(json.dumps(table, ensure_ascii=False), encoding="utf-8")
        else:
            path.write_text(f"LANGUAGE = {table!r}\n", encoding="utf-8")
        return path

    return _write
