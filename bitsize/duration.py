"""
Bitsize Durations

Human-readable durations in pluggable languages. A duration is decomposed into
days, hours, minutes and seconds and at most the two largest non-empty units are
shown: "2 minutes, 10 seconds", "1 day, 6 hours".

Language tables live in a LanguageRegistry that is created and passed around
explicitly; LanguageRegistry.with_defaults() returns one preloaded with the
bundled tables. Calls without a registry share bundled_registry(), which is
loaded once per process.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import importlib
import importlib.util
import json
import logging
import os
import pkgutil
import re
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import Any, Iterator, Mapping, Protocol, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidArgumentError, MissingFormKeyError, UnknownLanguageError
from .formatters import fmt_type, fmt_value
from .numeric import finite_numeric
from .units import BitsizeConf

logger = logging.getLogger(__name__)

# Keys of a raw "time" table that are not unit forms
_TIME_SETTINGS = ("format", "separator", "less_than_second", "plural_function")


# Classes --------------------------------------------------------------------------------------------------------------

class PluralRule(Protocol):
    """Maps a count and a base unit name ("second", "minute", ...) to a form key of the language table."""

    def __call__(self, count: int, unit: str) -> str: ...


def default_plural_rule(count: int, unit: str) -> str:
    """English-like rule: "second" for exactly 1, "seconds" otherwise."""
    return unit if count == 1 else f"{unit}s"


@dataclass(frozen=True)
class LanguageTable:
    """
    Strings and rules used to render durations in one language.

    Attributes:
        code: Language code, e.g. "en" or "pt_BR".
        forms: Unit form key -> display string, e.g. {"second": "second", "seconds": "seconds"}.
        less_than_second: Phrase returned verbatim for durations under one second.
        format: Template with {value} and {unit} placeholders.
        separator: Joins the two rendered units.
        name: Display name of the language.
        plural_rule: Picks the form key for a count, default_plural_rule if None.
    """

    code: str
    forms: Mapping[str, str]
    less_than_second: str
    format: str = BitsizeConf.TIME_FORMAT
    separator: str = BitsizeConf.TIME_SEPARATOR
    name: str | None = None
    plural_rule: PluralRule | None = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "forms", frozendict(self.forms))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], code: str | None = None) -> Self:
        """
        Build a table from the plain data shape used by language files:

            {
                "language_code": "en",
                "language_name": "English",
                "time": {
                    "format": "{value} {unit}",
                    "separator": ", ",
                    "less_than_second": "less than a second",
                    "second": "second", "seconds": "seconds",
                    ...
                    "plural_function": <optional callable>,
                },
            }

        Raises:
            InvalidArgumentError: If the code, the "time" section or "less_than_second" is missing,
                or plural_function is not callable.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"Language table must be a mapping, got {fmt_type(data)}")

        code = code or data.get("language_code")
        if not code:
            raise InvalidArgumentError("Language code is missing, pass it explicitly or set 'language_code'")

        time = data.get("time")
        if not isinstance(time, Mapping):
            raise InvalidArgumentError(f"Language '{code}' has no 'time' section")
        if "less_than_second" not in time:
            raise InvalidArgumentError(f"Language '{code}' has no 'less_than_second' phrase")

        plural_rule = time.get("plural_function")
        if plural_rule is not None and not callable(plural_rule):
            raise InvalidArgumentError(
                f"Language '{code}' plural_function must be callable, got {fmt_type(plural_rule)}"
            )

        return cls(
            code=code,
            forms={k: v for k, v in time.items() if k not in _TIME_SETTINGS},
            less_than_second=time["less_than_second"],
            format=time.get("format", BitsizeConf.TIME_FORMAT),
            separator=time.get("separator", BitsizeConf.TIME_SEPARATOR),
            name=data.get("language_name"),
            plural_rule=plural_rule,
        )

    def form(self, key: str) -> str:
        try:
            return self.forms[key]
        except KeyError:
            raise MissingFormKeyError(key, self.code) from None

    def render_unit(self, count: int, unit: str) -> str:
        """
        Render a count of a base unit, e.g. render_unit(2, "minute") -> "2 minutes".

        Raises:
            MissingFormKeyError: If the form key picked by the plural rule is not in the table.
        """
        rule = self.plural_rule or default_plural_rule
        form = self.form(rule(count, unit))
        return self.format.replace("{value}", str(count)).replace("{unit}", form)


class LanguageRegistry:
    """
    Loaded language tables keyed by language code, with one default language.

    The first language added or loaded becomes the default. Registration is meant to
    happen once at startup; concurrent readers are safe, concurrent registration is not.
    """

    def __init__(self):
        self._tables: dict[str, LanguageTable] = {}
        self._default: str | None = None

    @classmethod
    def with_defaults(cls) -> Self:
        """Registry with all bundled language tables loaded, English as default."""
        registry = cls()
        registry.load_defaults()
        return registry

    def __contains__(self, code: object) -> bool:
        return code in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"LanguageRegistry(languages={list(self._tables)!r}, default={self._default!r})"

    # ----- Registration -----

    def add_language(self, code: str, table: LanguageTable | Mapping[str, Any]) -> LanguageTable:
        """Insert or replace the table of a language."""
        if not isinstance(table, LanguageTable):
            table = LanguageTable.from_mapping(table, code)
        elif table.code != code:
            table = replace(table, code=code)

        replaced = code in self._tables
        self._tables[code] = table
        if self._default is None:
            self._default = code
        logger.debug("%s language '%s'", "Replaced" if replaced else "Added", code)
        return table

    def load_language(self, source: Any, code: str | None = None) -> str:
        """
        Load a language table and return its code.

        Args:
            source: A LanguageTable, a mapping, a module exposing LANGUAGE, a callable returning
                one of those, or the path of a .py file (exposing LANGUAGE) or .json file.
            code: Language code. Defaults to the table's language_code, then to the file name
                when it looks like a language code ("de.py", "pt_BR.json").

        Raises:
            InvalidArgumentError: If the source cannot be read or the code cannot be determined.
        """
        path = None
        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            source = _read_language_file(path)

        if isinstance(source, ModuleType):
            source = _module_table(source)
        elif callable(source) and not isinstance(source, (Mapping, LanguageTable)):
            source = source()
            if isinstance(source, ModuleType):
                source = _module_table(source)

        if isinstance(source, LanguageTable):
            code = code or source.code
        elif isinstance(source, Mapping):
            code = code or source.get("language_code")
        else:
            raise InvalidArgumentError(f"Unsupported language source {fmt_value(source)}")

        if not code and path is not None and re.match(BitsizeConf.LANGUAGE_CODE_PATTERN, path.stem):
            code = path.stem
        if not code:
            raise InvalidArgumentError("Cannot determine language code, please specify it explicitly")

        self.add_language(code, source)
        return code

    def load_languages_from_directory(self, directory: str | os.PathLike, pattern: str = "*.py") -> list[str]:
        """
        Load every matching language file of a directory, in file name order.

        Files that cannot be loaded are skipped with a warning.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidArgumentError(f"Language directory does not exist: {directory}")

        loaded = []
        for path in sorted(directory.glob(pattern)):
            try:
                loaded.append(self.load_language(path))
            except InvalidArgumentError as e:
                logger.warning("Skipped language file %s: %s", path, e)
        return loaded

    def load_defaults(self) -> list[str]:
        """Load the language tables bundled with bitsize, English first."""
        from . import languages

        names = sorted(info.name for info in pkgutil.iter_modules(languages.__path__))
        names.sort(key=lambda name: name != BitsizeConf.FALLBACK_LANGUAGE)

        loaded = []
        for name in names:
            module = importlib.import_module(f"{languages.__name__}.{name}")
            loaded.append(self.load_language(module))
        return loaded

    def set_default_language(self, code: str):
        """
        Raises:
            UnknownLanguageError: If the language is not loaded.
        """
        if code not in self._tables:
            raise UnknownLanguageError(f"Language '{code}' is not loaded, use load_language() first")
        self._default = code
        logger.debug("Default language set to '%s'", code)

    # ----- Lookup -----

    @property
    def default_language(self) -> str | None:
        return self._default

    def get_default_language(self) -> str | None:
        return self._default

    def is_language_loaded(self, code: str) -> bool:
        return code in self._tables

    def get_loaded_languages(self) -> list[str]:
        return list(self._tables)

    def get_language(self, code: str | None = None) -> LanguageTable:
        """
        Resolve a language table: the given code, else the default language;
        an unknown code falls back to English when English is loaded.

        Raises:
            UnknownLanguageError: If neither the language nor the English fallback is loaded.
        """
        code = code or self._default
        if code in self._tables:
            return self._tables[code]
        if BitsizeConf.FALLBACK_LANGUAGE in self._tables:
            return self._tables[BitsizeConf.FALLBACK_LANGUAGE]
        raise UnknownLanguageError(f"Language '{code}' is not loaded, use load_language() first")


class DurationFormatter:
    """
    Formats durations in seconds with the tables of a LanguageRegistry.

    Examples:
        >>> formatter = DurationFormatter(LanguageRegistry.with_defaults())
        >>> formatter.format(130)
        '2 minutes, 10 seconds'
        >>> formatter.format(130, "ru")
        '2 минуты и 10 секунд'
    """

    def __init__(self, registry: LanguageRegistry | None = None):
        self.registry = registry if registry is not None else bundled_registry()

    def format(self, seconds: int | float, language: str | None = None) -> str:
        table = self.registry.get_language(language)
        seconds = finite_numeric(seconds)

        if seconds < 1:
            return table.less_than_second

        minutes, rem_seconds = divmod(int(seconds), 60)
        if minutes < 1:
            return table.render_unit(rem_seconds, "second")

        hours, rem_minutes = divmod(minutes, 60)
        if hours < 1:
            return self._join(table, (rem_minutes, "minute"), (rem_seconds, "second"))

        # Seconds are dropped from here on, at most two units are shown
        days, rem_hours = divmod(hours, 24)
        if days < 1:
            return self._join(table, (rem_hours, "hour"), (rem_minutes, "minute"))

        return self._join(table, (days, "day"), (rem_hours, "hour"))

    @staticmethod
    def _join(table: LanguageTable, major: tuple[int, str], minor: tuple[int, str]) -> str:
        result = table.render_unit(*major)
        if minor[0] > 0:
            result += table.separator + table.render_unit(*minor)
        return result


# Methods --------------------------------------------------------------------------------------------------------------

@lru_cache(maxsize=1)
def bundled_registry() -> LanguageRegistry:
    """
    Registry with the bundled languages, built on first use and shared afterwards.

    Every duration API without an explicit registry reads from it. Custom languages
    belong in a registry of your own, e.g. LanguageRegistry.with_defaults().
    """
    return LanguageRegistry.with_defaults()


def format_duration(seconds: int | float, language: str | None = None, registry: LanguageRegistry | None = None) -> str:
    """
    Format a duration in seconds, e.g. format_duration(3660) -> "1 hour, 1 minute".

    Without a registry, the shared bundled_registry() is used.
    """
    return DurationFormatter(registry).format(seconds, language)


# Private Methods ------------------------------------------------------------------------------------------------------

def _read_language_file(path: Path) -> Mapping[str, Any] | ModuleType:
    if not path.is_file():
        raise InvalidArgumentError(f"Translation file does not exist: {path}")

    if path.suffix == ".json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Translation file is not valid JSON: {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Translation file must contain an object: {path}")
        return data

    if path.suffix == ".py":
        spec = importlib.util.spec_from_file_location(f"bitsize_language_{path.stem}", path)
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise InvalidArgumentError(f"Translation file cannot be executed: {path}: {e}") from e
        return module

    raise InvalidArgumentError(f"Unsupported translation file type '{path.suffix}': {path}")


def _module_table(module: ModuleType) -> Mapping[str, Any]:
    table = getattr(module, "LANGUAGE", None)
    if not isinstance(table, Mapping):
        raise InvalidArgumentError(f"Module {module.__name__} must define a LANGUAGE mapping")
    return table
