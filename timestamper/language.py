"""Locale resources for relative-time rendering.

Each language is a declarative record: fixed phrases, a word-order flag and
a singular/plural label per unit. Bundled tables live as JSON under
``timestamper/locales`` and are loaded on first use.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

from timestamper.util import UNITS, Unit

logger = logging.getLogger(__name__)

SentenceOrder: TypeAlias = Literal["prefix", "suffix"]

_ORDERS: tuple[SentenceOrder, ...] = ("prefix", "suffix")
_locales_path = files(__package__) / "locales"

# Locales added at runtime through register_locale()
_registered: dict[str, "LocaleResource"] = {}


class UnknownLocaleError(KeyError):
    """Raised when no locale resource exists for a language code."""


@dataclass(frozen=True)
class UnitLabel:
    singular: str
    plural: str

    def for_magnitude(self, magnitude: int) -> str:
        """Singular for exactly 1, plural otherwise (0 included)."""
        return self.singular if magnitude == 1 else self.plural


@dataclass(frozen=True, kw_only=True)
class LocaleResource:
    """Read-only word table for one language.

    Attributes:
        code: Language code, e.g. "es"
        now: Phrase used when the delta rounds to nothing
        ago_time: Direction word for past timestamps
        in_time: Direction word for future timestamps
        sentence_order: "prefix" puts the direction word before the
            quantity ("hace 2 horas"), "suffix" after it ("2 hours ago")
        units: Label pair for every unit name
    """

    code: str
    now: str
    ago_time: str
    in_time: str
    sentence_order: SentenceOrder
    units: Mapping[Unit, UnitLabel] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.sentence_order not in _ORDERS:
            raise ValueError(
                f"Locale '{self.code}' has invalid sentence_order "
                f"{self.sentence_order!r}; expected one of {_ORDERS}"
            )
        missing = [unit for unit in UNITS if unit not in self.units]
        if missing:
            raise ValueError(
                f"Locale '{self.code}' is missing labels for: {', '.join(missing)}"
            )
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))

    def label(self, unit: Unit, magnitude: int) -> str:
        return self.units[unit].for_magnitude(magnitude)

    @classmethod
    def from_dict(cls, code: str, data: Mapping[str, Any]) -> "LocaleResource":
        """Build a resource from the JSON table layout.

        Example:
            >>> LocaleResource.from_dict("en", {
            ...     "now": "now", "ago_time": "ago", "in_time": "in",
            ...     "sentence_order": "suffix",
            ...     "units": {"seconds": {"singular": "second", "plural": "seconds"}, ...},
            ... })
        """
        try:
            units = {
                unit: UnitLabel(**labels) for unit, labels in data["units"].items()
            }
            return cls(
                code=code,
                now=data["now"],
                ago_time=data["ago_time"],
                in_time=data["in_time"],
                sentence_order=data["sentence_order"],
                units=units,
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed locale table for '{code}': {exc}") from exc


def _bundled_codes() -> list[str]:
    return sorted(
        entry.name.removesuffix(".json")
        for entry in _locales_path.iterdir()
        if entry.name.endswith(".json")
    )


@lru_cache(maxsize=None)
def _load_bundled(code: str) -> LocaleResource:
    if code not in _bundled_codes():
        raise UnknownLocaleError(
            f"No locale resource for language '{code}'. "
            f"Available: {', '.join(available_locales())}"
        )
    logger.debug("Loading bundled locale %s", code)
    table = json.loads((_locales_path / f"{code}.json").read_text("utf-8"))
    return LocaleResource.from_dict(code, table)


def available_locales() -> list[str]:
    """Return every language code that get_locale() can resolve."""
    return sorted(set(_bundled_codes()) | set(_registered))


def get_locale(code: str) -> LocaleResource:
    """
    Look up the locale resource for a language code.

    Runtime registrations take precedence over bundled tables.

    Raises:
        UnknownLocaleError: If no resource exists for the code
    """
    if code in _registered:
        return _registered[code]
    return _load_bundled(code)


def register_locale(resource: LocaleResource) -> None:
    """
    Make a locale available to every formatter under ``resource.code``.

    Registering an existing code replaces it for instances created
    afterwards; existing formatters keep the resource they resolved.

    Example:
        >>> register_locale(LocaleResource.from_dict("pt", table))
        >>> Timestamper(ts, lang="pt").to_sentence()
        'há 2 horas'
    """
    if not isinstance(resource, LocaleResource):
        raise TypeError(
            f"register_locale() expects a LocaleResource, "
            f"got {type(resource).__name__!r}"
        )
    logger.debug("Registering locale %s", resource.code)
    _registered[resource.code] = resource


def unregister_locale(code: str) -> None:
    """Drop a runtime registration; bundled tables are unaffected."""
    _registered.pop(code, None)
