"""Locale-aware conversion of raw setting text to Python types.

Numbers and dates are parsed with babel under an explicit locale, so the
same text can mean different things (``"1,05"`` is 1.05 under ``de`` and
is rejected under ``en_US``). Booleans use the canonical ``true``/``false``
forms; stores with their own boolean semantics are consulted by the key
resolver before this module is reached.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Tuple, Union

from babel import Locale
from babel.dates import get_date_format
from babel.numbers import NumberFormatError, parse_decimal

from .exceptions import ConversionError
from .locale import LocaleLike, current_locale, parse_locale

_TIME_RE = re.compile(
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"(?:\s*(?P<period>[AaPp])\.?[Mm]\.?)?\s*$"
)
_DIGITS_RE = re.compile(r"\d+")

# Two-digit years up to this value mean 20xx, later ones 19xx.
TWO_DIGIT_YEAR_PIVOT = 29

NUMBER_TYPES = (int, float, Decimal)
NumberLike = Union[int, float, Decimal]


def type_name(target: Any) -> str:
    """Human-readable name of a conversion target."""
    return getattr(target, "__name__", None) or repr(target)


def parse_bool(raw: str) -> Optional[bool]:
    """Parse canonical boolean text, returning ``None`` when not boolean."""
    low = raw.strip().lower()
    if low in {"true", "false"}:
        return low == "true"
    return None


class TypeConverter:
    """Convert raw setting text to a target type under a fixed locale.

    The converter is pure: it never reads ambient state, the locale is
    supplied by whoever builds it.
    """

    def __init__(self, locale: LocaleLike) -> None:
        self._locale = parse_locale(locale)
        self._converters: Dict[Any, Callable[[str], Any]] = {
            str: lambda raw: raw,
            int: self._to_int,
            float: self._to_float,
            Decimal: self._to_decimal,
            bool: self._to_bool,
            datetime: self._to_datetime,
            date: self._to_date,
            time: self._to_time,
        }

    @property
    def locale(self) -> Locale:
        return self._locale

    def convert(self, raw: str, target: Any) -> Any:
        """Convert ``raw`` to ``target``.

        Raises:
            ConversionError: If ``raw`` cannot be parsed as ``target``.
        """
        converter = self._converters.get(target)
        try:
            if converter is not None:
                return converter(raw)
            if not callable(target):
                raise TypeError(f"{target!r} is not a conversion target")
            return target(raw)
        except ConversionError:
            raise
        except (ValueError, TypeError, ArithmeticError, IndexError) as exc:
            raise self._error(raw, target, str(exc) or None) from exc

    def from_number(self, value: NumberLike, target: Any) -> Any:
        """Convert a number the store already holds; the locale does not apply.

        Raises:
            ConversionError: If ``value`` does not fit ``target`` (a fractional
                value requested as ``int``).
        """
        try:
            if target is int:
                if value != int(value):
                    raise ValueError("not an integer")
                return int(value)
            if target is Decimal:
                return Decimal(str(value))
            return float(value)
        except (ValueError, ArithmeticError) as exc:
            raise self._error(str(value), target, str(exc) or None) from exc

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _to_int(self, raw: str) -> int:
        value = self._to_decimal(raw)
        if value != value.to_integral_value():
            raise ValueError("not an integer")
        return int(value)

    def _to_decimal(self, raw: str) -> Decimal:
        try:
            return parse_decimal(raw.strip(), locale=self._locale, strict=True)
        except NumberFormatError as exc:
            raise ValueError(str(exc)) from exc

    def _to_float(self, raw: str) -> float:
        return float(self._to_decimal(raw))

    def _to_bool(self, raw: str) -> bool:
        result = parse_bool(raw)
        if result is None:
            raise ValueError("expected 'true' or 'false'")
        return result

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def _to_datetime(self, raw: str) -> datetime:
        text = raw.strip()
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        match = _TIME_RE.search(text)
        date_text = text[: match.start()] if match else text
        day = self._parse_date_text(date_text.strip().rstrip(",").strip())
        clock = self._time_from_match(match) if match else time()
        return datetime.combine(day, clock)

    def _to_date(self, raw: str) -> date:
        text = raw.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        return self._parse_date_text(text)

    def _to_time(self, raw: str) -> time:
        text = raw.strip()
        try:
            return time.fromisoformat(text)
        except ValueError:
            pass
        match = _TIME_RE.fullmatch(text)
        if match is None:
            raise ValueError("expected H:MM[:SS] [AM|PM]")
        return self._time_from_match(match)

    def _date_order(self) -> Tuple[str, str, str]:
        pattern = get_date_format("short", locale=self._locale).pattern.lower()
        positions = {
            "y": pattern.find("y"),
            "m": pattern.find("m") if "m" in pattern else pattern.find("l"),
            "d": pattern.find("d"),
        }
        return tuple(sorted(positions, key=positions.__getitem__))  # type: ignore[return-value]

    def _parse_date_text(self, text: str) -> date:
        # Day, month and year are read in the order of the locale's short date pattern.
        numbers = _DIGITS_RE.findall(text)
        if len(numbers) != 3:
            raise ValueError("expected day, month and year")
        parts = dict(zip(self._date_order(), numbers))
        year = int(parts["y"])
        if len(parts["y"]) <= 2:
            year += 2000 if year <= TWO_DIGIT_YEAR_PIVOT else 1900
        return date(year, int(parts["m"]), int(parts["d"]))

    @staticmethod
    def _time_from_match(match: "re.Match[str]") -> time:
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        period = (match.group("period") or "").lower()
        if period:
            if not 1 <= hour <= 12:
                raise ValueError("12-hour clock value out of range")
            hour = hour % 12 + (12 if period == "p" else 0)
        return time(hour, minute, second)

    def _error(self, raw: str, target: Any, details: Optional[str]) -> ConversionError:
        return ConversionError(raw, type_name(target), str(self._locale), details=details)


def convert(raw: str, target: Any, locale: Optional[LocaleLike] = None) -> Any:
    """Convert ``raw`` to ``target``; ``locale`` defaults to the process locale."""
    return TypeConverter(locale if locale is not None else current_locale()).convert(raw, target)


__all__ = ["NUMBER_TYPES", "TypeConverter", "convert", "parse_bool", "type_name"]
