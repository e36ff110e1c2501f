"""Daily temperature readings: parsing 'day city temperature' records and a report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

CITY_LEN = 31


@dataclass(frozen=True)
class Reading:
    day: int
    city: str
    temperature: float


def _record(day: str, city: str, temperature: str) -> Reading:
    try:
        day_value = int(day)
    except ValueError:
        raise ValueError(f"invalid day {day!r}") from None
    if len(city) > CITY_LEN:
        raise ValueError(f"city name longer than {CITY_LEN} characters: {city!r}")
    try:
        temperature_value = float(temperature)
    except ValueError:
        raise ValueError(f"invalid temperature {temperature!r}") from None
    return Reading(day_value, city, temperature_value)


def parse_readings(lines: Iterable[str]) -> list[Reading]:
    """Parse whitespace-separated 'day city temperature' records.

    Records may span or share lines; a malformed or incomplete record raises ValueError.
    """
    tokens = [token for line in lines for token in line.split()]
    if len(tokens) % 3:
        raise ValueError("incomplete reading at end of input")
    groups = zip(*[iter(tokens)] * 3)
    return [_record(*group) for group in groups]


def format_report(readings: Sequence[Reading]) -> str:
    """Render one line per reading followed by the mean temperature; empty input gives ''."""
    if not readings:
        return ""
    lines = [
        f"Dia {r.day:02d} - {r.city:<10} - {r.temperature:.1f}°C\n" for r in readings
    ]
    average = sum(r.temperature for r in readings) / len(readings)
    lines.append(f"\nTemperatura média: {average:.1f}°C\n")
    return "".join(lines)