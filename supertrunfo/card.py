"""Cards of the game, the attributes they are compared on, and card entry."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, TextIO

_CODE_LENGTH = 9
_CITY_LENGTH = 49

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero divisors give infinities or NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class Card:
    """A city card with its base figures."""

    state: str
    code: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    def population_density(self) -> float:
        """Inhabitants per square kilometre."""
        return _divide(self.population, self.area)

    def gdp_per_capita(self) -> float:
        """GDP (given in billions) divided by the population."""
        return _divide(self.gdp * 1e9, self.population)


class Attribute(IntEnum):
    """Attributes a card can be compared on, numbered as in the menus."""

    label: str
    lower_wins: bool

    def __new__(cls, number: int, label: str, lower_wins: bool = False) -> "Attribute":
        member = int.__new__(cls, number)
        member._value_ = number
        member.label = label
        member.lower_wins = lower_wins
        return member

    POPULATION = 1, "População"
    AREA = 2, "Área"
    GDP = 3, "PIB"
    TOURIST_SPOTS = 4, "Pontos Turísticos"
    DENSITY = 5, "Densidade Demográfica", True
    GDP_PER_CAPITA = 6, "PIB per capita"

    def value_of(self, card: Card) -> float:
        """The numeric value of this attribute on a card."""
        return _GETTERS[self](card)


_GETTERS: dict[Attribute, Callable[[Card], float]] = {
    Attribute.POPULATION: lambda card: float(card.population),
    Attribute.AREA: lambda card: card.area,
    Attribute.GDP: lambda card: card.gdp,
    Attribute.TOURIST_SPOTS: lambda card: float(card.tourist_spots),
    Attribute.DENSITY: lambda card: card.population_density(),
    Attribute.GDP_PER_CAPITA: lambda card: card.gdp_per_capita(),
}


def score(card1: Card, card2: Card, attribute: Attribute) -> int:
    """1 if the first card wins on the attribute, -1 if the second does, 0 on a tie."""
    attribute = Attribute(attribute)
    first, second = attribute.value_of(card1), attribute.value_of(card2)
    if attribute.lower_wins:
        first, second = second, first
    return (first > second) - (second > first)


def _result_line(card1: Card, card2: Card, outcome: int) -> str:
    if outcome > 0:
        return f"Resultado: Carta 1 ({card1.city}) venceu!"
    if outcome < 0:
        return f"Resultado: Carta 2 ({card2.city}) venceu!"
    return "Resultado: Empate!"


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _scan_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def _read_token_line(stream: TextIO) -> str | None:
    """Next line holding something other than whitespace, or None at end of input."""
    for line in iter(stream.readline, ""):
        if line.strip():
            return line
    return None


def _ask(stream: TextIO, out: TextIO, prompt: str) -> str:
    out.write(prompt)
    out.flush()
    line = stream.readline()
    if not line:
        raise EOFError(f"input ended while waiting for {prompt.strip()!r}")
    return line


def _ask_text(stream: TextIO, out: TextIO, prompt: str, limit: int) -> str:
    return _ask(stream, out, prompt).split("\n", 1)[0][:limit]


def _ask_int(stream: TextIO, out: TextIO, prompt: str) -> int:
    line = _ask(stream, out, prompt)
    value = _scan_int(line)
    if value is None:
        raise ValueError(f"not an integer: {line.strip()!r}")
    return value


def _ask_float(stream: TextIO, out: TextIO, prompt: str) -> float:
    line = _ask(stream, out, prompt)
    value = _scan_float(line)
    if value is None:
        raise ValueError(f"not a number: {line.strip()!r}")
    return value


def read_card(stream: TextIO, out: TextIO, number: int) -> Card:
    """Prompt on ``out`` and read the fields of card ``number`` from ``stream``."""
    out.write(f"=== Cadastro da Carta {number} ===\n")
    state = _ask(stream, out, "Estado (A-H): ")[:1]
    code = _ask_text(stream, out, "Codigo (ex: A01): ", _CODE_LENGTH)
    city = _ask_text(stream, out, "Cidade: ", _CITY_LENGTH)
    population = _ask_int(stream, out, "População: ")
    area = _ask_float(stream, out, "Área (km²): ")
    gdp = _ask_float(stream, out, "PIB (em bilhões): ")
    tourist_spots = _ask_int(stream, out, "Pontos Turísticos: ")
    return Card(state, code, city, population, area, gdp, tourist_spots)