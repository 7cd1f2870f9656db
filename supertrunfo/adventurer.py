"""Adventurer level: two cards compared on one attribute picked from a menu."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from supertrunfo.card import (
    Attribute,
    Card,
    _read_token_line,
    _result_line,
    _scan_int,
    read_card,
    score,
)

_FORMATS: dict[Attribute, Callable[[Card], str]] = {
    Attribute.POPULATION: lambda card: str(card.population),
    Attribute.AREA: lambda card: f"{card.area:.2f}",
    Attribute.GDP: lambda card: f"{card.gdp:.2f} bilhões",
    Attribute.TOURIST_SPOTS: lambda card: str(card.tourist_spots),
    Attribute.DENSITY: lambda card: f"{card.population_density():.2f}",
    Attribute.GDP_PER_CAPITA: lambda card: f"{card.gdp_per_capita():.2f}",
}


def menu_text() -> str:
    """The comparison menu, ending with its prompt."""
    options = "".join(f"{attribute.value}. {attribute.label}\n" for attribute in Attribute)
    return (
        "\n=== MENU DE COMPARAÇÃO ===\n"
        f"{options}"
        "Escolha o atributo para comparar (1-6): "
    )


def compare(card1: Card, card2: Card, option: int) -> str:
    """Report comparing two cards on the attribute numbered ``option``."""
    header = (
        "\nComparação de cartas:\n"
        f"Carta 1 - {card1.city} ({card1.state})\n"
        f"Carta 2 - {card2.city} ({card2.state})\n\n"
    )
    try:
        attribute = Attribute(option)
    except ValueError:
        return header + "Opção inválida.\n"
    show = _FORMATS[attribute]
    outcome = score(card1, card2, attribute)
    return (
        header
        + f"{attribute.label}: {show(card1)} vs {show(card2)}\n"
        + f"{_result_line(card1, card2, outcome)}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read two cards and a menu choice from standard input and compare them."""
    stream, out = sys.stdin, sys.stdout
    try:
        card1 = read_card(stream, out, 1)
        out.write("\n")
        card2 = read_card(stream, out, 2)
    except (EOFError, ValueError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    out.write(menu_text())
    out.flush()
    line = _read_token_line(stream)
    option = _scan_int(line) if line is not None else None
    out.write(compare(card1, card2, option if option is not None else 0))
    return 0


if __name__ == "__main__":
    sys.exit(main())