"""Novice level: two cards compared on population only."""

from __future__ import annotations

import sys
from typing import Sequence

from supertrunfo.card import Attribute, Card, _result_line, read_card, score


def compare_by_population(card1: Card, card2: Card) -> str:
    """Report comparing two cards by population."""
    outcome = score(card1, card2, Attribute.POPULATION)
    return (
        "\nComparação de cartas (Atributo: População):\n\n"
        f"Carta 1 - {card1.city} ({card1.state}): {card1.population}\n"
        f"Carta 2 - {card2.city} ({card2.state}): {card2.population}\n"
        f"\n{_result_line(card1, card2, outcome)}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read two cards from standard input and compare them by population."""
    stream, out = sys.stdin, sys.stdout
    try:
        card1 = read_card(stream, out, 1)
        out.write("\n")
        card2 = read_card(stream, out, 2)
    except (EOFError, ValueError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    out.write(compare_by_population(card1, card2))
    return 0


if __name__ == "__main__":
    sys.exit(main())