"""Master level: two cards compared on the sum of two distinct attributes."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from supertrunfo.card import (
    Attribute,
    Card,
    _read_token_line,
    _result_line,
    _scan_int,
    read_card,
)


def choose_attribute(
    prompt: str, used: Attribute | None, stream: TextIO, out: TextIO
) -> Attribute:
    """Ask until an attribute other than ``used`` is chosen."""
    while True:
        out.write(f"\n{prompt}\n")
        for attribute in Attribute:
            if attribute != used:
                out.write(f"{attribute.value}. {attribute.label}\n")
        out.write("Escolha: ")
        out.flush()
        line = _read_token_line(stream)
        if line is None:
            raise EOFError("input ended before an attribute was chosen")
        number = _scan_int(line)
        if number is not None and number != used and 1 <= number <= len(Attribute):
            return Attribute(number)
        out.write("Opção inválida. Tente novamente.\n")


def _signed(card: Card, attribute: Attribute) -> float:
    value = attribute.value_of(card)
    return -value if attribute.lower_wins else value


def compare_attributes(card1: Card, card2: Card, first: Attribute, second: Attribute) -> str:
    """Report comparing two cards on the sum of two attributes."""
    chosen = (Attribute(first), Attribute(second))
    total1 = sum(_signed(card1, attribute) for attribute in chosen)
    total2 = sum(_signed(card2, attribute) for attribute in chosen)

    parts = [
        "\nComparando cartas:\n",
        f"Carta 1: {card1.city} ({card1.state})\n",
        f"Carta 2: {card2.city} ({card2.state})\n\n",
    ]
    parts.extend(
        f"{attribute.label}:\n"
        f" -> {card1.city}: {attribute.value_of(card1):.2f}\n"
        f" -> {card2.city}: {attribute.value_of(card2):.2f}\n"
        for attribute in chosen
    )
    parts.append("\nSoma dos atributos:\n")
    parts.append(f"{card1.city}: {total1:.2f}\n")
    parts.append(f"{card2.city}: {total2:.2f}\n")
    outcome = (total1 > total2) - (total2 > total1)
    parts.append(f"\n{_result_line(card1, card2, outcome)}\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read two cards and two attribute choices from standard input and compare."""
    stream, out = sys.stdin, sys.stdout
    try:
        card1 = read_card(stream, out, 1)
        out.write("\n")
        card2 = read_card(stream, out, 2)
        out.write("\n=== Comparação de Cartas com Dois Atributos ===\n")
        first = choose_attribute(
            "Escolha o primeiro atributo para comparação:", None, stream, out
        )
        second = choose_attribute(
            "Escolha o segundo atributo (diferente do primeiro):", first, stream, out
        )
    except (EOFError, ValueError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    out.write(compare_attributes(card1, card2, first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())