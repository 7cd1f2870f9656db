# supertrunfo

A small Super Trunfo game for the terminal. You enter two city cards, then
compare them by their attributes. The prompts and results are in Portuguese.

Each card holds:

- state (only the first character typed is kept, for example a letter A–H)
- code (for example `A01`; at most 9 characters are kept)
- city name (at most 49 characters are kept)
- population (integer)
- area in km²
- GDP in billions
- number of tourist attractions (integer)

Two more values are worked out from these: population density (population ÷ area)
and GDP per capita (GDP × 10⁹ ÷ population). A zero divisor gives an infinite
value, or NaN when both sides are zero, rather than an error.

Numeric fields are read from the start of the line, so `12abc` counts as `12`.
A line with no number at its start, or input that ends before both cards are
complete, stops the game with a message on standard error and exit status 1.

## Installation

```
pip install .
```

## Playing

The game has three levels. Each one is its own command.

### Novice

```
supertrunfo-novato
```

You enter both cards. The one with the larger population wins; equal
populations are a draw.

### Adventurer

```
supertrunfo-aventureiro
```

You enter both cards, then pick one attribute (1–6) from a menu:

1. População
2. Área
3. PIB
4. Pontos Turísticos
5. Densidade Demográfica
6. PIB per capita

The larger value wins, except for population density, where the smaller value
wins. Any other choice, including one that is not a number, prints
`Opção inválida.`

### Master

```
supertrunfo-mestre
```

You pick two different attributes. The game adds up each card's values for
both attributes. Population density counts as negative in that sum. The card
with the higher sum wins. If you enter an invalid choice, or choose the same
attribute twice, the game asks again.

## Using it as a library

```python
from supertrunfo.card import Card, Attribute, score

rio = Card(state="A", code="A01", city="Rio", population=6_000_000,
           area=1200.0, gdp=300.0, tourist_spots=50)
sp = Card(state="B", code="B01", city="São Paulo", population=12_000_000,
          area=1500.0, gdp=700.0, tourist_spots=40)

score(rio, sp, Attribute.POPULATION)          # -1: the second card wins
Attribute.DENSITY.value_of(rio)               # 5000.0
```

`score` returns 1 when the first card wins, -1 when the second wins and 0 for
a draw. Each `Attribute` member carries its menu number, a `label` and a
`lower_wins` flag, which is set only for `Attribute.DENSITY`.

Other pieces you can call:

- `supertrunfo.card.read_card(stream, out, number)` prompts on `out` and reads
  one card from `stream`.
- `supertrunfo.novice.compare_by_population(card1, card2)` returns the novice
  report as a string.
- `supertrunfo.adventurer.menu_text()` and
  `supertrunfo.adventurer.compare(card1, card2, option)` return the menu and
  the one-attribute report.
- `supertrunfo.master.choose_attribute(prompt, used, stream, out)` asks until
  an attribute other than `used` is picked, and
  `supertrunfo.master.compare_attributes(card1, card2, first, second)` returns
  the two-attribute report.

## What it does not do

Each game compares exactly two cards entered at the keyboard, once. There is
no deck, no saving or loading of cards, and no play over several rounds.

## Running the tests

```
pip install .[test]
pytest
```