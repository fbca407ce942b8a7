# supertrunfo

A small terminal version of Super Trunfo played with two city cards.
You register two cards. Each card has a state, a city, a population, an
area, a GDP and a number of tourist attractions. The game works out
population density and GDP per capita. Then it compares the two cards.

## Installation

```
pip install .
```

## Playing

```
supertrunfo
supertrunfo --level novice
supertrunfo --level novice-split
supertrunfo --level adventurer
supertrunfo --level master
```

The game asks in Portuguese for each field of both cards. When it asks
for a decimal, use a dot (`.`) as the separator. A round is played once,
and then the program ends.

The levels are:

- **`novice`**: shows each card with its code and then compares
  population and area. In both, the larger value wins.
- **`novice-split`**: the same round, but each comparison is printed in a
  separate block.
- **`adventurer`**: shows a menu where you pick one attribute to compare.
  If you enter an invalid option, the game says so and no comparison is
  made.
- **`master`** (the default): you pick two different attributes. Each one
  is compared on its own. Then their scores are added up and the larger
  sum wins. If you enter an invalid option or repeat an attribute, the
  game prints an error and exits with status 1.

Population density is the one attribute where the smaller value wins. In
the master sum it counts as a negative score.

The game works in single precision. Area, GDP and the derived values are
rounded the same way for display and for comparison.

If an answer is not a valid number, or the input ends early, the command
stops with status 1.

## Using it as a library

```python
from supertrunfo.cards import Card, attribute_from_option, compare, compare_sum

first = Card(state="Sao Paulo", city="Campinas", population=1_200_000,
             area=795.0, gdp=65_000.0, tourist_spots=30)
second = Card(state="Minas Gerais", city="Uberlandia", population=700_000,
              area=4_115.0, gdp=40_000.0, tourist_spots=12)

population = attribute_from_option(1)
print(compare(population, first, second))          # Outcome.FIRST

density = attribute_from_option(4, excluded=[population])
print(compare_sum([population, density], first, second))
```

`supertrunfo.cards` contains the following:

- `Card`, with `density()`, `gdp_per_capita()` and `code(number)`.
- The `Attribute` enum, numbered 1 to 6 as in the menus. It has
  `value_of`, `score` and `formatted`.
- The `Outcome` enum: `FIRST`, `SECOND` or `TIE`.
- `compare`, `compare_sum` and `combined_score`.
- `attribute_from_option`. It raises `InvalidChoiceError` (a
  `ValueError`) for an unknown or excluded option.

`supertrunfo.render` builds the text that the game shows:

- Card sheets: `novice_card`, `adventurer_card` and `master_card`.
- Comparisons: `novice_comparison`, `split_novice_comparison`,
  `adventurer_comparison` and `master_comparison`.
- `novice_result`, `attribute_menu` and `sum_report`.

`supertrunfo.game` contains the interactive rounds: `play_novice`,
`play_novice_split`, `play_adventurer` and `play_master`. It also has
`read_card` and `main`. Each round takes two functions:

- `ask(prompt)`, which returns one answer.
- `write(text)`, which prints text.

This lets you drive a round from a script or a test.

## What it does not do

The game has no card store. Cards are typed in for every round and are
not saved. A round is always between exactly two cards, and nothing keeps
track of scores across rounds.

## Tests

```
pip install .[test]
pytest
```