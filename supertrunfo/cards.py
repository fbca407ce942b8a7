"""Cards of the city trump game and the rules for comparing them."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

_FLOAT32_MAX = 3.4028234663852886e38


def _f32(value: float) -> float:
    """Round a number to single precision, saturating to infinity on overflow."""
    value = float(value)
    if math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        return math.copysign(math.inf, value)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _divide(numerator: float, denominator: float) -> float:
    """Single-precision division that yields inf or nan instead of raising."""
    numerator = _f32(numerator)
    denominator = _f32(denominator)
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return _f32(numerator / denominator)


@dataclass(frozen=True)
class Card:
    """A city card with its registered and derived attributes."""

    state: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "population", int(self.population))
        object.__setattr__(self, "area", _f32(self.area))
        object.__setattr__(self, "gdp", _f32(self.gdp))
        object.__setattr__(self, "tourist_spots", int(self.tourist_spots))

    def density(self) -> float:
        """Inhabitants per square kilometre."""
        return _divide(_f32(self.population), self.area)

    def gdp_per_capita(self) -> float:
        """GDP divided by population."""
        return _divide(self.gdp, _f32(self.population))

    def code(self, number: int) -> str:
        """Card code: first letter of the state followed by the card number."""
        return f"{self.state[:1]}{number}"


class Outcome(Enum):
    """Result of comparing two cards."""

    FIRST = 1
    SECOND = 2
    TIE = 0


class InvalidChoiceError(ValueError):
    """Raised when a menu option does not name an available attribute."""


class Attribute(Enum):
    """Attributes a round can be played on, numbered as in the menu."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    DENSITY = 4
    GDP_PER_CAPITA = 5
    TOURIST_SPOTS = 6

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def lower_wins(self) -> bool:
        return self is Attribute.DENSITY

    @property
    def is_integral(self) -> bool:
        return self in (Attribute.POPULATION, Attribute.TOURIST_SPOTS)

    def value_of(self, card: Card) -> int | float:
        """The raw value of this attribute on a card."""
        if self is Attribute.POPULATION:
            return card.population
        if self is Attribute.AREA:
            return card.area
        if self is Attribute.GDP:
            return card.gdp
        if self is Attribute.DENSITY:
            return card.density()
        if self is Attribute.GDP_PER_CAPITA:
            return card.gdp_per_capita()
        return card.tourist_spots

    def score(self, card: Card) -> float:
        """Single-precision score where higher is always better."""
        value = _f32(self.value_of(card))
        return -value if self.lower_wins else value

    def formatted(self, card: Card) -> str:
        """The value as shown in comparisons."""
        value = self.value_of(card)
        if self.is_integral:
            return str(value)
        return f"{value:.2f}"


_LABELS = {
    Attribute.POPULATION: "População",
    Attribute.AREA: "Área",
    Attribute.GDP: "PIB",
    Attribute.DENSITY: "Densidade Populacional",
    Attribute.GDP_PER_CAPITA: "PIB per capita",
    Attribute.TOURIST_SPOTS: "Pontos Turísticos",
}


def attribute_from_option(option: int | str, excluded: Iterable[Attribute] = ()) -> Attribute:
    """Resolve a menu option to an attribute, rejecting unknown or excluded ones."""
    try:
        number = int(option)
    except (TypeError, ValueError):
        raise InvalidChoiceError(f"invalid option: {option!r}") from None
    try:
        attribute = Attribute(number)
    except ValueError:
        raise InvalidChoiceError(f"invalid option: {number}") from None
    if attribute in set(excluded):
        raise InvalidChoiceError(f"attribute already chosen: {attribute.label}")
    return attribute


def _decide(first: float, second: float) -> Outcome:
    if first > second:
        return Outcome.FIRST
    if first < second:
        return Outcome.SECOND
    return Outcome.TIE


def compare(attribute: Attribute, first: Card, second: Card) -> Outcome:
    """Compare two cards on one attribute."""
    a = attribute.value_of(first)
    b = attribute.value_of(second)
    if attribute.lower_wins:
        a, b = b, a
    return _decide(a, b)


def combined_score(attributes: Sequence[Attribute], card: Card) -> float:
    """Single-precision sum of the scores of the chosen attributes."""
    total = 0.0
    for attribute in attributes:
        total = _f32(total + attribute.score(card))
    return total


def compare_sum(attributes: Sequence[Attribute], first: Card, second: Card) -> Outcome:
    """Compare two cards on the sum of several attribute scores."""
    return _decide(combined_score(attributes, first), combined_score(attributes, second))