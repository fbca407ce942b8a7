"""Text shown to players: card sheets, menus and comparison reports."""

from __future__ import annotations

from typing import Iterable, Sequence

from supertrunfo.cards import (
    Attribute,
    Card,
    Outcome,
    combined_score,
    compare,
    compare_sum,
)

SEPARATOR = "-----------------------------------------------"
RULE = "=============================================="


def _rule_text(attribute: Attribute) -> str:
    return "menor vence" if attribute.lower_wins else "maior vence"


def novice_card(card: Card, number: int) -> str:
    """Card sheet in the plain style, with its code and a closing separator."""
    return (
        f"Carta {number} // Codigo: {card.code(number)}\n\n"
        f"Nome do estado: {card.state}\n"
        f"Nome da cidade: {card.city}\n"
        f"Populacao: {card.population}\n"
        f"Area: {card.area:.2f} kilometros quadrados\n"
        f"PIB: {card.gdp:.2f} milhoes\n"
        f"Pontos turisticos: {card.tourist_spots}\n"
        f"Densidade Populacional: {card.density():.2f} habitantes por kilometros quadrados\n"
        f"PIB per capita: {card.gdp_per_capita():.2f} milhoes por habitante\n"
        f"{SEPARATOR}\n\n"
    )


def adventurer_card(card: Card, number: int) -> str:
    """Card sheet listing state and city, followed by a separator."""
    return (
        f"Carta {number}:\n"
        f"Estado: {card.state}\n"
        f"Cidade: {card.city}\n"
        f"População: {card.population}\n"
        f"Área: {card.area:.2f} km²\n"
        f"PIB: {card.gdp:.2f} milhões\n"
        f"Pontos turísticos: {card.tourist_spots}\n"
        f"Densidade Populacional: {card.density():.2f} hab/km²\n"
        f"PIB per capita: {card.gdp_per_capita():.2f} milhões/hab\n"
        f"\n{SEPARATOR}\n\n"
    )


def master_card(card: Card, number: int) -> str:
    """Compact card sheet headed by city and state."""
    return (
        f"Carta {number}: {card.city}, {card.state}\n"
        f"   População: {card.population}\n"
        f"   Área: {card.area:.2f} km²\n"
        f"   PIB: {card.gdp:.2f} milhões\n"
        f"   Pontos turísticos: {card.tourist_spots}\n"
        f"   Densidade Populacional: {card.density():.2f} hab/km²\n"
        f"   PIB per capita: {card.gdp_per_capita():.2f} milhões/hab\n"
    )


def novice_result(outcome: Outcome, first: Card, second: Card) -> str:
    """Result line naming the winning card's state."""
    if outcome is Outcome.FIRST:
        return f"Resultado: Carta 1({first.state}) Venceu\n"
    if outcome is Outcome.SECOND:
        return f"Resultado: Carta 2({second.state}) Venceu\n"
    return "Resultado: Empate\n"


def _state_lines(attribute: Attribute, first: Card, second: Card) -> str:
    return (
        f"Carta 1 - {first.state}: {attribute.formatted(first)}\n"
        f"Carta 2 - {second.state}: {attribute.formatted(second)}\n"
    )


def novice_comparison(attribute: Attribute, first: Card, second: Card) -> str:
    """Both values, by state, and the result of one attribute."""
    outcome = compare(attribute, first, second)
    return _state_lines(attribute, first, second) + novice_result(outcome, first, second)


def split_novice_comparison(attribute: Attribute, first: Card, second: Card) -> str:
    """Comparison block in the separated layout, keeping its population quirks."""
    outcome = compare(attribute, first, second)
    text = _state_lines(attribute, first, second) + novice_result(outcome, first, second)
    if attribute is Attribute.POPULATION and outcome is Outcome.SECOND:
        return text + f"{SEPARATOR}\n\n"
    if attribute is Attribute.POPULATION and outcome is Outcome.TIE:
        return text + "\n" + f"Carta 2 - {second.state}: {attribute.formatted(second)}\n"
    return text + f"\n{SEPARATOR}\n\n"


def _verdict(outcome: Outcome, prefix: str) -> str:
    if outcome is Outcome.FIRST:
        return f"{prefix}: Carta 1 venceu"
    if outcome is Outcome.SECOND:
        return f"{prefix}: Carta 2 venceu"
    return f"{prefix}: Empate"


def adventurer_comparison(attribute: Attribute, first: Card, second: Card) -> str:
    """Comparison of one attribute by state, with its winning rule."""
    outcome = compare(attribute, first, second)
    return (
        f"\nComparação de {attribute.label} ({_rule_text(attribute)})\n"
        + _state_lines(attribute, first, second)
        + _verdict(outcome, "Resultado")
        + "\n\n"
    )


def master_comparison(attribute: Attribute, first: Card, second: Card) -> str:
    """Comparison of one attribute by city, under a rule line."""
    outcome = compare(attribute, first, second)
    return (
        f"\n{RULE}\n"
        f"Comparação de {attribute.label} ({_rule_text(attribute)})\n"
        f"Carta 1 - {first.city}: {attribute.formatted(first)}\n"
        f"Carta 2 - {second.city}: {attribute.formatted(second)}\n"
        + _verdict(outcome, "Resultado")
        + "\n"
    )


def attribute_menu(excluded: Iterable[Attribute] = ()) -> str:
    """Menu lines for every attribute not yet chosen."""
    skipped = set(excluded)
    return "".join(
        f"{attribute.value} - {attribute.label}\n"
        for attribute in Attribute
        if attribute not in skipped
    )


def sum_report(attributes: Sequence[Attribute], first: Card, second: Card) -> str:
    """Final report on the summed scores of the chosen attributes."""
    outcome = compare_sum(attributes, first, second)
    return (
        f"\n{RULE}\n"
        "Soma dos Atributos Selecionados:\n"
        f"Carta 1 - {first.city}: {combined_score(attributes, first):.2f}\n"
        f"Carta 2 - {second.city}: {combined_score(attributes, second):.2f}\n"
        + _verdict(outcome, "Resultado Final")
        + f"\n{RULE}\n"
    )