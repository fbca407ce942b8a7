"""Interactive rounds of the city trump game, from card registration to the verdict."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from supertrunfo.cards import Attribute, Card, InvalidChoiceError, attribute_from_option
from supertrunfo.render import (
    SEPARATOR,
    adventurer_card,
    adventurer_comparison,
    attribute_menu,
    master_card,
    master_comparison,
    novice_card,
    novice_comparison,
    split_novice_comparison,
    sum_report,
)

Ask = Callable[[str], str]
Write = Callable[[str], object]

_PLAIN_PROMPTS = (
    "Digite o nome estado: ",
    "Digite o nome da cidade: ",
    "Populacao: ",
    "Area: ",
    "PIB: ",
    "Numero de pontos turisticos: ",
)

_ACCENTED_PROMPTS = (
    "Digite o nome do estado: ",
    "Digite o nome da cidade: ",
    "População: ",
    "Área (em km²): ",
    "PIB (em milhões): ",
    "Número de pontos turísticos: ",
)

_PLAIN_WELCOME = (
    "*** Seja bem-vindo ao SUPER TRUNFO ***\n"
    "Aqui voce ira cadastrar as cartas para jogar.\n"
    "Por favor, siga estas instrucoes:\n"
    "- Nao use acentos.\n"
    "- Use ponto (.) para separar a parte decimal dos numeros.\n"
)

_ACCENTED_WELCOME = (
    "*** Seja bem-vindo ao SUPER TRUNFO ***\n"
    "Aqui você irá cadastrar as cartas para jogar.\n"
    "Por favor, siga estas instruções:\n"
    "- Não use acentos.\n"
    "- Use ponto (.) para separar a parte decimal dos números.\n"
)

_MASTER_WELCOME = (
    "*** Seja bem-vindo ao SUPER TRUNFO ***\n"
    "Cadastre as cartas para jogar (não use acentos e utilize ponto (.) para decimais).\n"
)

_ADVENTURER_MENU = (
    "--- Menu de Comparação ---\n"
    "Escolha o atributo para comparar:\n"
    "1 - População            (maior vence)\n"
    "2 - Área                 (maior vence)\n"
    "3 - PIB                  (maior vence)\n"
    "4 - Densidade Populacional (menor vence)\n"
    "5 - PIB per capita       (maior vence)\n"
    "6 - Pontos Turísticos    (maior vence)\n"
)

_COMPARISON_INTRO = (
    "--- Comparacao de Atributos ---\n"
    "Vamos calcular qual carta tem os atributos mais forte\n"
    "Vamos usar como base a populacao e a area para determinar o vencedor \n"
)


def _ask_text(ask: Ask, prompt: str) -> str:
    """Ask for a non-blank line, dropping its leading whitespace."""
    while True:
        answer = ask(prompt).lstrip()
        if answer:
            return answer


def _ask_int(ask: Ask, prompt: str) -> int:
    answer = ask(prompt).strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"not an integer: {answer!r}") from None


def _ask_float(ask: Ask, prompt: str) -> float:
    answer = ask(prompt).strip()
    try:
        return float(answer)
    except ValueError:
        raise ValueError(f"not a number: {answer!r}") from None


def read_card(ask: Ask, accented: bool = False) -> Card:
    """Ask for every field of a card and build it."""
    prompts = _ACCENTED_PROMPTS if accented else _PLAIN_PROMPTS
    state_prompt, city_prompt, population_prompt, area_prompt, gdp_prompt, spots_prompt = prompts
    state = _ask_text(ask, state_prompt)
    city = _ask_text(ask, city_prompt)
    population = _ask_int(ask, population_prompt)
    area = _ask_float(ask, area_prompt)
    gdp = _ask_float(ask, gdp_prompt)
    tourist_spots = _ask_int(ask, spots_prompt)
    return Card(state, city, population, area, gdp, tourist_spots)


def _register_pair(ask: Ask, write: Write, accented: bool) -> tuple[Card, Card]:
    write("\n--- Cadastro da Primeira Carta ---\n")
    first = read_card(ask, accented)
    write("\n--- Cadastro da Segunda Carta ---\n")
    second = read_card(ask, accented)
    return first, second


def _register_novice(ask: Ask, write: Write) -> tuple[Card, Card]:
    write(_PLAIN_WELCOME)
    first, second = _register_pair(ask, write, accented=False)
    write("\n--- Cartas Cadastradas ---\n\n")
    write(novice_card(first, 1))
    write(novice_card(second, 2))
    return first, second


def play_novice(ask: Ask, write: Write) -> None:
    """Register two cards and compare them on population and area."""
    first, second = _register_novice(ask, write)
    write(_COMPARISON_INTRO)
    write(novice_comparison(Attribute.POPULATION, first, second))
    write(novice_comparison(Attribute.AREA, first, second))


def play_novice_split(ask: Ask, write: Write) -> None:
    """Like the novice round, with each comparison in its own separated block."""
    first, second = _register_novice(ask, write)
    write(_COMPARISON_INTRO + "\n")
    write(f"{SEPARATOR}\n\n")
    write(split_novice_comparison(Attribute.POPULATION, first, second))
    write(split_novice_comparison(Attribute.AREA, first, second))


def play_adventurer(ask: Ask, write: Write) -> None:
    """Register two cards and compare them on one attribute picked from a menu."""
    write(_ACCENTED_WELCOME)
    first, second = _register_pair(ask, write, accented=True)
    write("\n--- Cartas Cadastradas ---\n\n")
    write(adventurer_card(first, 1))
    write(adventurer_card(second, 2))
    write(_ADVENTURER_MENU)
    try:
        attribute = attribute_from_option(ask("Opção: ").strip())
    except InvalidChoiceError:
        write("\nOpção inválida! Não foi possível realizar a comparação.\n")
        return
    write(adventurer_comparison(attribute, first, second))


def play_master(ask: Ask, write: Write) -> None:
    """Register two cards, compare two chosen attributes and their sum.

    Raises InvalidChoiceError, carrying the message for the player, when a
    choice is unknown or repeats the first one.
    """
    write(_MASTER_WELCOME)
    first, second = _register_pair(ask, write, accented=True)
    write("\n--- Cartas Cadastradas ---\n\n")
    write(master_card(first, 1))
    write("\n")
    write(master_card(second, 2))
    write(f"\n{SEPARATOR}\n\n")

    write("--- Escolha do Primeiro Atributo ---\n")
    write(attribute_menu())
    try:
        chosen_first = attribute_from_option(ask("Opção: ").strip())
    except InvalidChoiceError:
        raise InvalidChoiceError("Opção inválida para o primeiro atributo.") from None

    write("\n--- Escolha do Segundo Atributo ---\n")
    write(attribute_menu([chosen_first]))
    try:
        chosen_second = attribute_from_option(ask("Opção: ").strip(), [chosen_first])
    except InvalidChoiceError:
        raise InvalidChoiceError(
            "Erro: Opção inválida ou atributo repetido para a segunda escolha."
        ) from None

    chosen = (chosen_first, chosen_second)
    for attribute in chosen:
        write(master_comparison(attribute, first, second))
    write(sum_report(chosen, first, second))


_LEVELS = {
    "novice": play_novice,
    "novice-split": play_novice_split,
    "adventurer": play_adventurer,
    "master": play_master,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one round at the chosen level on the terminal."""
    parser = argparse.ArgumentParser(prog="supertrunfo", description="City trump card game.")
    parser.add_argument("--level", choices=sorted(_LEVELS), default="master")
    args = parser.parse_args(argv)
    play = _LEVELS[args.level]
    try:
        play(input, sys.stdout.write)
    except InvalidChoiceError as error:
        sys.stdout.write(f"{error}\n")
        return 1
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    except EOFError:
        sys.stderr.write("\n")
        return 1
    return 0