import pytest

from supertrunfo.cards import Attribute, Card, InvalidChoiceError
from supertrunfo.game import (
    main,
    play_adventurer,
    play_master,
    play_novice,
    play_novice_split,
    read_card,
)
from supertrunfo.render import (
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

BIG = ["Sao Paulo", "Campinas", "2000000", "800.5", "5000.25", "30"]
SMALL = ["Bahia", "Ilheus", "150000", "1500.0", "700.75", "12"]


class Script:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


def run(play, answers):
    out = []
    script = Script(answers)
    play(script, out.append)
    return "".join(out), script


def cards():
    return (
        Card("Sao Paulo", "Campinas", 2000000, 800.5, 5000.25, 30),
        Card("Bahia", "Ilheus", 150000, 1500.0, 700.75, 12),
    )


def test_read_card_accented_prompts_and_values():
    script = Script(BIG)
    card = read_card(script, True)
    assert card == cards()[0]
    assert script.prompts == [
        "Digite o nome do estado: ",
        "Digite o nome da cidade: ",
        "População: ",
        "Área (em km²): ",
        "PIB (em milhões): ",
        "Número de pontos turísticos: ",
    ]


def test_read_card_plain_prompts():
    script = Script(SMALL)
    card = read_card(script, False)
    assert card == cards()[1]
    assert script.prompts[0] == "Digite o nome estado: "
    assert script.prompts[2] == "Populacao: "


def test_read_card_skips_blank_lines_and_leading_spaces():
    script = Script(["", "   ", "  Bahia", "Ilheus", "150000", "1500", "700.75", "12"])
    card = read_card(script)
    assert card.state == "Bahia"
    assert len(script.prompts) == 8


def test_read_card_rejects_bad_number():
    with pytest.raises(ValueError):
        read_card(Script(["Bahia", "Ilheus", "many", "1", "1", "1"]))


def test_play_novice_compares_population_and_area():
    text, _ = run(play_novice, BIG + SMALL)
    first, second = cards()
    assert novice_card(first, 1) in text
    assert novice_card(second, 2) in text
    assert text.endswith(
        novice_comparison(Attribute.POPULATION, first, second)
        + novice_comparison(Attribute.AREA, first, second)
    )


def test_play_novice_split_layout():
    out = []
    play_novice_split(Script(BIG + SMALL), out.append)
    text = "".join(out)
    first, second = cards()
    expected_tail = split_novice_comparison(
        Attribute.POPULATION, first, second
    ) + split_novice_comparison(Attribute.AREA, first, second)
    assert text[-len(expected_tail):] == expected_tail
    assert text.splitlines()[0] == "*** Seja bem-vindo ao SUPER TRUNFO ***"


def test_play_adventurer_valid_option():
    text, script = run(play_adventurer, BIG + SMALL + ["4"])
    first, second = cards()
    assert adventurer_card(first, 1) in text
    assert text.endswith(adventurer_comparison(Attribute.DENSITY, first, second))
    assert script.prompts[-1] == "Opção: "


@pytest.mark.parametrize("option", ["0", "7", "x"])
def test_play_adventurer_invalid_option(option):
    out = []
    play_adventurer(Script(BIG + SMALL + [option]), out.append)
    text = "".join(out)
    message = "\nOpção inválida! Não foi possível realizar a comparação.\n"
    assert text[-len(message):] == message


def test_play_master_full_round():
    text, _ = run(play_master, BIG + SMALL + ["1", "2"])
    first, second = cards()
    assert master_card(first, 1) in text
    assert "\n--- Escolha do Segundo Atributo ---\n" + attribute_menu([Attribute.POPULATION]) in text
    assert master_comparison(Attribute.POPULATION, first, second) in text
    assert master_comparison(Attribute.AREA, first, second) in text
    assert text.endswith(sum_report([Attribute.POPULATION, Attribute.AREA], first, second))
    assert "Resultado Final: Carta 1 venceu" in text


def test_play_master_invalid_first_choice():
    out = []
    with pytest.raises(InvalidChoiceError, match="primeiro atributo"):
        play_master(Script(BIG + SMALL + ["9"]), out.append)


def test_play_master_repeated_second_choice():
    out = []
    with pytest.raises(InvalidChoiceError, match="atributo repetido"):
        play_master(Script(BIG + SMALL + ["3", "3"]), out.append)


def test_main_master_invalid_returns_one(monkeypatch, capsys):
    answers = iter(BIG + SMALL + ["8"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--level", "master"]) == 1
    assert "Opção inválida para o primeiro atributo.\n" in capsys.readouterr().out


def test_main_novice_succeeds(monkeypatch, capsys):
    answers = iter(BIG + SMALL)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--level", "novice"]) == 0
    first, second = cards()
    assert capsys.readouterr().out.endswith(novice_comparison(Attribute.AREA, first, second))


def test_main_bad_number_returns_one(monkeypatch, capsys):
    answers = iter(["Bahia", "Ilheus", "lots"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--level", "adventurer"]) == 1
    assert "lots" in capsys.readouterr().err