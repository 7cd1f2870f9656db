import io

import pytest

from supertrunfo.card import Attribute, Card
from supertrunfo.master import choose_attribute, compare_attributes, main


def make(city, population=1000, area=10.0, gdp=1.0, spots=1, state="A"):
    return Card(state, "A01", city, population, area, gdp, spots)


def test_choose_returns_attribute():
    out = io.StringIO()
    chosen = choose_attribute("Pick:", None, io.StringIO("2\n"), out)
    assert chosen is Attribute.AREA
    assert out.getvalue().startswith("\nPick:\n1. População\n")
    assert out.getvalue().endswith("Escolha: ")


def test_choose_hides_used_attribute_and_rejects_it():
    out = io.StringIO()
    chosen = choose_attribute("Pick:", Attribute.GDP, io.StringIO("3\n4\n"), out)
    assert chosen is Attribute.TOURIST_SPOTS
    text = out.getvalue()
    assert "3. PIB\n" not in text
    assert text.count("Opção inválida. Tente novamente.\n") == 1


@pytest.mark.parametrize("bad", ["0", "7", "x", "-2"])
def test_choose_rejects_out_of_range(bad):
    out = io.StringIO()
    chosen = choose_attribute("Pick:", None, io.StringIO(f"{bad}\n6\n"), out)
    assert chosen is Attribute.GDP_PER_CAPITA
    assert "Opção inválida. Tente novamente." in out.getvalue()


def test_choose_raises_at_end_of_input():
    with pytest.raises(EOFError):
        choose_attribute("Pick:", None, io.StringIO("9\n"), io.StringIO())


def test_sum_of_population_and_spots():
    report = compare_attributes(
        make("Alpha", population=100, spots=5),
        make("Beta", population=50, spots=10),
        Attribute.POPULATION,
        Attribute.TOURIST_SPOTS,
    )
    assert "\nSoma dos atributos:\nAlpha: 105.00\nBeta: 60.00\n" in report
    assert report.endswith("\nResultado: Carta 1 (Alpha) venceu!\n")


def test_density_counts_against_card():
    dense = make("Dense", population=1000, area=1.0, spots=3)
    sparse = make("Sparse", population=1000, area=1000.0, spots=3)
    report = compare_attributes(dense, sparse, Attribute.DENSITY, Attribute.TOURIST_SPOTS)
    assert report.endswith("Resultado: Carta 2 (Sparse) venceu!\n")
    assert "Densidade Demográfica:\n -> Dense: " in report


def test_identical_cards_tie():
    report = compare_attributes(make("X"), make("X"), Attribute.AREA, Attribute.GDP)
    assert report.endswith("Resultado: Empate!\n")


def test_plain_numbers_accepted():
    first, second = make("One", area=3.0), make("Two", area=8.0)
    assert compare_attributes(first, second, 2, 3) == compare_attributes(
        first, second, Attribute.AREA, Attribute.GDP
    )


def test_heading_names_cards():
    report = compare_attributes(
        make("One", state="B"), make("Two", state="C"), Attribute.AREA, Attribute.GDP
    )
    assert report.startswith("\nComparando cartas:\nCarta 1: One (B)\nCarta 2: Two (C)\n\n")


def test_main_runs_whole_session(monkeypatch, capsys):
    data = (
        "A\nA01\nBig\n5000\n10\n9\n4\n"
        "B\nB01\nSmall\n100\n10\n1\n2\n"
        "1\n1\n3\n"
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main() == 0
    out = capsys.readouterr().out
    assert "=== Comparação de Cartas com Dois Atributos ===" in out
    assert "Opção inválida. Tente novamente." in out
    assert out.endswith("Resultado: Carta 1 (Big) venceu!\n")


def test_main_fails_without_choices(monkeypatch):
    data = "A\nA01\nBig\n5000\n10\n9\n4\nB\nB01\nSmall\n100\n10\n1\n2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main() == 1