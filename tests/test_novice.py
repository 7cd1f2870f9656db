import io

from supertrunfo.card import Card
from supertrunfo.novice import compare_by_population, main


def make(city, population, state="A"):
    return Card(state, "A01", city, population, 10.0, 1.0, 1)


def test_first_card_wins():
    report = compare_by_population(make("Campinas", 900), make("Santos", 400))
    assert report.endswith("\nResultado: Carta 1 (Campinas) venceu!\n")


def test_second_card_wins():
    report = compare_by_population(make("Campinas", 100, "B"), make("Santos", 400, "C"))
    assert "Resultado: Carta 2 (Santos) venceu!" in report
    assert "Carta 1 - Campinas (B): 100\n" in report
    assert "Carta 2 - Santos (C): 400\n" in report


def test_tie():
    report = compare_by_population(make("Campinas", 400), make("Santos", 400))
    assert report.endswith("Resultado: Empate!\n")


def test_report_heading():
    report = compare_by_population(make("X", 1), make("Y", 2))
    assert report.startswith("\nComparação de cartas (Atributo: População):\n\n")


def test_main_runs_whole_session(monkeypatch, capsys):
    data = "A\nA01\nCampinas\n1200\n795.7\n50.1\n5\nB\nB02\nSantos\n430\n281.0\n20.3\n8\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Cadastro da Carta 1 ===" in out
    assert "=== Cadastro da Carta 2 ===" in out
    assert "Resultado: Carta 1 (Campinas) venceu!" in out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("A\nA01\nCampinas\nlots\n"))
    assert main() == 1
    assert "lots" in capsys.readouterr().err