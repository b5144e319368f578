import pytest

from algokit.tsp.cli import main


def _tours(output):
    lines = output.splitlines()
    return [
        lines[i + 1]
        for i, line in enumerate(lines)
        if line.startswith("Soluzione definitiva: ")
    ]


@pytest.mark.parametrize("generator", ["1", "2", "3", "4"])
def test_full_run_writes_files_and_reports(tmp_path, monkeypatch, capsys, generator):
    monkeypatch.chdir(tmp_path)
    assert main(["6", generator, "1", "2", "3", "2"]) == 0
    out = capsys.readouterr().out
    assert "Inizializzazione soluzione" in out
    assert "Random Multistart: N restart=2" in out
    assert "Tabu Search: Lunghezza Tabu list=3 Iterazioni senza miglioramenti=2" in out
    tours = _tours(out)
    assert len(tours) == 3
    for tour in tours:
        assert sorted(int(v) for v in tour.split()) == list(range(6))

    edges_text = (tmp_path / "archi.txt").read_text()
    assert edges_text.startswith("6\n\n")
    assert len(edges_text.split()[1:]) == 6 * 5 // 2
    nodes_lines = (tmp_path / "nodi.txt").read_text().splitlines()
    assert len(nodes_lines) == 6
    assert all(len(line.split(",")) == 2 for line in nodes_lines)


def test_three_opt_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["6", "1", "0", "1", "2", "2"]) == 0
    tours = _tours(capsys.readouterr().out)
    assert len(tours) == 3


def test_too_few_arguments_prints_usage(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["5", "1"]) == 0
    assert "Numero parametri sbagliato" in capsys.readouterr().out
    assert not (tmp_path / "archi.txt").exists()


def test_invalid_generator(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["6", "9", "1", "1", "1", "1"]) == 0
    assert "Valore tipologia di generatore non valido" in capsys.readouterr().out


def test_invalid_opt(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["6", "1", "2", "1", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert "Valore scelta opt non valido" in out
    assert "Inizializzazione soluzione" not in out