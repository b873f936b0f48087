import io

from broadside import cli
from conftest import FLEET, FLEET_CELLS


def test_main_plays_a_game_from_stdin(monkeypatch, capsys):
    lines = (FLEET + [""]) * 2
    for i, cell in enumerate(FLEET_CELLS):
        lines.append(cell)
        if i < len(FLEET_CELLS) - 1:
            lines += ["", "J10", ""]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))

    assert cli.main(["--no-clear", "--player-one", "Ann"]) == 0
    out = capsys.readouterr().out
    assert "Ann, place your ships on the game field" in out
    assert out.rstrip().endswith("You sank the last ship. You won. Congratulations!")


def test_main_reports_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("A1 A5\n"))
    assert cli.main(["--no-clear"]) == 1
