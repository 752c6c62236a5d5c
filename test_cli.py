import io
from pathlib import Path

from othello.cli import main

GAMES_DIR = Path(__file__).parent / "games"


def test_replay_prints_transcript(capsys):
    assert main(['replay', str(GAMES_DIR / "opening.moves")]) == 0
    assert capsys.readouterr().out == (GAMES_DIR / "opening.expected").read_text()


def test_check_reports_matches(capsys):
    assert main(['check', str(GAMES_DIR), '--quiet']) == 0
    assert "1/1 games match" in capsys.readouterr().out


def test_check_fails_on_mismatch(tmp_path, capsys):
    (tmp_path / "g.moves").write_text("2 3\n")
    (tmp_path / "g.expected").write_text("nothing like it\n")
    assert main(['check', str(tmp_path), '--quiet']) == 1
    out = capsys.readouterr().out
    assert "FAIL g.moves" in out
    assert "0/1 games match" in out


def test_record_writes_expected(tmp_path, capsys):
    moves = tmp_path / "g.moves"
    moves.write_text("2 3\n")
    assert main(['record', str(moves)]) == 0
    assert (tmp_path / "g.expected").exists()
    assert main(['check', str(tmp_path), '--quiet']) == 0


def test_play_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("2 3\n"))
    assert main(['play']) == 0
    out = capsys.readouterr().out
    assert "Score: Black 4, White 1" in out
    assert "Input ended before the game finished." in out


def test_config_option(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"display": {"coordinate_style": "algebraic"}}')
    assert main(['--config', str(cfg), 'replay', str(GAMES_DIR / "opening.moves")]) == 0
    assert "Legal moves: d3 c4 f5 e6" in capsys.readouterr().out


def test_wrongly_typed_config_exits_with_error(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"display": {"black_symbol": 1}}')
    assert main(['--config', str(cfg), 'play']) == 2
    assert "black_symbol must be a str" in capsys.readouterr().err


def test_bad_config_exits_with_error(tmp_path, capsys):
    assert main(['--config', str(tmp_path / "missing.json"), 'play']) == 2
    assert "not found" in capsys.readouterr().err
