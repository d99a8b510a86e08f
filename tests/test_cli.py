import builtins
import json
from pathlib import Path

from apps.cli import play, simulate
from wordlekit.game import GameSession, Lost, Won


def _scripted(answers):
    it = iter(answers)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_play_game_until_won():
    game = GameSession(["ERROR", "TUTUT"], "TUTUT")
    out = []
    final = play.play_game(game, read=_scripted(["abc", "nopes", "error", "tûtüt"]), write=out.append)
    text = "\n".join(out)
    assert isinstance(final, Won)
    assert "'abc' is invalid: too short" in text
    assert "'nopes' is invalid: not in dictionary" in text
    assert "Keep going… 1/6" in text
    assert "Wordle 1 2/6" in text
    assert "Congrats! You found the correct answer 🎉: TUTUT" in text


def test_format_board_lost():
    game = GameSession(["ERROR", "TUTUT"], "TUTUT", max_attempts=2)
    game.submit_guess("ERROR")
    game.submit_guess("ERROR")
    board = play.format_board(game.state, game.word_size)
    lines = board.splitlines()
    assert lines[0] == "Wordle 1 X/2"
    assert lines[1] == "E⬛R⬛R⬛O⬛R⬛"
    assert lines[-1].endswith(": TUTUT")
    assert isinstance(game.state, Lost)


def test_format_board_pads_empty_rows():
    game = GameSession(["ERROR", "TUTUT"], "TUTUT", max_attempts=3)
    lines = play.format_board(game.state, game.word_size).splitlines()
    assert lines == [" ⬜" * 5] * 3


def test_format_alphabet():
    game = GameSession(["TOTOT", "TUTUT"], "TUTUT")
    game.submit_guess("TOTOT")
    line = play.format_alphabet(game.state)
    assert "T🟩" in line
    assert "O" not in line
    assert "A" in line


def test_main_plays_and_quits(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", _scripted(["crane", "n"]))
    assert play.main(["--secret", "crane"]) == 0
    assert "Congrats!" in capsys.readouterr().out


def test_main_end_of_input(monkeypatch):
    monkeypatch.setattr(builtins, "input", _scripted([]))
    assert play.main(["--seed", "3"]) == 0


def test_main_bad_secret(capsys):
    assert play.main(["--secret", "zzzzz"]) == 2
    assert "Can't start a game" in capsys.readouterr().err


def test_main_missing_dictionary(tmp_path, capsys):
    assert play.main(["--words", str(tmp_path / "none.txt")]) == 2


def test_simulate_writes_reports(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("crane\nraise\nstare\ntrace\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = simulate.main(["--words", str(words), "--outdir", str(outdir), "--no-progress"])
    assert rc == 0

    manifests = list(outdir.glob("sim_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("sim_*.csv"))) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 4
    assert manifest["stats"]["played_count"] == 4
    assert "played=4" in capsys.readouterr().out


def test_simulate_unknown_solver(tmp_path: Path):
    assert simulate.main(["--solver", "nope", "--outdir", str(tmp_path), "--no-progress"]) == 2


def test_simulate_sample_keeps_whole_dictionary_as_candidates(tmp_path: Path, monkeypatch):
    from wordlekit.solvers.random_consistent import RandomConsistentSolver

    seen = []

    class _Recording(RandomConsistentSolver):
        def reset(self, **kwargs):
            super().reset(**kwargs)
            seen.append(sorted(self.answers))

    monkeypatch.setattr(simulate, "create_solver", lambda solver_id: _Recording())
    words = tmp_path / "words.txt"
    words.write_text("crane\nraise\nstare\ntrace\ncared\n", encoding="utf-8")

    rc = simulate.main(["--words", str(words), "--outdir", str(tmp_path / "r"),
                        "--sample", "1", "--seed", "5", "--no-progress"])
    assert rc == 0
    assert seen == [["CARED", "CRANE", "RAISE", "STARE", "TRACE"]]


def test_format_board_uses_outcome_puzzle_number():
    game = GameSession(["ERROR", "MISSS", "TUTUT"], "TUTUT", max_attempts=1)
    game.submit_guess("TUTUT")
    state = game.state
    assert state.wordle_id == 2
    assert play.format_board(state, 5).splitlines()[0] == "Wordle 2 1/1"
