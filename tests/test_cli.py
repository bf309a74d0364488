"""Tests for the console runner and the interactive menu."""

import pytest

import cli


def feed(monkeypatch, answers):
    """Patch input() to return ``answers`` in order, then raise EOFError."""
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TestOneShot:

    def test_runs_requested_policy(self, capsys) -> None:
        code = cli.main(["--policy", "fifo", "--frames", "3",
                         "--refs", "1,2,3,4,1,2,5,1,2,3,4,5"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Running FIFO with 3 frames on 12 references." in out
        assert "Hits: 3, Faults: 9, Hit Ratio: 0.25" in out

    def test_verbose_prints_event_log(self, capsys) -> None:
        cli.main(["--policy", "OPT", "--refs", "1 2 3 4", "-v"])
        out = capsys.readouterr().out
        assert "Evicting: Page 1 from Frame 0" in out

    def test_compare_all(self, capsys) -> None:
        cli.main(["--all", "--frames", "3", "--refs", "1,2,3,4,1,2,5,1,2,3,4,5"])
        out = capsys.readouterr().out
        for policy in ("FIFO", "OPT", "LRU"):
            assert policy in out

    @pytest.mark.parametrize("argv", [
        ["--frames", "0", "--refs", "1"],
        ["--frames", "x", "--refs", "1"],
        ["--refs", "1,b"],
        ["--refs", " "],
        ["--policy", "CLOCK", "--refs", "1"],
    ])
    def test_bad_arguments_exit(self, argv) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(argv)
        assert exc.value.code == 2


class TestMenu:

    def test_runs_then_exits(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, ["3", "3", "7 0 1 2 0 3 0 4 2 3 0 3 2", "0"])
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Running LRU with 3 frames on 13 references." in out
        assert "Exiting..." in out

    def test_reprompts_after_bad_input(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, ["9", "1", "0", "1", "2", "", "2", "2", "1 2 1", "0"])
        assert cli.run_menu() == 0
        out = capsys.readouterr().out
        assert "Invalid choice." in out
        assert "Frame count must be positive" in out
        assert "Reference string cannot be empty" in out
        assert "Running OPT with 2 frames on 3 references." in out

    def test_end_of_input_exits(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, [])
        assert cli.run_menu() == 0
        assert "Exiting..." in capsys.readouterr().out
