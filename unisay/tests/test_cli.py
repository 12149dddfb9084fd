"""Tests for cli.py — the unisay command."""

import io
from unittest.mock import patch

import pytest

from app.art import Side, Size, get_art
from app.cli import USAGE, main


class _FakeTTY(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No user config, no forced color, an 80x24 terminal."""
    monkeypatch.setenv("UNISAY_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("UNISAY_FORCE_COLOR", raising=False)
    monkeypatch.delenv("UNISAY_DEBUG", raising=False)
    with patch("app.cli.terminal_size", return_value=(80, 24)):
        yield tmp_path


class TestHelp:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_prints_usage(self, flag, capsys):
        assert main([flag]) == 0
        out = capsys.readouterr().out
        assert out == USAGE

    def test_help_wins_over_message(self, capsys):
        assert main(["--help", "hello"]) == 0
        assert "Usage:" in capsys.readouterr().out


class TestFlagErrors:
    def test_bogus_art(self, capsys):
        assert main(["--art=bogus", "hello"]) == 1
        captured = capsys.readouterr()
        assert captured.err.strip() == "Error: --art must be 'big' or 'small'."
        assert captured.out == ""

    def test_bogus_side(self, capsys):
        assert main(["--side=up", "hello"]) == 1
        captured = capsys.readouterr()
        assert captured.err.strip() == "Error: --side must be 'left' or 'right'."
        assert captured.out == ""

    def test_bogus_wrap(self, capsys):
        assert main(["--wrap=hyphen", "hello"]) == 1
        assert "--wrap must be 'greedy' or 'fold'" in capsys.readouterr().err

    def test_unknown_option_returns_exit_code(self, capsys):
        assert main(["-x", "hello"]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("Error: ")
        assert "--" in captured.err
        assert captured.out == ""

    def test_missing_flag_value_returns_exit_code(self, capsys):
        assert main(["hello", "--art"]) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_bogus_art_without_message(self, capsys):
        with patch("sys.stdin", new=_FakeTTY()):
            assert main(["--art=bogus"]) == 1
        assert "Error: --art" in capsys.readouterr().err


class TestMissingMessage:
    def test_empty_stdin_prints_usage(self, capsys):
        with patch("sys.stdin", new=io.StringIO("")):
            assert main([]) == 1
        assert capsys.readouterr().out == USAGE

    def test_interactive_stdin_prints_usage(self, capsys):
        with patch("sys.stdin", new=_FakeTTY()):
            assert main([]) == 1
        assert capsys.readouterr().out == USAGE


class TestRender:
    def test_hi_side_by_side(self, capsys):
        assert main(["Hi"]) == 0
        lines = capsys.readouterr().out.split("\n")[:-1]
        art = get_art(Size.BIG, Side.LEFT)
        assert lines[0].startswith(art[0])
        assert any(line.endswith("┌────────┐") for line in lines)
        assert lines[-3].endswith("│   Hi   │")

    def test_words_joined(self, capsys):
        main(["Hello", "there"])
        assert "Hello there" in capsys.readouterr().out

    def test_piped_message(self, capsys):
        with patch("sys.stdin", new=io.StringIO("from a pipe\n")):
            assert main([]) == 0
        assert "from a pipe" in capsys.readouterr().out

    def test_intermixed_flags(self, capsys):
        assert main(["hello", "--above", "world"]) == 0
        lines = capsys.readouterr().out.split("\n")
        assert lines[0].startswith("┌")
        assert "hello world" in lines[2]

    def test_narrow_terminal_stacks(self, capsys):
        with patch("app.cli.terminal_size", return_value=(40, 24)):
            main(["Hello world this is a long message exceeding typical bubble width"])
        lines = capsys.readouterr().out.split("\n")[:-1]
        assert lines[0].startswith("┌")
        assert lines[-len(get_art(Size.BIG, Side.LEFT)):] == get_art(Size.BIG, Side.LEFT)

    def test_small_right_above(self, capsys):
        assert main(["--art=small", "--side=right", "--above", "x"]) == 0
        lines = capsys.readouterr().out.split("\n")[:-1]
        art = get_art(Size.SMALL, Side.RIGHT)
        assert lines[0].startswith("┌")
        assert [line.lstrip() for line in lines[-len(art):]] == [a.lstrip() for a in art]
        assert all(len(line) == 80 for line in lines[-len(art):])

    def test_same_output_twice(self, capsys):
        main(["repeat me"])
        first = capsys.readouterr().out
        main(["repeat me"])
        assert capsys.readouterr().out == first

    def test_no_color_by_default(self, capsys):
        main(["plain"])
        assert "\033[" not in capsys.readouterr().out

    def test_color_flag(self, capsys):
        main(["--color", "shiny"])
        assert "\033[" in capsys.readouterr().out


class TestConfigFile:
    def test_config_sets_defaults(self, isolated_env, monkeypatch, capsys):
        config = isolated_env / "config.yaml"
        config.write_text("art: small\nabove: true\n")
        monkeypatch.setenv("UNISAY_CONFIG", str(config))
        main(["hi"])
        lines = capsys.readouterr().out.split("\n")[:-1]
        art = get_art(Size.SMALL, Side.LEFT)
        assert lines[0].startswith("┌")
        assert lines[-len(art):] == art

    def test_flags_override_config(self, isolated_env, monkeypatch, capsys):
        config = isolated_env / "config.yaml"
        config.write_text("art: small\ncolor: always\n")
        monkeypatch.setenv("UNISAY_CONFIG", str(config))
        main(["--art=big", "--no-color", "--above", "hi"])
        lines = capsys.readouterr().out.split("\n")[:-1]
        art = get_art(Size.BIG, Side.LEFT)
        assert lines[-len(art):] == art

    def test_no_above_overrides_config(self, isolated_env, monkeypatch, capsys):
        config = isolated_env / "config.yaml"
        config.write_text("above: true\n")
        monkeypatch.setenv("UNISAY_CONFIG", str(config))
        main(["--no-above", "hi"])
        lines = capsys.readouterr().out.split("\n")[:-1]
        art = get_art(Size.BIG, Side.LEFT)
        assert lines[0] == art[0].ljust(len(max(art, key=len)))
        assert lines[-3].endswith("│   hi   │")

    def test_broken_config_still_renders(self, isolated_env, monkeypatch, capsys):
        config = isolated_env / "config.yaml"
        config.write_text("art: [oops\n")
        monkeypatch.setenv("UNISAY_CONFIG", str(config))
        assert main(["hi"]) == 0
        captured = capsys.readouterr()
        assert "│   hi   │" in captured.out
        assert "[config]" in captured.err
