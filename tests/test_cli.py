import pytest

from gameoflife.cli import build_parser, main
from gameoflife.output import CLEAR_SCREEN


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("gameoflife.timer.time.sleep", lambda seconds: None)


def test_a_pattern_file_is_played_in_the_terminal(fixtures_dir, capsys, no_sleep):
    exit_code = main([str(fixtures_dir / "glider.txt"), "--rows", "5", "--columns", "5",
                      "--generations", "2", "--lifetime", "0"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.count(CLEAR_SCREEN) == 2
    assert out.count("\n") == 10


def test_a_library_pattern_can_be_played_by_name(capsys, no_sleep):
    exit_code = main(["blinker", "--rows", "5", "--columns", "5", "--generations", "1",
                      "--lifetime", "0", "--position", "2", "1"])

    assert exit_code == 0
    assert "⬛⬜⬜⬜⬛" in capsys.readouterr().out


def test_an_invalid_pattern_file_is_reported(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("⬜X⬜\n", encoding='utf-8')

    exit_code = main([str(path), "--generations", "1", "--lifetime", "0"])

    assert exit_code == 1
    assert "Invalid char 'X'" in capsys.readouterr().err


def test_a_pattern_file_that_is_not_utf8_is_reported(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00")

    exit_code = main([str(path), "--generations", "1", "--lifetime", "0"])

    assert exit_code == 1
    assert "Cannot decode pattern file" in capsys.readouterr().err


def test_an_unknown_pattern_is_reported(capsys):
    assert main(["no_such_pattern"]) == 1
    assert "not found" in capsys.readouterr().err


def test_a_pattern_that_does_not_fit_is_reported(capsys):
    exit_code = main(["glider_gun", "--rows", "5", "--columns", "5", "--generations", "1"])

    assert exit_code == 1
    assert "does not fit" in capsys.readouterr().err


@pytest.mark.parametrize("arguments", [
    ["glider", "--rows", "0"],
    ["glider", "--columns", "-3"],
    ["glider", "--generations", "many"],
    ["glider", "--lifetime", "-1"],
])
def test_invalid_arguments_are_usage_errors(arguments):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(arguments)
    assert excinfo.value.code == 2


def test_defaults():
    args = build_parser().parse_args(["glider"])
    assert (args.rows, args.columns) == (30, 60)
    assert args.generations == 1000
    assert args.lifetime == 1.0
    assert args.position is None


def test_the_game_can_be_saved_as_a_gif(tmp_path, capsys):
    gif_path = tmp_path / "glider.gif"

    exit_code = main(["glider", "--rows", "8", "--columns", "8", "--generations", "3",
                      "--lifetime", "0.2", "--gif", str(gif_path)])

    assert exit_code == 0
    assert gif_path.exists()
    assert CLEAR_SCREEN not in capsys.readouterr().out


def test_logs_can_be_written_to_a_file(tmp_path, no_sleep, capsys):
    log_file = tmp_path / "game.log"

    main(["block", "--rows", "4", "--columns", "4", "--generations", "1", "--lifetime", "0",
          "--verbose", "--log-file", str(log_file)])

    assert "Playing 1 generations" in log_file.read_text(encoding='utf-8')
