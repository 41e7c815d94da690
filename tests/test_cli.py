import io
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pathclean.cli import main
from pathclean.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


def test_clean_prints_one_line_per_argument(capsys):
    assert main(["clean", "a//b", "/../x", "", "../test/.."]) == 0
    assert capsys.readouterr().out == "a/b\n/x\n.\n..\n"


def test_check_passes_for_clean_paths(capsys):
    assert main(["check", "a/b", "/", ".."]) == 0
    assert "unclean" not in capsys.readouterr().out


def test_check_fails_for_unclean_paths(capsys):
    assert main(["check", "a/b", "a//b/"]) == 1
    out = capsys.readouterr().out
    assert "unclean" in out
    assert "'a/b'" in out


def test_check_show_clean_from_config(tmp_path, capsys):
    (tmp_path / "pathclean.yaml").write_text("check:\n  show_clean: true\n", encoding="utf-8")
    assert main(["check", "tidy/path"]) == 0
    out = capsys.readouterr().out
    assert "'tidy/path'" in out
    assert "clean" in out


def test_batch_from_file(tmp_path, capsys):
    source = tmp_path / "paths.txt"
    source.write_text("a//b\n\n/../c\r\n x/./y \n", encoding="utf-8")
    assert main(["batch", str(source)]) == 0
    assert capsys.readouterr().out == "a/b\n/c\n x/y \n"


def test_batch_keeps_blank_lines_when_configured(tmp_path, capsys):
    config = tmp_path / "custom.yaml"
    config.write_text("batch:\n  skip_blank: false\n", encoding="utf-8")
    source = tmp_path / "paths.txt"
    source.write_text("a/..\n\nb/\n", encoding="utf-8")
    assert main(["--config", str(config), "batch", str(source)]) == 0
    assert capsys.readouterr().out == ".\n.\nb\n"


def test_batch_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"x/./y\n../z/..\n")))
    assert main(["batch"]) == 0
    assert capsys.readouterr().out == "x/y\n..\n"


def test_batch_missing_file(tmp_path, capsys):
    assert main(["batch", str(tmp_path / "absent.txt")]) == 1
    assert "absent.txt" in capsys.readouterr().err


def test_batch_splits_only_on_newline(tmp_path, capsys):
    source = tmp_path / "paths.txt"
    source.write_bytes("dir\u2028name/x/..\nform\x0cfeed/./y\r\nlast\x85//z".encode("utf-8"))
    assert main(["batch", str(source)]) == 0
    assert capsys.readouterr().out == "dir\u2028name\nform\x0cfeed/y\nlast\x85/z\n"


def test_batch_passes_non_utf8_bytes_through(tmp_path, capsysbinary):
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"caf\xe9/./x\n\xff/../y\n")
    assert main(["batch", str(source)]) == 0
    assert capsysbinary.readouterr().out == b"caf\xe9/x\ny\n"


def test_batch_non_utf8_stdin(monkeypatch, capsysbinary):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xe9t\xe9//a\n")))
    assert main(["batch", "-"]) == 0
    assert capsysbinary.readouterr().out == b"\xe9t\xe9/a\n"


def test_batch_directory_argument(tmp_path, capsys):
    assert main(["batch", str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert str(tmp_path) in captured.err
    assert "Traceback" not in captured.err


def test_config_error_exit_code(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.yaml"), "clean", "a"]) == 2
    err = capsys.readouterr().err
    assert "absent.yaml" in err
    assert "pathclean.sample.yaml" in err


def test_log_level_override(capsys):
    assert main(["--log-level", "debug", "clean", "a"]) == 0
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
    assert capsys.readouterr().out == "a\n"


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])
