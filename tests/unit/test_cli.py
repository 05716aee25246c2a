import json
import runpy

import pytest

import pycircuitlessons.cli as cli


def test_missing_data_dir_exits_2(tmp_path, capsys):
    code = cli.main([str(tmp_path / "missing"), str(tmp_path / "out")])
    assert code == 2
    assert "Data directory not found" in capsys.readouterr().err


def test_batch_with_skipped_record_exits_1(tmp_path, shard_dir, capsys):
    code = cli.main([str(shard_dir), str(tmp_path / "out")])
    out = capsys.readouterr().out
    assert code == 1
    assert "Level 7: Resistors Protect LEDs (steps: 1, 2) ok" in out
    assert "Skipped:" in out
    assert "Lessons processed: 2" in out
    assert "Diagrams generated: 8" in out


def test_clean_batch_exits_0(tmp_path, lesson_record, capsys):
    data = tmp_path / "data"
    data.mkdir()
    (data / "levels-001.json").write_text(json.dumps([lesson_record]), encoding="utf-8")

    code = cli.main([str(data), str(tmp_path / "out"), "--verbose"])
    assert code == 0
    assert (tmp_path / "out" / "level-007" / "main-diagram.svg").exists()


def test_options_are_passed_through(tmp_path, shard_dir, capsys):
    code = cli.main(
        [str(shard_dir), str(tmp_path / "out"), "--max-shards", "1", "--lesson", "7", "--lesson", "99"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Lessons processed: 1" in out


def test_pattern_option(tmp_path, shard_dir, capsys):
    code = cli.main([str(shard_dir), str(tmp_path / "out"), "--pattern", "*.none"])
    assert code == 0
    assert "Lessons processed: 0" in capsys.readouterr().out


def test_parser_defaults():
    args = cli.build_parser().parse_args(["data", "out"])
    assert args.pattern == "levels-*.json"
    assert args.max_shards is None
    assert args.lessons is None
    assert not args.verbose


def test_module_entrypoint(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.argv", ["pycircuitlessons", str(tmp_path / "missing"), str(tmp_path)])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("pycircuitlessons", run_name="__main__")
    assert excinfo.value.code == 2
