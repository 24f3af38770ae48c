#!/usr/bin/env python3
"""
End-to-end tests for run.py against the sample golden checkpoint.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).parent.parent


def _import_run():
    spec = importlib.util.spec_from_file_location("run", ROOT / "run.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


run = _import_run()

GOLDEN_DIR = ROOT / "goldens" / "sample"
SAMPLE_PATH = GOLDEN_DIR / "sample_input.txt"
SAMPLE = SAMPLE_PATH.read_text().strip()
EXPECTED = json.loads((GOLDEN_DIR / "sample_expected.json").read_text())


def test_process_part_1():
    assert run.process_part_1(SAMPLE) == EXPECTED["part1"]


def test_process_part_2():
    assert run.process_part_2(SAMPLE) == EXPECTED["part2"]


def test_part_2_orientation_independent():
    assert run.process_part_2(SAMPLE, flip=True) == run.process_part_2(SAMPLE, flip=False)


def test_process_is_idempotent():
    assert run.process_part_1(SAMPLE) == run.process_part_1(SAMPLE)
    assert run.process_part_2(SAMPLE) == run.process_part_2(SAMPLE)


@pytest.mark.parametrize("text", ["", "12\n345", "1a2"])
def test_malformed_input_fails(text):
    with pytest.raises(ValueError):
        run.process_part_1(text)
    with pytest.raises(ValueError):
        run.process_part_2(text)


def test_read_input_strips_blank_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n\n" + SAMPLE + "\n\n")
    assert run.read_input(str(path)) == SAMPLE


def test_read_input_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        run.read_input(str(tmp_path / "nope.txt"))


def test_read_input_empty(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n\n")
    with pytest.raises(ValueError):
        run.read_input(str(path))


def test_run_file_parts():
    assert run.run_file(str(SAMPLE_PATH)) == {"part1": 21, "part2": 8}
    assert run.run_file(str(SAMPLE_PATH), part="1") == {"part1": 21}
    assert run.run_file(str(SAMPLE_PATH), part="2", flip=False) == {"part2": 8}


def test_main_prints_results(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run.py", "--input", str(SAMPLE_PATH)])
    run.main()
    out = capsys.readouterr().out
    assert out.splitlines() == ["Part1: 21", "Part2: 8"]


def test_main_missing_file_raises(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "argv", ["run.py", "--input", str(tmp_path / "missing.txt")])
    with pytest.raises(FileNotFoundError):
        run.main()


def test_trace_help_names_logging_level(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run.py", "--help"])
    with pytest.raises(SystemExit):
        run.main()
    assert "INFO level" in capsys.readouterr().out
