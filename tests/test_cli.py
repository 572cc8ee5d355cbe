"""Test the command line entry points."""

import json
import sys

import pytest

from src import main as main_module
from src import prepare
from src.game import Difficulty, PuzzleConfig


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("difficulty: hard\nseed: 7\ncount: 2\n")
        config = main_module.load_config(str(path))
        assert config.difficulty == Difficulty.HARD
        assert config.seed == 7
        assert config.count == 2
        assert config.dictionary is None

    def test_empty_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert main_module.load_config(str(path)) == PuzzleConfig()

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            main_module.load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_count(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("count: 0\n")
        with pytest.raises(ValueError):
            main_module.load_config(str(path))


class TestMain:
    """Test the puzzle generation CLI."""

    def test_evaluate_arrangement(self, monkeypatch, tmp_path, capsys):
        words = tmp_path / "words.txt"
        words.write_text("rote\ntore\nrate\nrue\n")
        monkeypatch.setattr(sys, "argv", [
            "main", "--dictionary", str(words), "--arrangement", "R UETOAD FIKTYNMDLCWS",
        ])
        assert main_module.main() == 0
        out = capsys.readouterr().out
        assert "center: R" in out
        assert "3 words" in out
        assert "RATE" not in out

    def test_generate_and_save(self, monkeypatch, tmp_path, capsys):
        output = tmp_path / "results" / "puzzles.json"
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", [
            "main", "--seed", "5", "--count", "2", "--difficulty", "hard", "--output", str(output),
        ])
        assert main_module.main() == 0

        data = json.loads(output.read_text())
        assert data["config"]["difficulty"] == Difficulty.HARD
        assert data["dictionary"]["source"] == "emergency"
        assert len(data["puzzles"]) == 2
        assert "=== Puzzle 2 ===" in capsys.readouterr().out

    def test_bad_arrangement(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", ["main", "--arrangement", "R UETO"])
        with pytest.raises(SystemExit) as exc:
            main_module.main()
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err


class TestPrepare:
    """Test the word list preparation CLI."""

    def test_prepare(self, monkeypatch, tmp_path, capsys):
        source = tmp_path / "raw.txt"
        source.write_text("rate\nat\nTEAR\nrate\nextraordinary\n")
        monkeypatch.setattr(sys, "argv", ["prepare", str(source)])
        assert prepare.main() == 0
        assert json.loads((tmp_path / "raw.json").read_text()) == ["RATE", "TEAR"]
        assert "4 letters: 2 words" in capsys.readouterr().out

    def test_refuses_to_overwrite_input(self, monkeypatch, tmp_path):
        source = tmp_path / "words.json"
        source.write_text(json.dumps(["rate"]))
        monkeypatch.setattr(sys, "argv", ["prepare", str(source)])
        with pytest.raises(SystemExit):
            prepare.main()

    def test_missing_input(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "argv", ["prepare", str(tmp_path / "nope.txt")])
        with pytest.raises(SystemExit):
            prepare.main()

    def test_length_distribution(self):
        assert prepare.length_distribution(["RATE", "TEAR", "ART"]) == {
            3: 1, 4: 2, 5: 0, 6: 0, 7: 0, 8: 0, 9: 0,
        }
