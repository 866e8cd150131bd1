"""Tests for utility helpers and the command line."""
import json

import pytest

from maketen.cli import main
from maketen.models.board import Board, InvalidBoardError
from maketen.utils.helpers import (
    board_from_json,
    extract_digit_statistics,
    format_board_for_display,
    validate_board_json,
)


class TestValidateBoardJson:
    """Test cases for validate_board_json."""

    def test_valid(self):
        ok, error = validate_board_json({"width": 2, "height": 1, "tiles": [1, 9]})
        assert ok
        assert error is None

    def test_missing_field(self):
        ok, error = validate_board_json({"width": 2, "tiles": [1, 9]})
        assert not ok
        assert "height" in error

    def test_wrong_length(self):
        ok, error = validate_board_json({"width": 2, "height": 2, "tiles": [1, 9]})
        assert not ok

    def test_out_of_range(self):
        ok, error = validate_board_json({"width": 2, "height": 1, "tiles": [1, 10]})
        assert not ok

    def test_null_tiles_allowed(self):
        ok, _ = validate_board_json({"width": 2, "height": 1, "tiles": [None, 9]})
        assert ok

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_boolean_dimension_rejected(self, field):
        """Test that true is not taken as a dimension of 1."""
        data = {"width": 2, "height": 1, "tiles": [1, 9]}
        data[field] = True
        ok, error = validate_board_json(data)
        assert not ok
        assert field in error


class TestBoardHelpers:
    """Test cases for board conversion and statistics."""

    def test_board_from_json_treats_null_as_empty(self):
        board = board_from_json({"width": 3, "height": 1, "tiles": [1, None, 9], "seed": "s"})
        assert board.tiles == (1, 0, 9)
        assert board.seed == "s"

    def test_board_from_json_rejects_bad_shape(self):
        with pytest.raises(InvalidBoardError):
            board_from_json({"width": 3, "height": 1, "tiles": [1, 9]})

    def test_statistics(self):
        board = Board.from_grid([[1, 9, 9], [5, 0, 2]])
        stats = extract_digit_statistics(board)
        assert stats["total_tiles"] == 5
        assert stats["sum"] == 26
        assert stats["classes"] == {"small": 2, "medium": 1, "large": 2}
        assert stats["large_adjacencies"] == 1

    def test_format(self):
        text = format_board_for_display(Board.from_grid([[1, 0], [9, 0]]))
        assert "2x2" in text
        assert "  1 ." in text


class TestCli:
    """Test cases for the command line."""

    def test_generate_json(self, capsys):
        assert main(["generate", "--level", "3", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["level"] == 3
        assert data["board"]["seed"] == "level_3"

    def test_generate_text(self, capsys):
        assert main(["generate", "--level", "1"]) == 0
        assert "Seed: level_1" in capsys.readouterr().out

    def test_sweep(self, capsys):
        assert main(["sweep", "--from", "1", "--to", "3"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 4

    def test_check_solvable_file(self, tmp_path, capsys):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"width": 2, "height": 1, "tiles": [1, 9]}))
        assert main(["check", str(path)]) == 0
        assert "Solvable" in capsys.readouterr().out

    def test_check_stuck_file(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"width": 2, "height": 2, "tiles": [2, 2, 2, 2]}))
        assert main(["check", str(path)]) == 2

    def test_check_missing_file(self, tmp_path):
        """Test that an unreadable file is reported with exit code 1."""
        assert main(["check", str(tmp_path / "missing.json")]) == 1

    def test_check_malformed_json(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text("{not json")
        assert main(["check", str(path)]) == 1

    def test_check_non_object_json(self, tmp_path, capsys):
        path = tmp_path / "board.json"
        path.write_text(json.dumps([1, 9]))
        assert main(["check", str(path)]) == 1
        assert "Invalid board" in capsys.readouterr().out
