"""Tests for the sortviz command line."""

import argparse
import json

import pytest

from sortviz.cli import _parse_values, build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.algorithm == "bubble"
        assert args.data == "random"
        assert args.size == 20
        assert args.speed == 3
        assert args.language == "python"

    def test_values_parsed_as_integers(self):
        args = build_parser().parse_args(["--values", "5,3,8,1"])
        assert args.values == [5, 3, 8, 1]

    def test_bad_values_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--values", "5,x"])

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--algorithm", "bogo"])


class TestMain:
    def test_instant_replay_prints_steps_and_stats(self, capsys):
        main(["--values", "5,3,8,1", "--instant"])
        out = capsys.readouterr().out

        assert "Bubble Sort" in out
        assert "Initial state" in out
        assert "Sorting complete!" in out
        assert "Statistics" in out

    def test_with_code_shows_listing(self, capsys):
        main(["-a", "insertion", "--values", "2,1", "--instant", "--with-code", "-l", "java"])
        out = capsys.readouterr().out
        assert "public static void insertionSort" in out
        assert ">>" in out

    def test_stats_only(self, capsys):
        main(["--values", "5,3,8,1", "--stats-only"])
        out = capsys.readouterr().out

        assert "Initial state" not in out
        assert "Comparisons" in out
        assert "6" in out

    def test_json(self, capsys):
        main(["-a", "quick", "--values", "3,1,2", "--json"])
        data = json.loads(capsys.readouterr().out)

        assert data["algorithm"] == "quick"
        assert data["stats"] == {"comparisons": 2, "swaps": 2, "steps": len(data["steps"])}

    def test_code(self, capsys):
        main(["--code", "-a", "quick", "-l", "cpp"])
        out = capsys.readouterr().out

        assert "Quick Sort (cpp)" in out
        assert "worst O(n²)" in out
        assert "int partition(int arr[], int low, int high) {" in out

    def test_generated_input(self, capsys):
        main(["-a", "merge", "-d", "reversed", "-n", "6", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["steps"][0]["values"] == [100, 80, 60, 41, 21, 1]

    def test_negative_size_rejected(self):
        with pytest.raises(SystemExit):
            main(["--size", "-1"])

    def test_real_time_playback(self, capsys):
        main(["--values", "2,1", "--speed", "5"])
        assert "Sorting complete!" in capsys.readouterr().out

    def test_bad_values_error_does_not_chain(self):
        with pytest.raises(argparse.ArgumentTypeError) as excinfo:
            _parse_values("1,two")

        assert excinfo.value.__cause__ is None
        assert excinfo.value.__suppress_context__
