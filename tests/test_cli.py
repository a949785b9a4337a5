"""Tests for the command-line interface."""

import io
import json

from sbd_segmenter.cli import build_config, main, parse_args


class TestParseArgs:
    """Tests for argument parsing."""

    def test_segment_is_default_command(self):
        args = parse_args(["--input", "data/input.jsonl", "--language", "de"])
        assert args.command == "segment"
        assert args.language == "de"

    def test_split_command(self):
        args = parse_args(["split", "--text", "Hi.", "--json"])
        assert args.command == "split"
        assert args.text == "Hi."
        assert args.json is True

    def test_build_config_overrides(self, tmp_path):
        args = parse_args(
            ["--input", str(tmp_path / "in.jsonl"), "--language", "EL", "--no-clean", "--workers", "3"]
        )
        config = build_config(args)
        assert config.input_file == tmp_path / "in.jsonl"
        assert config.segmentation.language == "el"
        assert config.segmentation.clean is False
        assert config.segmentation.workers == 3


class TestSplit:
    """Tests for the split command."""

    def test_prints_one_sentence_per_line(self, capsys):
        assert main(["split", "--text", "Hello world. My name is Jonas."]) == 0
        assert capsys.readouterr().out == "Hello world.\nMy name is Jonas.\n"

    def test_json_output(self, capsys):
        assert main(["split", "--language", "el", "--json", "--text", "Τι κάνεις; Καλά είμαι."]) == 0
        assert json.loads(capsys.readouterr().out) == ["Τι κάνεις;", "Καλά είμαι."]

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("Dr. Smith went home."))
        assert main(["split"]) == 0
        assert capsys.readouterr().out == "Dr. Smith went home.\n"

    def test_reserved_character(self, capsys):
        assert main(["split", "--text", "Bad ∯ text."]) == 1
        assert "Error" in capsys.readouterr().err


class TestSegmentCommand:
    """Tests for the segment command."""

    def test_runs_pipeline(self, tmp_path):
        input_path = tmp_path / "input.jsonl"
        input_path.write_text(json.dumps({"text": "One. Two."}) + "\n", encoding="utf-8")
        output_dir = tmp_path / "out"

        assert main(["--input", str(input_path), "--output", str(output_dir)]) == 0
        assert (output_dir / "Full_Files" / "All_Segments.csv").exists()
        assert not (output_dir / "Single_Lines").exists()

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(["segment", "--input", str(tmp_path / "missing.jsonl")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_input_required(self, capsys):
        assert main(["segment"]) == 1
        assert "Input file is required" in capsys.readouterr().err

    def test_invalid_language(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "x.jsonl"), "--language", "english"]) == 1
        assert "Error" in capsys.readouterr().err
