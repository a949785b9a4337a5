"""Command-line interface for the sentence segmenter."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import Config, SegmentationConfig
from .engines import ReservedCharacterError, RuleSegmenter
from .pipeline import SegmentationPipeline

COMMANDS = ("segment", "split")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="sbd-segmenter",
        description="Split text into sentences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  sbd-segmenter --config config.yaml

  # Direct arguments
  sbd-segmenter --input data/input.jsonl --output data/output --language de

  # Split a single text
  sbd-segmenter split --text "Hello world. My name is Jonas."
  echo "Τι κάνεις; Καλά είμαι." | sbd-segmenter split --language el --json
        """,
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Segment command (default)
    segment_parser = subparsers.add_parser("segment", help="Segment a JSONL file into CSV")
    setup_segment_parser(segment_parser)

    split_parser = subparsers.add_parser("split", help="Split one text and print sentences")
    setup_split_parser(split_parser)

    # If no command specified, treat as segment command
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in (*COMMANDS, "-h", "--help"):
        argv.insert(0, "segment")

    return parser.parse_args(argv)


def _add_segmenter_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        type=str,
        help="ISO 639-1 language code (default: en)",
    )
    parser.add_argument(
        "--doc-type",
        type=str,
        help="Document type hint, e.g. 'pdf' for hard-wrapped text",
    )
    parser.add_argument(
        "--no-clean",
        action="store_true",
        help="Skip text cleaning before segmentation",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )

    # Input/Output
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for segmented files",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )

    # Output options
    parser.add_argument(
        "--no-single-lines",
        action="store_true",
        help="Skip saving individual line files",
    )
    parser.add_argument(
        "--no-full-files",
        action="store_true",
        help="Skip saving combined file with all segments",
    )

    _add_segmenter_options(parser)


def setup_split_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for split command."""
    parser.add_argument(
        "--text",
        type=str,
        help="Text to split (read from stdin when omitted)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as a JSON array",
    )
    _add_segmenter_options(parser)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_dir = args.output

    # Segmentation config overrides, re-validated
    overrides = {}
    if getattr(args, "language", None):
        overrides["language"] = args.language
    if getattr(args, "doc_type", None):
        overrides["doc_type"] = args.doc_type
    if getattr(args, "no_clean", False):
        overrides["clean"] = False
    if getattr(args, "workers", None) is not None:
        overrides["workers"] = args.workers
    if overrides:
        config.segmentation = SegmentationConfig.model_validate(
            {**config.segmentation.model_dump(), **overrides}
        )

    # Output config overrides
    if getattr(args, "no_single_lines", False):
        config.output.save_single_lines = False
    if getattr(args, "no_full_files", False):
        config.output.save_full_files = False

    return config


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    try:
        config = build_config(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    # Run the pipeline
    try:
        pipeline = SegmentationPipeline(config)
        line_count = pipeline.run()
        print(f"\nProcessed {line_count} lines")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_split(args: argparse.Namespace) -> int:
    """Handle split command."""
    text = args.text if args.text is not None else sys.stdin.read()
    try:
        segmenter = RuleSegmenter(
            language=args.language or "en",
            doc_type=args.doc_type,
            clean=not args.no_clean,
        )
        sentences = segmenter.segment(text)
    except ReservedCharacterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(sentences, ensure_ascii=False))
    else:
        for sentence in sentences:
            print(sentence)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "split":
        return handle_split(args)
    return handle_segment(args)


if __name__ == "__main__":
    sys.exit(main())
