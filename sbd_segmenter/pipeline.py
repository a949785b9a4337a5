"""Batch segmentation pipeline: JSONL records in, CSV segments out."""

import json
import logging
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from functools import lru_cache
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .engines import RuleSegmenter
from .models import DocumentMetadata, Segment, SegmentationResult

logger = logging.getLogger(__name__)

FULL_FILE_NAME = "All_Segments"

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub("", text)


def _sanitize_frame(df: pd.DataFrame) -> pd.DataFrame:
    for col in df.select_dtypes(include=["object"]).columns:
        df[col] = df[col].apply(lambda x: sanitize_text(x) if isinstance(x, str) else x)
    return df


@lru_cache(maxsize=64)
def _get_segmenter(
    language: str, doc_type: Optional[str], clean: bool, check_reserved: bool
) -> RuleSegmenter:
    """Return a segmenter per settings, reused within one process."""
    return RuleSegmenter(
        language=language, doc_type=doc_type, clean=clean, check_reserved=check_reserved
    )


def segment_record(
    line_num: int, record: dict, seg_config: dict
) -> Optional[SegmentationResult]:
    """Segment one JSONL record.

    The record's own "language" and "doc_type" override the configured ones.

    Args:
        line_num: 1-based line number of the record in the input file
        record: Parsed JSON object
        seg_config: Dumped SegmentationConfig

    Returns:
        SegmentationResult, or None when the record has no text

    Raises:
        ReservedCharacterError: If the text contains a placeholder character
    """
    text_content = record.get("text") or record.get("content") or ""
    if not isinstance(text_content, str) or not text_content.strip():
        return None

    language = str(record.get("language") or seg_config.get("language", "en")).lower()
    doc_type = record.get("doc_type", seg_config.get("doc_type"))
    metadata = DocumentMetadata(
        file_id=str(record.get("file_id", "Unknown_Source")),
        line_number=line_num,
        language=language,
        doc_type=doc_type,
    )

    segmenter = _get_segmenter(
        metadata.language,
        metadata.doc_type,
        seg_config.get("clean", True),
        seg_config.get("check_reserved", True),
    )
    return build_result(segmenter, text_content, metadata)


def build_result(
    segmenter: RuleSegmenter, text: str, metadata: DocumentMetadata
) -> SegmentationResult:
    """Segment text and attach provenance to every sentence.

    Args:
        segmenter: Segmenter to use
        text: Input text content
        metadata: Document metadata

    Returns:
        SegmentationResult with 1-based sentence order
    """
    segments = []
    for idx, (sentence, start, end) in enumerate(segmenter.segment_with_indices(text), 1):
        segments.append(
            Segment(
                text=sentence,
                length=len(sentence),
                file_id=metadata.file_id,
                language=metadata.language,
                source_line_number=metadata.line_number,
                sentence_order=idx,
                start_index=start,
                end_index=end,
            )
        )
    return SegmentationResult(segments=segments, metadata=metadata)


def _process_record_worker(args: tuple) -> tuple[int, list[dict]] | None:
    """Segment one record in either mode. Must be module-level for pickling.

    Args:
        args: (line_num, record, seg_config_dict)

    Returns:
        (line_num, list of row dicts) or None to skip
    """
    line_num, record, seg_config = args
    result = segment_record(line_num, record, seg_config)
    if result is None or not result.segments:
        return None
    return (line_num, result.to_rows())


class SegmentationPipeline:
    """Pipeline for segmenting JSONL text records into sentences."""

    def __init__(self, config: Config):
        """Initialize segmentation pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config

    def _setup_output_dirs(self) -> tuple[Path, Path]:
        """Create output directories based on configuration.

        Returns:
            Tuple of (full_files_dir, single_lines_dir)
        """
        full_dir = self.config.output.output_dir / "Full_Files"
        single_dir = self.config.output.output_dir / "Single_Lines"

        if self.config.output.save_full_files:
            full_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_single_lines:
            single_dir.mkdir(parents=True, exist_ok=True)

        return full_dir, single_dir

    def _read_records(self, input_path: Path) -> list[tuple[int, dict]]:
        """Parse the JSONL input, skipping blank and malformed lines."""
        records = []
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping invalid JSON at line {line_num}")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object record at line {line_num}")
                    continue
                records.append((line_num, record))
        return records

    def _process_sequential(self, records: list[tuple[int, dict]]) -> dict[int, list[dict]]:
        seg_config = self.config.segmentation.model_dump()
        results_by_line = {}
        for line_num, record in tqdm(records, desc="Segmenting"):
            try:
                result = _process_record_worker((line_num, record, seg_config))
            except Exception as e:
                logger.warning(f"Skipping line {line_num}: {e}")
                continue
            if result is not None:
                _, rows = result
                results_by_line[line_num] = rows
        return results_by_line

    def _process_parallel(self, records: list[tuple[int, dict]]) -> dict[int, list[dict]]:
        workers = self.config.segmentation.workers
        seg_config = self.config.segmentation.model_dump()
        results_by_line = {}

        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_process_record_worker, (line_num, record, seg_config)): line_num
                for line_num, record in records
            }
            for future in tqdm(
                as_completed(futures), total=len(futures), desc=f"Segmenting ({workers} workers)"
            ):
                line_num = futures[future]
                try:
                    result = future.result()
                except Exception as e:
                    logger.warning(f"Skipping line {line_num}: {e}")
                    continue
                if result is not None:
                    _, rows = result
                    results_by_line[line_num] = rows
        return results_by_line

    def _save_single_lines(self, single_dir: Path, results_by_line: dict[int, list[dict]]) -> None:
        for line_num in sorted(results_by_line):
            df = _sanitize_frame(pd.DataFrame(results_by_line[line_num]))
            df.to_csv(single_dir / f"Line_{line_num}.csv", index=False)

    def _save_full_file(self, full_dir: Path, results_by_line: dict[int, list[dict]]) -> None:
        rows = [row for line_num in sorted(results_by_line) for row in results_by_line[line_num]]
        if not rows:
            logger.info("No segments to save")
            return
        df = _sanitize_frame(pd.DataFrame(rows))
        save_path = full_dir / f"{FULL_FILE_NAME}.csv"
        df.to_csv(save_path, index=False)
        logger.info(f"Saved {len(rows)} segments to {save_path}")

    def process_file(self, input_path: Path) -> int:
        """Process a JSONL file and generate segmented output.

        Args:
            input_path: Path to input JSONL file

        Returns:
            Number of records that produced segments
        """
        full_dir, single_dir = self._setup_output_dirs()
        logger.info(f"Reading from: {input_path}")
        records = self._read_records(input_path)

        if self.config.segmentation.workers <= 1:
            results_by_line = self._process_sequential(records)
        else:
            results_by_line = self._process_parallel(records)

        if self.config.output.save_single_lines:
            self._save_single_lines(single_dir, results_by_line)
            logger.info(f"Individual line files saved in: {single_dir}")
        if self.config.output.save_full_files:
            self._save_full_file(full_dir, results_by_line)

        return len(results_by_line)

    def run(self) -> int:
        """Run the segmentation pipeline.

        Returns:
            Number of records processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
