"""Data models for sentence segmentation."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Document:
    """Working text of one segmentation run."""

    text: str
    language: str = "en"
    doc_type: Optional[str] = None

    def with_text(self, text: str) -> "Document":
        """Return the same document with a new working text."""
        return replace(self, text=text)


@dataclass
class Segment:
    """A sentence with provenance metadata."""

    text: str
    length: int
    file_id: str
    language: str
    source_line_number: int
    sentence_order: int
    start_index: int
    end_index: int


@dataclass
class DocumentMetadata:
    """Metadata for a source record."""

    file_id: str
    line_number: int
    language: str = "en"
    doc_type: Optional[str] = None


@dataclass
class SegmentationResult:
    """Result of segmenting one record."""

    segments: list[Segment]
    metadata: DocumentMetadata

    def to_rows(self) -> list[dict]:
        """Convert segments to CSV rows."""
        return [
            {
                "Segmented_Text": segment.text,
                "Length": segment.length,
                "File_ID": segment.file_id,
                "Language": segment.language,
                "Source_Line_Number": segment.source_line_number,
                "Sentence_Order": segment.sentence_order,
                "Start_Index": segment.start_index,
                "End_Index": segment.end_index,
            }
            for segment in self.segments
        ]
