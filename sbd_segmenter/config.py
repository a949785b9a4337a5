"""Configuration management for the segmentation pipeline."""

import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LANGUAGE_CODE = re.compile(r"^[a-z]{2,3}$")


class SegmentationConfig(BaseModel):
    """Configuration for the sentence segmenter."""

    language: str = Field(default="en", description="ISO 639-1 code of the input text")
    doc_type: Optional[str] = Field(
        default=None, description="Document type hint, e.g. 'pdf' for hard-wrapped text"
    )
    clean: bool = True
    check_reserved: bool = Field(
        default=True, description="Reject input containing placeholder characters"
    )
    workers: int = Field(default=1, ge=1)

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v):
        """Lower-case the language code and check its shape."""
        if v is None:
            return "en"
        v = str(v).strip().lower()
        if not LANGUAGE_CODE.match(v):
            raise ValueError(f"Invalid language code: {v!r}")
        return v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/segmented_output")
    save_single_lines: bool = False  # One CSV file per input record
    save_full_files: bool = True     # One CSV file with all segments combined


class Config(BaseModel):
    """Main configuration for the segmentation pipeline."""

    input_file: Optional[Path] = None
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
