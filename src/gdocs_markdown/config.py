# src/gdocs_markdown/config.py

from dataclasses import dataclass
from typing import Literal, get_args

OutputFormat = Literal["json", "compact"]


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for the Markdown converter.

    Immutable. Explicit. No defaults read from the environment.
    """

    heading_offset: int = 0  # Added to every heading level, capped at 6
    output_format: OutputFormat = "compact"

    def __post_init__(self) -> None:
        if self.heading_offset < 0:
            raise ValueError("heading_offset must be >= 0")
        if self.output_format not in get_args(OutputFormat):
            raise ValueError(f"Unknown output format: {self.output_format}")
