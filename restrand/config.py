"""
Run configuration for restrand.

Settings can come from CLI options, a YAML file, or both (CLI options win).

Author: Kevin R. Roy
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .io.fasta import FASTA_WRAP_WIDTH
from .orientation import Orientation
from .table import DEFAULT_ID_COLUMN, DEFAULT_ORIENTATION_COLUMN, DUPLICATE_POLICIES


@dataclass
class ReorientConfig:
    """Settings shared by the FASTA and FASTQ re-orientation modes."""
    # Orientation every output read must end up in (FASTA mode)
    target_orientation: Orientation = Orientation.FORWARD

    # Appended to the header of flipped reads, e.g. '/rc'; empty = no suffix
    flipped_suffix: str = ""

    # Drop reads absent from the table instead of passing them through
    drop_missing: bool = False

    line_width: int = FASTA_WRAP_WIDTH

    # Orientation table layout
    id_column: str = DEFAULT_ID_COLUMN
    orientation_column: str = DEFAULT_ORIENTATION_COLUMN
    on_duplicate: str = 'error'  # 'error', 'last' or 'first'

    def __post_init__(self):
        self.target_orientation = Orientation.parse(self.target_orientation)

        if self.flipped_suffix is None:
            self.flipped_suffix = ""

        if not isinstance(self.line_width, int) or self.line_width <= 0:
            raise ValueError(f"line_width must be a positive integer, got {self.line_width!r}")

        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {', '.join(DUPLICATE_POLICIES)}, got '{self.on_duplicate}'"
            )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ReorientConfig':
        """Create from dictionary. Unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**d)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ReorientConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")

        return cls.from_dict(data)

    def with_overrides(self, **overrides) -> 'ReorientConfig':
        """Return a copy with every override that is not None applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
