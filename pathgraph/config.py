"""Configuration for pathgraph graphs and loaders."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml


@dataclass(frozen=True)
class GraphConfig:
    """Limits and parsing options shared by a graph and its adapters.

    Attributes:
        capacity: Size of the vertex id domain. Valid ids are
            ``0 <= id < capacity``; distance and predecessor tables are
            allocated with exactly this many entries.
        row_delimiter: Separator between rows of a tabular source.
        field_delimiter: Separator between fields within a row.
    """

    # Distance and predecessor tables are sized to this
    capacity: int = 10

    row_delimiter: str = "\n"
    field_delimiter: str = ";"

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise ValueError(f"capacity must be an integer, got {self.capacity!r}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        if not self.row_delimiter or not self.field_delimiter:
            raise ValueError("Delimiters must be non-empty strings")
        if self.row_delimiter == self.field_delimiter:
            raise ValueError("Row and field delimiters must differ")

    def in_domain(self, vertex_id: int) -> bool:
        """Return True if ``vertex_id`` fits in the configured id domain."""
        return 0 <= vertex_id < self.capacity

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> GraphConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Keys are normalised to strings first, since YAML may produce
        non-string keys.
        """
        normalized = {str(key): value for key, value in data.items()}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**normalized)


def load_config(path: Union[str, Path]) -> GraphConfig:
    """Load a ``GraphConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises:
        ValueError: If the document is not a mapping or holds unknown keys.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return GraphConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a mapping")
    return GraphConfig.from_dict(data)


# Global default configuration instance
DEFAULT_CONFIG = GraphConfig()
