"""
Configuration management for the road map renderer.
"""

import json
from dataclasses import dataclass, asdict


@dataclass
class MapConfig:
    """Configuration for the character grid a road network is drawn on."""

    # Grid dimensions (cells)
    width: int = 31
    height: int = 11

    # Cell glyphs
    blank_glyph: str = " "
    intersection_glyph: str = "+"
    street_glyph: str = "*"

    # Border
    border_glyph: str = "="
    wall_glyph: str = "|"

    # One ruler digit every `ruler_interval` columns/rows
    ruler_interval: int = 10

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check dimensions and glyphs.

        Raises:
            ValueError: if a dimension or the ruler interval is not positive,
                or a glyph is not a single character
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.ruler_interval <= 0:
            raise ValueError(
                f"ruler_interval must be positive, got {self.ruler_interval}"
            )
        for field_name in (
            "blank_glyph",
            "intersection_glyph",
            "street_glyph",
            "border_glyph",
            "wall_glyph",
        ):
            glyph = getattr(self, field_name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"{field_name} must be a single character, got {glyph!r}")

    @classmethod
    def from_json(cls, filepath: str) -> "MapConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def to_json(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(asdict(self), f, indent=2)


DEFAULT_CONFIG = MapConfig()
