"""
WireData - Pure Python data model for wire segments.

A wire segment is a zero-resistance conductor between two grid
positions. The builder only ever places segments between neighbouring
grid points; longer runs are chains of segments.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WireData:
    """
    Pure Python data class representing one wire segment.

    Endpoints are (row, col) grid coordinates.
    """

    start: tuple[int, int]
    end: tuple[int, int]
    wire_id: Optional[str] = None

    def get_endpoints(self) -> list[tuple[int, int]]:
        """Return both endpoints as (row, col) tuples."""
        return [self.start, self.end]

    def touches(self, position: tuple[int, int]) -> bool:
        """Check if either endpoint lies on the given grid position."""
        return self.start == position or self.end == position

    def is_adjacent(self) -> bool:
        """Check that the endpoints are exactly one grid step apart."""
        d_row = abs(self.start[0] - self.end[0])
        d_col = abs(self.start[1] - self.end[1])
        return d_row + d_col == 1

    def to_dict(self) -> dict:
        """Serialize wire to dictionary (circuit JSON format)."""
        data = {
            "r1": self.start[0],
            "c1": self.start[1],
            "r2": self.end[0],
            "c2": self.end[1],
        }
        if self.wire_id is not None:
            data["id"] = self.wire_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WireData":
        """Deserialize wire from dictionary."""
        wire_id = data.get("id")
        return cls(
            start=(int(data["r1"]), int(data["c1"])),
            end=(int(data["r2"]), int(data["c2"])),
            wire_id=str(wire_id) if wire_id is not None else None,
        )

    def __repr__(self) -> str:
        return f"WireData({self.start} -> {self.end})"
