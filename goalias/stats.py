"""Cumulative statistics for alias allocation."""

from dataclasses import dataclass
from typing import List


@dataclass
class AliasStats:
    """Holds counts of how each alias was decided."""

    # New aliases committed
    registered: int = 0
    # register() calls answered from an earlier registration
    reused: int = 0
    # Committed at a level above 1 (more than the last segment)
    escalated: int = 0
    # Needed the filler suffix loop
    suffixed: int = 0
    # Committed the hinted package name
    hinted: int = 0
    # Calls for the file's own package
    local_skipped: int = 0

    def merge(self, other: "AliasStats") -> None:
        """Add all counters from *other* into self."""
        self.registered += other.registered
        self.reused += other.reused
        self.escalated += other.escalated
        self.suffixed += other.suffixed
        self.hinted += other.hinted
        self.local_skipped += other.local_skipped

    @property
    def total_calls(self) -> int:
        return self.registered + self.reused + self.local_skipped

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable summary."""
        lines = ["--- goalias summary ---"]
        lines.append("aliases:")
        lines.append(f"  registered:    {self.registered}")
        lines.append(f"  hinted:        {self.hinted}")
        lines.append(f"  escalated:     {self.escalated}")
        lines.append(f"  suffixed:      {self.suffixed}")
        lines.append("calls:")
        lines.append(f"  reused:        {self.reused}")
        lines.append(f"  local skipped: {self.local_skipped}")
        lines.append(f"  total:         {self.total_calls}")
        return lines
