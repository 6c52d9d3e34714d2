"""Depth legend - Pure functions.

The legend is built from DEPTH_BUCKETS alone and never looks at fetched
data, so it always matches the marker colors.
"""

from dataclasses import dataclass

from src.core.classification import DEPTH_BUCKETS


@dataclass(frozen=True)
class LegendEntry:
    """One row of the legend.

    Attributes:
        lower: Lower bound of the depth bucket (km)
        color: Hex color of the bucket
        label: Display label (e.g., "10–30" or "90+")
    """
    lower: float
    color: str
    label: str


@dataclass(frozen=True)
class Legend:
    """Static key explaining marker fill colors."""
    entries: tuple[LegendEntry, ...]
    title: str = "Depth (km)"
    position: str = "bottomright"

    def __len__(self) -> int:
        return len(self.entries)


def build_legend(buckets: tuple[tuple[float, str], ...] = DEPTH_BUCKETS) -> Legend:
    """Build the depth legend.

    Pure function. Each label spans from a bucket's lower bound to the next
    bucket's lower bound; the last bucket is open-ended.

    Args:
        buckets: Ordered (lower_bound, color) pairs

    Returns:
        Legend with one entry per bucket
    """
    entries = []
    for i, (lower, color) in enumerate(buckets):
        if i + 1 < len(buckets):
            label = f"{lower}–{buckets[i + 1][0]}"
        else:
            label = f"{lower}+"
        entries.append(LegendEntry(lower=lower, color=color, label=label))

    return Legend(entries=tuple(entries))
