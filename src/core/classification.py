"""Depth and magnitude classification - Pure functions.

This module maps the two numeric attributes of a seismic event onto the
two visual channels of its marker: depth onto a fill color bucket and
magnitude onto a radius. The depth bucket table lives here and only here;
both the marker styling and the legend read it.
"""

# Ordered (lower_bound, color) pairs. A depth strictly greater than a bound
# selects the next bucket up; the last bucket is unbounded.
DEPTH_BUCKETS: tuple[tuple[int, str], ...] = (
    (-10, "#98ee00"),
    (10, "#d4ee00"),
    (30, "#eecc00"),
    (50, "#ee9c00"),
    (70, "#ea822c"),
    (90, "#ea2c2c"),
)

# Radius multiplier applied to magnitude
RADIUS_SCALE = 4.75

# Radius used for magnitude exactly 0, where the formula would give 0
MIN_RADIUS = 1


def depth_rank(depth: float) -> int:
    """Get the index of the depth bucket a depth falls into.

    Pure function. Thresholds are checked from the deepest down with a
    strict greater-than, so a depth equal to a bound stays in the bucket
    below it.

    Args:
        depth: Depth in kilometers (positive downward)

    Returns:
        Bucket index, 0 (shallowest) to len(DEPTH_BUCKETS) - 1 (deepest)
    """
    # The lowest bound (-10) is only a legend label; anything not above 10
    # lands in bucket 0.
    for rank in range(len(DEPTH_BUCKETS) - 1, 0, -1):
        if depth > DEPTH_BUCKETS[rank][0]:
            return rank
    return 0


def color_for_depth(depth: float) -> str:
    """Get the marker fill color for an earthquake depth.

    Pure function.

    Args:
        depth: Depth in kilometers

    Returns:
        Hex color string (e.g., "#ea2c2c")
    """
    return DEPTH_BUCKETS[depth_rank(depth)][1]


def radius_for_magnitude(magnitude: float) -> float:
    """Get the marker radius for an earthquake magnitude.

    Pure function. Negative magnitudes are passed through the formula
    unchanged and give a negative radius.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Marker radius in pixels
    """
    if magnitude == 0:
        return MIN_RADIUS
    return magnitude * RADIUS_SCALE
