"""Unit tests for the depth legend.

Pure functions - no mocks needed.
"""

from src.core.classification import DEPTH_BUCKETS, color_for_depth
from src.core.legend import Legend, LegendEntry, build_legend


class TestBuildLegend:
    """Tests for build_legend()."""

    def test_six_entries(self):
        """One entry per depth bucket."""
        legend = build_legend()

        assert isinstance(legend, Legend)
        assert len(legend) == 6

    def test_labels(self):
        """Labels span to the next bound; the last is open-ended."""
        labels = [e.label for e in build_legend().entries]

        assert labels == ["-10–10", "10–30", "30–50", "50–70", "70–90", "90+"]

    def test_last_label_has_no_upper_bound(self):
        """The deepest bucket ends with '+'."""
        last = build_legend().entries[-1]

        assert last.label.endswith("+")
        assert "–" not in last.label

    def test_upper_bound_matches_next_lower_bound(self):
        """Each bounded label's upper value is the next entry's lower bound."""
        entries = build_legend().entries
        for entry, following in zip(entries, entries[1:]):
            lower, upper = entry.label.split("–")
            assert lower == str(entry.lower)
            assert upper == str(following.lower)

    def test_uses_shared_bucket_table(self):
        """Entries mirror DEPTH_BUCKETS exactly."""
        entries = build_legend().entries
        assert [(e.lower, e.color) for e in entries] == list(DEPTH_BUCKETS)

    def test_colors_match_marker_colors(self):
        """A depth inside each labelled range gets the entry's color."""
        for entry in build_legend().entries:
            assert color_for_depth(entry.lower + 1) == entry.color

    def test_position_and_title(self):
        """Legend sits bottom right under a depth title."""
        legend = build_legend()
        assert legend.position == "bottomright"
        assert legend.title == "Depth (km)"

    def test_custom_buckets(self):
        """A custom table produces matching labels."""
        legend = build_legend(((0, "#fff"), (5, "#000")))
        assert legend.entries == (
            LegendEntry(lower=0, color="#fff", label="0–5"),
            LegendEntry(lower=5, color="#000", label="5+"),
        )
