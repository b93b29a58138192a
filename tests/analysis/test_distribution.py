"""Tests for body-part volume distribution."""

from datetime import date

from lift_progress.analysis.distribution import PALETTE, build_distribution, round_half_up
from lift_progress.models import ProgressEntry, SessionEntry


TODAY = date(2025, 3, 15)


def entry(exercise, body_part, volumes):
    sessions = [
        SessionEntry(date=day, max_weight=100, max_reps=5, total_volume=volume)
        for day, volume in volumes
    ]
    return ProgressEntry(exercise=exercise, equipment="Barbell", body_part=body_part, sessions=sessions)


class TestBuildDistribution:
    """Tests for build_distribution."""

    def test_sums_by_body_part_largest_first(self):
        """Test that series sharing a body part are pooled and sorted."""
        progress = {
            "Bench Press|Barbell": entry("Bench Press", "Chest", [("2025-03-01", 3000)]),
            "Fly|Cable": entry("Fly", "Chest", [("2025-03-02", 1000)]),
            "Row|Barbell": entry("Row", "Back", [("2025-03-03", 6000)]),
        }

        distribution = build_distribution(progress, "ALL", TODAY)

        assert distribution.labels == ["Back", "Chest"]
        assert distribution.data == [6000, 4000]
        assert distribution.total == 10000
        assert distribution.percentages == [60, 40]
        assert distribution.colors == [PALETTE[0], PALETTE[1]]

    def test_window_excludes_older_sessions(self):
        """Test that sessions before the cutoff are ignored."""
        progress = {
            "Squat|Barbell": entry("Squat", "Quads", [("2024-11-01", 9000), ("2025-01-10", 2000)]),
        }

        distribution = build_distribution(progress, "3M", TODAY)

        assert distribution.data == [2000]
        assert distribution.total == 2000

    def test_percentages_round_half_up(self):
        """Test that a half percent rounds up."""
        progress = {
            "A|x": entry("A", "Back", [("2025-03-01", 7)]),
            "B|x": entry("B", "Chest", [("2025-03-01", 1)]),
        }

        distribution = build_distribution(progress, "ALL", TODAY)

        assert distribution.percentages == [88, 13]

    def test_colors_cycle(self):
        """Test that colors wrap around the eight-entry palette."""
        progress = {
            f"Lift {i}|x": entry(f"Lift {i}", f"Part {i}", [("2025-03-01", 1000 - i)])
            for i in range(10)
        }

        distribution = build_distribution(progress, "ALL", TODAY)

        assert [s.color_index for s in distribution.slices] == [0, 1, 2, 3, 4, 5, 6, 7, 0, 1]
        assert distribution.colors[8] == PALETTE[0]

    def test_empty(self):
        """Test an empty progress map."""
        distribution = build_distribution({}, "3M", TODAY)

        assert distribution.labels == []
        assert distribution.total == 0

    def test_round_half_up(self):
        """Test the rounding helper directly."""
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
