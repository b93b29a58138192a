"""Tests for the significant PR timeline."""

from lift_progress.analysis.pr_timeline import build_pr_timeline
from lift_progress.models import ExercisePRs, PRGroup, PRMark


def group(exercise, weight, reps, day, body_part="Chest"):
    return PRGroup(
        exercise=exercise,
        equipment="Barbell",
        body_part=body_part,
        prs=ExercisePRs(max_weight=PRMark(weight=weight, reps=reps, date=day, location="Home Gym")),
    )


class TestBuildPRTimeline:
    """Tests for build_pr_timeline."""

    def test_filters_low_rep_prs(self):
        """Test that only max-weight PRs of five reps or more appear."""
        groups = [
            group("Bench Press", 225, 5, "2025-02-01"),
            group("Squat", 315, 3, "2025-02-10"),
        ]

        timeline = build_pr_timeline(groups)

        assert [item.exercise for item in timeline] == ["Bench Press"]
        assert all(item.reps >= 5 for item in timeline)

    def test_sorted_newest_first(self):
        """Test descending date order."""
        groups = [
            group("A", 100, 5, "2025-01-01"),
            group("B", 100, 5, "2025-03-01"),
            group("C", 100, 5, "2025-02-01"),
        ]

        timeline = build_pr_timeline(groups)

        assert [item.date for item in timeline] == ["2025-03-01", "2025-02-01", "2025-01-01"]

    def test_limit(self):
        """Test truncation to the limit."""
        groups = [group(f"Lift {i}", 100, 5, f"2025-01-{i + 10}") for i in range(15)]

        assert len(build_pr_timeline(groups)) == 10
        assert len(build_pr_timeline(groups, limit=3)) == 3

    def test_group_without_max_weight(self):
        """Test that groups without a max-weight mark are skipped."""
        groups = [PRGroup(exercise="Curl", equipment="Dumbbell", prs=ExercisePRs())]

        assert build_pr_timeline(groups) == []

    def test_missing_body_part_is_other(self):
        """Test the body part default."""
        groups = [group("Curl", 40, 10, "2025-01-01", body_part=None)]

        assert build_pr_timeline(groups)[0].body_part == "Other"

    def test_item_fields(self):
        """Test the fields copied from the PR mark."""
        item = build_pr_timeline([group("Bench Press", 225, 5, "2025-02-01")])[0]

        assert item.equipment == "Barbell"
        assert item.weight == 225
        assert item.location == "Home Gym"
