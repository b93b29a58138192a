"""
Tests for progress aggregation.

Tests cover:
- Set summarisation (volume, best set, tie-breaks)
- Session creation rules
- Record filtering and ordering
- Equipment and body part resolution
"""

import pytest

from lift_progress.analysis.aggregation import aggregate, summarize_sets
from lift_progress.analysis.keys import KeyResolver
from lift_progress.models import CatalogExercise, LoggedSet, WorkoutRecord


def sets(*pairs):
    return [LoggedSet(reps=reps, weight=weight) for reps, weight in pairs]


class TestSummarizeSets:
    """Tests for summarize_sets."""

    def test_volume_counts_only_valid_sets(self):
        """Test that sets missing reps or weight add no volume."""
        max_weight, max_reps, total_volume, best_set = summarize_sets(
            sets((8, 185), (5, 205), (0, 225), (10, None))
        )

        assert total_volume == 8 * 185 + 5 * 205
        assert max_weight == 205
        assert max_reps == 5
        assert best_set.weight == 205
        assert best_set.reps == 5

    def test_first_set_at_max_weight_wins(self):
        """Test that a later set at the same weight does not replace the best set."""
        max_weight, max_reps, _, best_set = summarize_sets(sets((8, 200), (3, 200)))

        assert max_weight == 200
        assert max_reps == 8
        assert best_set.reps == 8

    def test_zero_weight_only(self):
        """Test that zero-weight sets produce no best set."""
        max_weight, max_reps, total_volume, best_set = summarize_sets(sets((8, 0)))

        assert max_weight == 0
        assert max_reps == 0
        assert total_volume == 0
        assert best_set is None


class TestAggregate:
    """Tests for aggregate."""

    def test_builds_series_per_exercise_and_equipment(self, history):
        """Test that each exercise + equipment pair gets one series."""
        progress = aggregate(history)

        assert set(progress) == {"Bench Press|Barbell", "Barbell Row|Barbell", "Squat|Barbell"}
        bench = progress["Bench Press|Barbell"]
        assert bench.exercise == "Bench Press"
        assert bench.equipment == "Barbell"
        assert [s.date for s in bench.sessions] == ["2024-12-20", "2025-01-10", "2025-03-01"]
        assert [s.max_weight for s in bench.sessions] == [195, 200, 205]

    def test_session_fields(self, make_record):
        """Test the session entry recorded for one slot."""
        record = make_record(
            "2025-01-05",
            {"Bench Press": [(8, 185), (5, 205)]},
            equipment={"Bench Press": "Barbell"},
            location="Garage",
        )

        session = aggregate([record])["Bench Press|Barbell"].sessions[0]

        assert session.date == "2025-01-05"
        assert session.max_weight == 205
        assert session.max_reps == 5
        assert session.total_volume == 2505
        assert session.location == "Garage"
        assert session.best_set.weight == 205

    def test_zero_weight_slot_adds_no_session(self, make_record):
        """Test that a slot with only weightless sets contributes no session."""
        record = make_record("2025-01-05", {"Plank": [(8, 0)]})

        progress = aggregate([record])

        assert progress["Plank|Unknown"].sessions == []

    def test_sessions_sorted_by_date(self, make_record):
        """Test that sessions end up ascending by date regardless of completion order."""
        late_logged = make_record(
            "2025-01-01",
            {"Squat": [(5, 225)]},
            completed_at="2025-02-10T10:00:00.000Z",
        )
        on_time = make_record("2025-02-01", {"Squat": [(5, 235)]})

        sessions = aggregate([on_time, late_logged])["Squat|Unknown"].sessions

        assert [s.date for s in sessions] == ["2025-01-01", "2025-02-01"]

    def test_skips_cancelled_records(self, make_record):
        """Test that cancelled workouts are ignored."""
        record = make_record("2025-01-05", {"Squat": [(5, 225)]}, cancelled=True)

        assert aggregate([record]) == {}

    def test_skips_records_without_names(self, make_record):
        """Test that records missing the slot name mapping are ignored."""
        record = make_record("2025-01-05", {"Squat": [(5, 225)]})
        record = record.model_copy(update={"exercise_names": None})

        assert aggregate([record]) == {}

    def test_skips_slots_without_name_or_sets(self):
        """Test that unnamed slots and slots with no sets are ignored."""
        record = WorkoutRecord.model_validate({
            "date": "2025-01-05",
            "completedAt": "2025-01-05T18:00:00Z",
            "exercises": {
                "exercise_0": {"sets": [{"reps": 5, "weight": 100}]},
                "exercise_1": {"sets": []},
                "exercise_2": {"sets": [{"reps": 5, "weight": 100}]},
            },
            "exerciseNames": {"exercise_1": "Deadlift", "exercise_2": "Curl"},
        })

        progress = aggregate([record])

        assert list(progress) == ["Curl|Unknown"]

    def test_date_falls_back_to_completion_time(self):
        """Test that a record without a date uses the completion day."""
        record = WorkoutRecord.model_validate({
            "completedAt": "2025-01-07T19:30:00.000Z",
            "exercises": {"exercise_0": {"sets": [{"reps": 5, "weight": 100}]}},
            "exerciseNames": {"exercise_0": "Curl"},
        })

        session = aggregate([record])["Curl|Unknown"].sessions[0]

        assert session.date == "2025-01-07"
        assert session.location == "Unknown"

    def test_blank_set_values_are_invalid(self):
        """Test that blank strings from the logging form count as missing."""
        record = WorkoutRecord.model_validate({
            "date": "2025-01-05",
            "completedAt": "2025-01-05T18:00:00Z",
            "exercises": {"exercise_0": {"sets": [
                {"reps": "", "weight": 300},
                {"reps": 5, "weight": 100},
            ]}},
            "exerciseNames": {"exercise_0": "Curl"},
        })

        session = aggregate([record])["Curl|Unknown"].sessions[0]

        assert session.max_weight == 100
        assert session.total_volume == 500

    def test_body_part_resolved_when_series_created(self, make_record):
        """Test that the first record seen fixes a series' body part."""
        first = make_record("2025-01-01", {"Dip": [(10, 45)]}, body_parts={"Dip": "Triceps"})
        second = make_record("2025-01-08", {"Dip": [(10, 50)]}, body_parts={"Dip": "Chest"})

        progress = aggregate([first, second])

        assert progress["Dip|Unknown"].body_part == "Triceps"

    def test_catalog_body_part(self, make_record):
        """Test that the catalog supplies the body part when the record has none."""
        record = make_record("2025-01-01", {"bench press": [(5, 185)]})
        resolver = KeyResolver([CatalogExercise(name="Bench Press", body_part="Chest")])

        progress = aggregate([record], resolver)

        assert progress["bench press|Unknown"].body_part == "Chest"

    def test_unknown_body_part_is_other(self, make_record):
        """Test the final body part fallback."""
        record = make_record("2025-01-01", {"Mystery Lift": [(5, 100)]})

        assert aggregate([record])["Mystery Lift|Unknown"].body_part == "Other"

    @pytest.mark.parametrize("pairs", [
        [(5, 100), (3, 120), (8, 90)],
        [(1, 1.5), (2, 2.5)],
        [(10, 45), (None, 50), (10, 0)],
    ])
    def test_volume_equals_sum_of_valid_sets(self, make_record, pairs):
        """Test total volume against a direct sum over valid sets."""
        record = make_record("2025-01-01", {"Press": pairs})

        session = aggregate([record])["Press|Unknown"].sessions[0]

        expected = sum(reps * weight for reps, weight in pairs if reps and weight)
        assert session.total_volume == pytest.approx(expected)
