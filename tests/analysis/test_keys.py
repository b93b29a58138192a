"""Tests for equipment and body part resolution."""

from lift_progress.analysis.keys import KeyResolver
from lift_progress.models import CatalogExercise, LoggedExercise, WorkoutRecord


def record_with_template(template_exercise=None):
    exercises = [template_exercise] if template_exercise is not None else []
    return WorkoutRecord.model_validate({
        "date": "2025-01-01",
        "originalWorkout": {"name": "Push Day", "exercises": exercises},
    })


class TestResolveEquipment:
    """Tests for the equipment fallback chain."""

    def test_template_override_first(self):
        """Test that the template equipment beats the logged equipment."""
        record = record_with_template({"name": "Bench Press", "equipment": "Hammer Strength"})
        logged = LoggedExercise(equipment="Barbell")

        assert KeyResolver().resolve_equipment(record, "exercise_0", logged) == "Hammer Strength"

    def test_logged_equipment_second(self):
        """Test that logged equipment is used when the template has none."""
        record = record_with_template({"name": "Bench Press"})
        logged = LoggedExercise(equipment="Dumbbell")

        assert KeyResolver().resolve_equipment(record, "exercise_0", logged) == "Dumbbell"

    def test_unknown_last(self):
        """Test the literal fallback."""
        record = record_with_template()

        assert KeyResolver().resolve_equipment(record, "exercise_0", LoggedExercise()) == "Unknown"

    def test_slot_index_out_of_range(self):
        """Test that a slot beyond the template falls through."""
        record = record_with_template({"name": "Bench Press", "equipment": "Barbell"})

        assert KeyResolver().resolve_equipment(record, "exercise_3") == "Unknown"

    def test_non_numeric_slot(self):
        """Test that a malformed slot id does not match a template exercise."""
        record = record_with_template({"name": "Bench Press", "equipment": "Barbell"})

        assert KeyResolver().resolve_equipment(record, "exercise_x") == "Unknown"


class TestResolveBodyPart:
    """Tests for the body part fallback chain."""

    catalog = [
        CatalogExercise(name="Bench Press", body_part="Chest"),
        CatalogExercise(name="BENCH PRESS", body_part="Shoulders"),
    ]

    def test_template_override_first(self):
        """Test that the template body part wins."""
        record = record_with_template({"name": "Bench Press", "bodyPart": "Triceps"})
        logged = LoggedExercise(body_part="Shoulders")

        body_part = KeyResolver(self.catalog).resolve_body_part("Bench Press", record, "exercise_0", logged)

        assert body_part == "Triceps"

    def test_logged_second(self):
        """Test that the logged body part beats the catalog."""
        record = record_with_template()
        logged = LoggedExercise(body_part="Shoulders")

        body_part = KeyResolver(self.catalog).resolve_body_part("Bench Press", record, "exercise_0", logged)

        assert body_part == "Shoulders"

    def test_catalog_lookup_ignores_case(self):
        """Test the case-insensitive exact-name catalog lookup."""
        record = record_with_template()

        body_part = KeyResolver(self.catalog).resolve_body_part("bench press", record, "exercise_0")

        assert body_part == "Chest"

    def test_first_catalog_entry_wins(self):
        """Test that duplicate names resolve to the first catalog entry."""
        resolver = KeyResolver(self.catalog)

        assert resolver.find_catalog_body_part("Bench Press") == "Chest"

    def test_catalog_match_is_exact(self):
        """Test that partial names do not match."""
        resolver = KeyResolver(self.catalog)

        assert resolver.find_catalog_body_part("Incline Bench Press") is None

    def test_other_last(self):
        """Test the literal fallback."""
        record = record_with_template()

        assert KeyResolver().resolve_body_part("Bench Press", record, "exercise_0") == "Other"
