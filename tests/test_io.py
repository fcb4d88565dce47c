"""Tests for I/O functionality."""
import pandas as pd
import pytest

from storerota.io.csv_loader import load_preferences, load_workers, workers_to_dataframe
from storerota.models.availability import Availability
from storerota.models.shift import Day, SlotType
from storerota.models.worker import Worker


class TestLoadPreferences:
    """Tests for loading slot preferences."""

    def test_from_dataframe(self):
        df = pd.DataFrame({
            "name": ["Alice", "Bob", "Alice"],
            "day": ["Mon", "Mon", "Tue"],
            "slot": ["Morning", "Morning", "Evening"],
        })
        table = load_preferences(df)

        assert isinstance(table, Availability)
        assert table.candidates(Day.MONDAY, SlotType.MORNING) == ["Alice", "Bob"]
        assert table.candidates(Day.TUESDAY, SlotType.EVENING) == ["Alice"]

    def test_available_flag(self):
        df = pd.DataFrame({
            "name": ["Alice", "Bob", "Chi"],
            "day": ["Mon", "Mon", "Mon"],
            "slot": ["Morning", "Morning", "Morning"],
            "available": ["1", "0", ""],
        })
        table = load_preferences(df)
        assert table.candidates(Day.MONDAY, SlotType.MORNING) == ["Alice", "Chi"]

    def test_vietnamese_labels(self):
        df = pd.DataFrame({"name": ["An"], "day": ["Thứ 2"], "slot": ["Sáng"]})
        table = load_preferences(df)
        assert table.candidates(Day.MONDAY, SlotType.MORNING) == ["An"]

    def test_header_case_insensitive(self):
        df = pd.DataFrame({"Name": ["An"], "Day": ["Fri"], "Slot": ["Midday"]})
        assert load_preferences(df).candidates(Day.FRIDAY, SlotType.MIDDAY) == ["An"]

    def test_blank_names_skipped(self):
        df = pd.DataFrame({"name": ["", "An"], "day": ["Mon", "Mon"], "slot": ["Morning", "Morning"]})
        assert load_preferences(df).workers() == ["An"]

    def test_missing_columns_raise(self):
        with pytest.raises(ValueError, match="slot"):
            load_preferences(pd.DataFrame({"name": ["An"], "day": ["Mon"]}))

    def test_from_csv_file(self, tmp_path):
        path = tmp_path / "prefs.csv"
        path.write_text("name,day,slot\nAlice,Sun,Evening\nBob,Sun,Evening\n", encoding="utf-8")

        table = load_preferences(path)
        assert table.candidates(Day.SUNDAY, SlotType.EVENING) == ["Alice", "Bob"]

    def test_from_excel_file(self, tmp_path):
        path = tmp_path / "prefs.xlsx"
        pd.DataFrame({"name": ["Alice"], "day": ["Wed"], "slot": ["Afternoon"]}).to_excel(path, index=False)

        table = load_preferences(path)
        assert table.candidates(Day.WEDNESDAY, SlotType.AFTERNOON) == ["Alice"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_preferences(tmp_path / "nope.csv")


class TestLoadWorkers:
    """Tests for loading worker records."""

    def test_from_dataframe(self):
        df = pd.DataFrame({
            "id": ["E1", ""],
            "name": ["Alice", "Bob"],
            "salary_coefficient": ["1.5", ""],
        })
        workers = load_workers(df)

        assert workers[0] == Worker(id="E1", name="Alice", salary_coefficient=1.5)
        assert workers[1].id == "W2"
        assert workers[1].salary_coefficient == 1.0

    def test_negative_coefficient_rejected(self):
        df = pd.DataFrame({"id": ["E1"], "name": ["Alice"], "salary_coefficient": ["-2"]})
        with pytest.raises(ValueError, match="non-negative"):
            load_workers(df)

    def test_name_required(self):
        with pytest.raises(ValueError, match="name"):
            load_workers(pd.DataFrame({"id": ["E1"]}))

    def test_to_dataframe(self, sample_workers):
        df = workers_to_dataframe(sample_workers)
        assert len(df) == len(sample_workers)
        assert list(df.columns) == ["id", "name", "salary_coefficient"]
        assert workers_to_dataframe([]).empty
