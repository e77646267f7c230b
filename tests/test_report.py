"""
Unit tests for report formatting
"""
import json

from gradetrack.report import (
    format_listing,
    format_record,
    format_stat,
    format_summary,
    summary_dict,
)
from gradetrack.roster import StudentRecord


class TestFormatStat:
    """Test format_stat"""

    def test_undefined(self):
        assert format_stat(None) == "N/A"

    def test_decimals(self):
        assert format_stat(85.0) == "85.00"
        assert format_stat(2 / 3, decimals=1) == "0.7"


class TestFormatRecord:
    """Test format_record"""

    def test_no_grades(self):
        assert format_record(StudentRecord("Cy")) == "Cy: No grades"

    def test_with_grades(self):
        line = format_record(StudentRecord("Ann", [90.0, 80.0]))
        assert line == "Ann | Grades: [90.0, 80.0] | Avg: 85.00 | High: 90.00 | Low: 80.00"


class TestListingAndSummary:
    """Test format_listing / format_summary"""

    def test_listing_empty(self, roster):
        assert format_listing(roster) == "No students in the tracker yet."

    def test_listing_sorted(self, roster):
        for name in ("bob", "Alice"):
            roster.add_student(name)
        assert format_listing(roster).splitlines() == ["Alice: No grades", "bob: No grades"]

    def test_summary_empty(self, roster):
        assert format_summary(roster) == "No students."

    def test_summary(self, graded_roster):
        text = format_summary(graded_roster)
        assert "--- Student List ---" in text
        assert "Ann | Grades: [90.0, 80.0]" in text
        assert "Cy: No grades" in text
        assert "Overall Average: 80.00" in text
        assert "Overall Highest: 90.00" in text
        assert "Overall Lowest : 70.00" in text

    def test_summary_without_scores(self, roster):
        roster.add_student("Ann")
        text = format_summary(roster)
        assert "Overall Average: N/A" in text


class TestSummaryDict:
    """Test summary_dict"""

    def test_json_ready(self, graded_roster):
        data = json.loads(json.dumps(summary_dict(graded_roster)))
        assert [s["name"] for s in data["students"]] == ["Ann", "Bo", "Cy"]
        assert data["students"][0]["average"] == 85.0
        assert data["students"][2]["average"] is None
        assert data["overall"] == {"average": 80.0, "highest": 90.0, "lowest": 70.0}
