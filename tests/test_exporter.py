"""Unit tests for exporter utilities."""

import json

import pytest

from fanfetch.config import Strategy
from pydantic import ValidationError

from fanfetch.core.exporter import to_json, to_dict, save_json, load_json, report_filename
from fanfetch.core.report import StageOutcome, build_report
from fanfetch.core.source import make_comments, make_posts, make_profile
from fanfetch.models import AggregateReport


@pytest.fixture
def report() -> AggregateReport:
    """A report where post 2's comments failed."""
    comments = [
        StageOutcome.success("comments:1", make_comments(1)),
        StageOutcome.failure("comments:2", "Failed to fetch comments"),
        StageOutcome.success("comments:3", make_comments(3)),
    ]
    return build_report(
        "u1",
        Strategy.PARALLEL,
        StageOutcome.success("profile", make_profile("u1")),
        StageOutcome.success("posts", make_posts("u1")),
        comments,
        3512,
    )


class TestToJson:
    """Test JSON string conversion."""

    def test_to_json_is_valid_json(self, report):
        parsed = json.loads(to_json(report))
        assert parsed["profile"]["username"] == "useru1"
        assert parsed["strategy"] == "parallel"
        assert parsed["elapsed_ms"] == 3512

    def test_errors_serialized(self, report):
        parsed = json.loads(to_json(report))
        assert parsed["errors"] == [{"stage": "comments:2", "message": "Failed to fetch comments"}]


class TestToDict:
    """Test dictionary conversion."""

    def test_has_expected_keys(self, report):
        d = to_dict(report)
        assert set(d) >= {"profile", "posts", "errors", "elapsed_ms", "message"}

    def test_failed_post_shape(self, report):
        post = to_dict(report)["posts"][1]
        assert post["comments"] == []
        assert post["comments_error"] == "Failed to fetch comments"


class TestSaveLoad:
    """Test file persistence of a report."""

    def test_save_creates_parents(self, report, tmp_path):
        path = save_json(report, tmp_path / "out" / "u1.json")
        assert path.exists()

    def test_load_restores_report(self, report, tmp_path):
        path = save_json(report, tmp_path / "u1.json")
        assert load_json(path) == report

    def test_save_into_existing_directory(self, report, tmp_path):
        path = save_json(report, tmp_path)
        assert path == tmp_path / "u1.parallel.json"
        assert path.exists()

    def test_save_into_new_directory(self, report, tmp_path):
        path = save_json(report, tmp_path / "reports")
        assert path == tmp_path / "reports" / report_filename(report)

    def test_load_rejects_broken_invariant(self, report, tmp_path):
        """A file whose message disagrees with its errors does not load."""
        data = to_dict(report)
        data["message"] = "Completed successfully"
        path = tmp_path / "tampered.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_json(path)


class TestReportFilename:
    """Test derived file names."""

    def test_uses_user_and_strategy(self, report):
        assert report_filename(report) == "u1.parallel.json"
