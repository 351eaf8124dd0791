from depwatch.entry import Entry
from depwatch.extractor import Extractor


def test_extracts_issue_refs():
    out = Extractor().apply([Entry(body="Fixes #42 and closes GH-99")])
    assert len(out) == 1
    assert set(out[0].tags) == {"issue:#42", "issue:99"}


def test_extracts_pr_ref():
    out = Extractor().apply([Entry(body="Merged PR #7 into main")])
    assert "pr:7" in out[0].tags
    assert set(out[0].tags) == {"pr:7", "issue:#7"}


def test_extracts_authors():
    out = Extractor().apply([Entry(body="Thanks @alice and @bob-dev for the patch")])
    authors = sorted(t for t in out[0].tags if t.startswith("author:"))
    assert authors == ["author:alice", "author:bob-dev"]


def test_no_refs_gives_no_tags():
    out = Extractor().apply([Entry(body="Minor internal refactor with no references")])
    assert out[0].tags == []


def test_preserves_existing_tags():
    out = Extractor().apply([Entry(body="Fix #10", tags=["bugfix"])])
    assert out[0].tags == ["bugfix", "issue:#10"]


def test_duplicate_refs_recorded_once():
    out = Extractor().apply([Entry(body="see #1 and again #1")])
    assert out[0].tags == ["issue:#1"]


def test_empty_entries():
    assert Extractor().apply([]) == []


def test_does_not_mutate_input():
    original = [Entry(body="Fix #5", tags=["x"])]
    Extractor().apply(original)
    assert original[0].tags == ["x"]