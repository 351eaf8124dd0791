from datetime import datetime, timedelta

from depwatch.dedupe import Deduplicator
from depwatch.entry import Entry


def sample_entries():
    now = datetime.now()
    return [
        Entry(version="v1.2.0", date=now, body="feat: something"),
        Entry(version="v1.1.0", date=now - timedelta(hours=24), body="fix: bug"),
        Entry(version="v1.2.0", date=now, body="feat: something"),
    ]


def test_removes_duplicates():
    result = Deduplicator().apply("mylib", sample_entries())
    assert [e.version for e in result] == ["v1.2.0", "v1.1.0"]


def test_cross_call_dedup():
    d = Deduplicator()
    entries = sample_entries()[:1]
    d.apply("mylib", entries)
    assert d.apply("mylib", entries) == []


def test_different_deps():
    d = Deduplicator()
    entries = sample_entries()[:1]
    assert len(d.apply("libA", entries)) == 1
    assert len(d.apply("libB", entries)) == 1


def test_empty():
    assert Deduplicator().apply("mylib", []) == []


def test_reset_clears_seen():
    d = Deduplicator()
    entries = sample_entries()[:1]
    d.apply("mylib", entries)
    d.reset()
    assert len(d) == 0
    assert len(d.apply("mylib", entries)) == 1


def test_len():
    d = Deduplicator()
    d.apply("mylib", sample_entries())
    assert len(d) == 2