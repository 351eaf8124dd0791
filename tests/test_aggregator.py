from datetime import datetime

import pytest

from depwatch.aggregator import AggregateStats, Aggregator
from depwatch.entry import Entry


@pytest.fixture
def sample():
    now = datetime.now()
    return [
        Entry(dependency="react", labels=["security", "feature"], highlighted=True, date=now),
        Entry(dependency="react", labels=["bugfix"], highlighted=False, date=now),
        Entry(dependency="lodash", labels=["security"], highlighted=True, date=now),
        Entry(dependency="webpack", labels=["feature"], highlighted=False, date=now),
    ]


def test_total_entries(sample):
    assert Aggregator().aggregate(sample).total_entries == 4


def test_by_dependency(sample):
    stats = Aggregator().aggregate(sample)
    assert stats.by_dependency["react"] == 2
    assert stats.by_dependency["lodash"] == 1


def test_by_label(sample):
    stats = Aggregator().aggregate(sample)
    assert stats.by_label["security"] == 2
    assert stats.by_label["feature"] == 2


def test_highlighted_count(sample):
    assert Aggregator().aggregate(sample).highlighted_count == 2


def test_empty_entries():
    stats = Aggregator().aggregate(None)
    assert stats.total_entries == 0
    assert stats.by_dependency == {}


def test_empty_dependency_not_counted():
    stats = Aggregator().aggregate([Entry(dependency=""), Entry(dependency="a")])
    assert stats.by_dependency == {"a": 1}
    assert stats.total_entries == 2


def test_top_dependencies_order(sample):
    a = Aggregator()
    top = a.top_dependencies(a.aggregate(sample), 0)
    assert top[0] == "react"
    assert top == ["react", "lodash", "webpack"]


def test_top_dependencies_cap(sample):
    a = Aggregator()
    assert len(a.top_dependencies(a.aggregate(sample), 2)) == 2


def test_top_dependencies_n_larger_than_total(sample):
    a = Aggregator()
    assert len(a.top_dependencies(a.aggregate(sample), 10)) == 3


def test_top_dependencies_tie_broken_by_name():
    stats = AggregateStats(by_dependency={"b": 1, "a": 1, "c": 2})
    assert Aggregator().top_dependencies(stats, 0) == ["c", "a", "b"]