from depwatch.entry import Entry
from depwatch.grouper import Grouper


def sample_entries():
    return [
        Entry(version="1.0.0", labels=["security"]),
        Entry(version="1.1.0", labels=["feature"]),
        Entry(version="1.2.0", labels=["bugfix"]),
        Entry(version="1.3.0", labels=["security"]),
        Entry(version="1.4.0"),
    ]


def test_default_fallback():
    groups = Grouper().apply([Entry(version="1.0.0")])
    assert len(groups) == 1
    assert groups[0].label == "other"


def test_custom_fallback():
    groups = Grouper(fallback="misc").apply([Entry(version="1.0.0")])
    assert groups[0].label == "misc"


def test_groups_cover_all_entries():
    entries = sample_entries()
    groups = Grouper().apply(entries)
    assert sum(len(g.entries) for g in groups) == len(entries)


def test_security_group_has_two_entries():
    groups = {g.label: g for g in Grouper().apply(sample_entries())}
    assert [e.version for e in groups["security"].entries] == ["1.0.0", "1.3.0"]


def test_unordered_groups_in_first_seen_order():
    labels = [g.label for g in Grouper().apply(sample_entries())]
    assert labels == ["security", "feature", "bugfix", "other"]


def test_order_respected():
    g = Grouper(order=["bugfix", "other", "security"])
    labels = [grp.label for grp in g.apply(sample_entries())]
    assert labels == ["bugfix", "other", "security", "feature"]


def test_order_label_without_entries_skipped():
    g = Grouper(order=["docs", "feature"])
    labels = [grp.label for grp in g.apply(sample_entries())]
    assert labels[0] == "feature"
    assert "docs" not in labels


def test_empty_input():
    assert Grouper().apply([]) == []


def test_empty_fallback_ignored():
    assert Grouper(fallback="").fallback == "other"