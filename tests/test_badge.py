import pytest

from depwatch.badge import Badger, BadgeRule
from depwatch.entry import Badge, Entry


@pytest.fixture
def sample():
    return [
        Entry(dependency="react", tags=["security", "breaking"]),
        Entry(dependency="lodash", tags=["feature"]),
        Entry(dependency="axios", tags=[]),
    ]


def test_no_rules_no_badges(sample):
    out = Badger().apply(sample)
    assert all(e.badges == [] for e in out)
    assert len(out) == 3


def test_security_tag_attaches_badge(sample):
    b = Badger()
    b.add_rule("security", "Security", "#e11d48")
    out = b.apply(sample)
    assert len(out[0].badges) == 1
    assert out[0].badges[0].label == "Security"
    assert out[0].badges[0].color == "#e11d48"


def test_multiple_rules_multiple_badges(sample):
    b = Badger(
        [
            BadgeRule("security", Badge("Security", "#e11d48")),
            BadgeRule("breaking", Badge("Breaking", "#f97316")),
        ]
    )
    out = b.apply(sample)
    assert [x.label for x in out[0].badges] == ["Security", "Breaking"]


def test_no_badge_when_tag_absent(sample):
    b = Badger()
    b.add_rule("security", "Security", "#e11d48")
    out = b.apply(sample)
    assert out[1].badges == []
    assert out[2].badges == []


def test_no_duplicate_badges(sample):
    b = Badger()
    b.add_rule("security", "Security", "#e11d48")
    b.add_rule("security", "Security", "#e11d48")
    assert len(b.apply(sample)[0].badges) == 1


def test_existing_badge_preserved():
    entry = Entry(tags=["security"], badges=[Badge("Security", "#000000")])
    b = Badger()
    b.add_rule("security", "Security", "#e11d48")
    out = b.apply([entry])
    assert out[0].badges == [Badge("Security", "#000000")]


def test_does_not_mutate_input():
    original = [Entry(dependency="vue", tags=["feature"])]
    b = Badger()
    b.add_rule("feature", "Feature", "#22c55e")
    out = b.apply(original)
    assert original[0].badges == []
    assert len(out[0].badges) == 1