import pytest

from depwatch.alerter import Alerter, AlertRule
from depwatch.entry import Entry


@pytest.fixture
def sample():
    return [
        Entry(dependency="libA", version="1.0.0", tags=["security", "breaking"]),
        Entry(dependency="libB", version="2.0.0", tags=["feature"]),
        Entry(dependency="libC", version="3.0.0", tags=[]),
        Entry(dependency="libD", version="4.0.0", tags=["bugfix", "security"]),
    ]


def test_no_rules_no_alerts(sample):
    assert Alerter().evaluate(sample) == []


def test_security_rule_matches_two(sample):
    alerts = Alerter([AlertRule("security", "high")]).evaluate(sample)
    assert len(alerts) == 2
    assert [a.entry.dependency for a in alerts] == ["libA", "libD"]


def test_severity_set(sample):
    alerts = Alerter([AlertRule("security", "critical")]).evaluate(sample)
    assert alerts
    assert all(a.severity == "critical" for a in alerts)


def test_reason_contains_tag(sample):
    alerts = Alerter([AlertRule("breaking", "high")]).evaluate(sample)
    assert len(alerts) == 1
    assert alerts[0].reason == "tag:breaking"


def test_multiple_rules_each_fires(sample):
    a = Alerter()
    a.add_rule("security", "high")
    a.add_rule("feature", "low")
    assert len(a.evaluate(sample)) == 3


def test_first_rule_only(sample):
    a = Alerter([AlertRule("breaking", "high"), AlertRule("security", "low")])
    alerts = a.evaluate(sample[:1])
    assert len(alerts) == 1
    assert alerts[0].severity == "high"


def test_case_insensitive_tag():
    entries = [Entry(dependency="libX", tags=["SECURITY"])]
    assert len(Alerter([AlertRule("security", "high")]).evaluate(entries)) == 1


def test_rule_tag_lowercased():
    a = Alerter()
    a.add_rule("Security", "high")
    alerts = a.evaluate([Entry(tags=["security"])])
    assert alerts[0].reason == "tag:security"


def test_empty_entries():
    assert Alerter([AlertRule("security", "high")]).evaluate([]) == []