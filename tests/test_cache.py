import time
from datetime import timedelta

from depwatch.cache import Cache


def test_default_ttl():
    assert Cache(0).ttl == 600


def test_custom_ttl():
    assert Cache(300).ttl == 300


def test_timedelta_ttl():
    assert Cache(timedelta(minutes=5)).ttl == 300


def test_set_and_get_hit():
    c = Cache(60)
    c.set("https://example.com/changelog", "## v1.0.0")
    assert c.get("https://example.com/changelog") == "## v1.0.0"


def test_get_miss():
    assert Cache(60).get("https://example.com/missing") is None


def test_get_expired():
    c = Cache(0.001)
    c.set("key", "value")
    time.sleep(0.005)
    assert c.get("key") is None


def test_invalidate():
    c = Cache(60)
    c.set("key", "value")
    c.invalidate("key")
    assert c.get("key") is None


def test_len():
    c = Cache(60)
    assert len(c) == 0
    c.set("a", "1")
    c.set("b", "2")
    assert len(c) == 2


def test_overwrite():
    c = Cache(60)
    c.set("key", "old")
    c.set("key", "new")
    assert c.get("key") == "new"
    assert len(c) == 1