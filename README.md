# depwatch

A library for working with dependency changelogs. depwatch can fetch
changelog files over HTTP and release notes from the GitHub Releases API.
It parses Markdown changelogs into `Entry` values. Small components then
filter, enrich, rank, group and format those entries for a digest.

It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Entries

`depwatch.entry.Entry` is a dataclass. Its fields are `dependency`,
`version`, `date` (a `datetime` or `None`), `body`, `link`, `tags`, `badges`
(a list of `Badge(label, color)`), `labels`, `score`, `highlighted`,
`summary`, `category`, `refs`, `label`, `raw_date` and `meta` (a dict of
strings).

## Parsing a changelog

```python
from depwatch.parser import Parser

text = """# Changelog

## [1.2.0] - 2024-03-10
- New feature A

## 1.1.0 (2024-01-05)
- Bug fix X
"""
entries = Parser().parse(text)
# entries[0].version == "1.2.0"
# entries[0].raw_date == "2024-03-10"
# entries[1].body == "- Bug fix X"
```

The parser recognises headings of levels 1 to 3 in these forms:
`## [1.2.3] - 2024-01-15`, `## 1.2.3 (2024-01-15)` and
`## v1.2.3 — 2024-01-15`. Parsed dates are UTC. Text before the first
version heading is ignored.

## Fetching

- `depwatch.fetcher.HTTPFetcher(timeout=10.0)` downloads a raw changelog.
  `fetch(dep, url)` returns a `FetchedChangelog` with `dependency`,
  `content` and `fetched_at`.
- `depwatch.github.GitHubFetcher(timeout=10.0, base_url="https://api.github.com")`
  lists releases. `fetch_releases(owner, repo, max_releases=5)` returns a
  list of `GitHubRelease` values with `tag_name`, `name`, `body`,
  `published_at` and `html_url`. A `max_releases` that is not positive means 5.
- `depwatch.cache.Cache(ttl=600)` is a thread-safe in-memory cache. `get`
  returns `None` when a key is missing or has expired. It also has `set`,
  `invalidate` and `len()`.
- `depwatch.ratelimit.RateLimiter(max_calls, window)` is a sliding-window
  limiter with one window per key. `allow(key)` answers at once and records
  the call when it is allowed. `wait(key, timeout=None)` blocks and raises
  `TimeoutError` when the timeout runs out. `reset(key)` clears a key.

Errors come from `depwatch.errors`:

- `MissingURLError` is raised for an empty URL.
- `MissingOwnerError` and `MissingRepoError` are raised when the GitHub owner
  or repository is empty.
- `FetchError` is raised when a request fails, when the response status is
  not 200, or when the response cannot be decoded. It has a `status`
  attribute.

All of these derive from `ChangelogError`.

## Processing entries

Most components have an `apply(entries)` method. Components that only take
entries can be chained with `depwatch.pipeline.Pipeline`:

```python
from depwatch.booster import Booster
from depwatch.labeler import Labeler
from depwatch.normalizer import Normalizer
from depwatch.pipeline import Pipeline

pipeline = Pipeline(Normalizer(strip_html=True), Labeler(), Booster("react"))
processed = pipeline.run(entries)
```

### Rewriting entries

These components return a new list of changed copies:

- `Normalizer(max_length=0, strip_html=False)` collapses spaces and tabs,
  trims each body, and can remove HTML tags and truncate the body.
- `Labeler()` sets `label` to `security`, `breaking`, `feature`, `bugfix` or
  `unknown`, based on keywords in the body.
- `Classifier(mappings=None, fallback="Other")` sets `category` from the
  first label that has a mapping.
- `Annotator({"env": "production"})` adds `key:value` tags.
- `Badger()` has `add_rule(tag, label, color)` and attaches badges to
  entries that carry the tag.
- `Extractor()` adds `issue:`, `pr:` and `author:` tags found in the body.
- `Highlighter("security", "cve")` sets `meta["highlight"] = "true"` on
  entries whose body or version contains one of the keywords.
- `Redactor(patterns, placeholder="[REDACTED]")` replaces regex matches in
  `body` and `link`.

These components change the entries in place and return the same sequence:

- `Expander()` pads versions, so `v1.2` becomes `v1.2.0`. The function
  `expand_version` does the same for a single string.
- `Clamper(minimum=0, maximum=100)` keeps `score` within the range.
- `Enricher(base_url="")` is called as `apply(dep, entries)`. It fills in
  empty dependency names and builds links of the form `<base_url>/<version>`.

### Dropping and reordering entries

- `Matcher()` has `add_rule(field, pattern)`; the field is `version`,
  `title` or `body`. It keeps entries that match any rule.
- `depwatch.filtering.Filter(since=None, limit=0)` keeps entries newer than
  `since`, up to `limit` entries.
- `filter_new(entries, seen)` drops entries whose versions are in `seen`.
- `Pruner(max_age=timedelta(days=30))` drops entries older than `max_age`.
  Entries without a date are kept.
- `Pinner([PinnedEntry(dependency, version)])` drops pinned versions. It also
  has `is_pinned`.
- `Quota(max_entries, window)` caps the number of entries per dependency
  within a rolling window.
- `Booster(*deps)` moves entries of the given dependencies to the front.
  Relative order is kept within each group.

### Removing repeated releases

- `Deduplicator` is called as `apply(dep, entries)` and keys on
  `dep@version`.
- `CrossSourceDeduplicator` keys on the exact dependency and version.
- `CrossDeduplicator` keys on the dependency and version, ignoring case.
- `Merger().merge(*sources)` and `merge_all(*sources)` combine lists and
  keep the first occurrence of each `dependency@version`.

Each deduplicator remembers what it has seen across calls until `reset()`
is called. `Deduplicator` also supports `len()`.

## Reporting

- `Aggregator().aggregate(entries)` returns an `AggregateStats` with the
  total count, counts per dependency and per label, and the number of
  highlighted entries. `top_dependencies(stats, n)` ranks dependencies by
  entry count.
- `Alerter()` has `add_rule(tag, severity)`. `evaluate(entries)` returns an
  `Alert` for each matching entry. The tag match ignores case, and only the
  first matching rule fires for each entry.
- `Grouper(fallback="other", order=())` groups entries by their first label
  and returns `Group` values. Labels listed in `order` come first.
- `Diff().apply(previous, current)` returns the entries that are new since
  the previous snapshot. `summarise(entries)` returns a `DiffSummary` with
  `added`, `oldest` and `newest`.
- `Formatter(date_layout="%Y-%m-%d", show_badges=False, show_labels=True)`
  renders a Markdown-style digest with one `## <dependency>` section per run
  of entries for the same dependency.

## What this package does not do

depwatch is a library only. It has no command-line program or daemon, and
no configuration file loader. It does not poll on a schedule. It does not
deliver digests: there is no Slack or e-mail notifier. It keeps no state on
disk; caches, deduplicators, quotas and pins live in memory only.