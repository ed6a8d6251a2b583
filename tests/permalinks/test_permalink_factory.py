from datetime import date, datetime

import pytest

from folio.core.exceptions import PermalinkPatternError
from folio.core.ports import PermalinkFactory
from folio.core.types import Source
from folio.permalinks.factory import Permalink, SourcePermalinkFactory


def _source(pathname: str, **data) -> Source:
    return Source(pathname, pathname, data=data)


@pytest.mark.parametrize(
    ("pathname", "expected"),
    [
        ("about.md", "about.html"),
        ("blog/index.markdown", "blog/index.html"),
        ("feed.xml.twig", "feed.xml.html"),
        ("robots.txt", "robots.txt"),
        ("archive", "archive"),
    ],
)
def test_none_style_converts_template_extensions(pathname, expected):
    assert SourcePermalinkFactory().create(_source(pathname)).relative_file_path == expected


@pytest.mark.parametrize(
    ("pathname", "expected"),
    [
        ("about.md", "about/index.html"),
        ("blog/index.md", "blog/index.html"),
        ("index.md", "index.html"),
        ("docs/setup.md", "docs/setup/index.html"),
    ],
)
def test_pretty_style(pathname, expected):
    assert SourcePermalinkFactory("pretty").create(_source(pathname)).relative_file_path == expected


def test_source_permalink_wins_over_default():
    source = _source("about.md", permalink="company/about.html")

    assert SourcePermalinkFactory("pretty").create(source).relative_file_path == "company/about.html"


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("blog/:year/:month/:day/:title/", "blog/2024/03/15/hello-world/index.html"),
        (":folder:basename.html", "_posts/hello.html"),
        (":filename", "hello.html"),
        ("/:year/:basename.html", "2024/hello.html"),
    ],
)
def test_placeholder_patterns(pattern, expected):
    source = _source("_posts/hello.md", title="Hello, World!", date=datetime(2024, 3, 15, 9, 30), permalink=pattern)

    assert SourcePermalinkFactory().create(source).relative_file_path == expected


def test_title_falls_back_to_file_stem():
    source = _source("notes/first-steps.md", permalink=":title.html")

    assert SourcePermalinkFactory().create(source).relative_file_path == "first-steps.html"


@pytest.mark.parametrize("value", [date(2024, 3, 15), "2024-03-15", "2024-03-15 10:00:00"])
def test_date_values(value):
    source = _source("a.md", date=value, permalink=":year-:month-:day.html")

    assert SourcePermalinkFactory().create(source).relative_file_path == "2024-03-15.html"


@pytest.mark.parametrize("value", [None, "yesterday", 20240315])
def test_date_placeholder_without_usable_date(value):
    source = _source("a.md", date=value, permalink=":year/:basename.html")

    with pytest.raises(PermalinkPatternError, match="no usable date"):
        SourcePermalinkFactory().create(source)


@pytest.mark.parametrize(
    ("file_path", "url_path"),
    [
        ("index.html", "/"),
        ("blog/index.html", "/blog/"),
        ("blog/page/2.html", "/blog/page/2.html"),
        ("myindex.html", "/myindex.html"),
    ],
)
def test_url_path(file_path, url_path):
    assert Permalink.from_file_path(file_path).relative_url_path == url_path


def test_generated_page_override_is_kept():
    source = _source("blog/index.md").duplicate("blog/index.md:page=2")
    source.data.set("permalink", "blog/page/2/index.html")

    permalink = SourcePermalinkFactory().create(source)

    assert permalink.relative_file_path == "blog/page/2/index.html"
    assert permalink.relative_url_path == "/blog/page/2/"


def test_satisfies_port():
    assert isinstance(SourcePermalinkFactory(), PermalinkFactory)
