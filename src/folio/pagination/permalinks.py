import posixpath
import re

FALLBACK_EXTENSION = "html"

# Lazy stem: "archive.tar.gz" splits into "archive" and "tar.gz"
_BASENAME_PATTERN = re.compile(r"(?P<stem>.+?)\.(?P<ext>.+)")


def rewrite_permalink(permalink: str, page_number: int) -> str:
    """Derive the output path of page ``page_number`` from the page-1 path.

    Examples:
        >>> rewrite_permalink("index.html", 3)
        'page/3/index.html'
        >>> rewrite_permalink("blog.html", 2)
        'blog/page/2.html'
        >>> rewrite_permalink("archive", 4)
        'archive/page/4.html'

    """
    if page_number < 2:
        msg = f"Only pages after the first are rewritten, got page {page_number}"
        raise ValueError(msg)

    path = permalink.rstrip("/") or permalink
    directory = posixpath.dirname(path) or "."
    basename = posixpath.basename(path)
    prefix = directory.rstrip("/")

    parsed = _BASENAME_PATTERN.fullmatch(basename)
    if parsed is None:
        rewritten = f"{prefix}/{basename}/page/{page_number}.{FALLBACK_EXTENSION}"
    elif parsed.group("stem") == "index":
        rewritten = f"{prefix}/page/{page_number}/index.{parsed.group('ext')}"
    else:
        rewritten = f"{prefix}/{parsed.group('stem')}/page/{page_number}.{parsed.group('ext')}"

    if rewritten.startswith("./"):
        rewritten = rewritten[2:]
    return rewritten
