from collections.abc import Sequence

from folio.core.types import Source


def link_pages(pages: Sequence[Source]) -> None:
    """Point each page at its neighbours via ``pagination.previous_page``/``next_page``."""
    for index, page in enumerate(pages):
        page.data.pagination.previous_page = pages[index - 1] if index > 0 else None
        page.data.pagination.next_page = pages[index + 1] if index + 1 < len(pages) else None
