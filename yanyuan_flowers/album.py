"""The check-in album: a cover, a title page and one page per check-in record."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from .checkin import DEFAULT_LOG_PATH, CheckinError, CheckinRecord, read_log, sorted_by_date

COVER_PAGE = 0
TITLE_PAGE = 1
FIRST_CONTENT_PAGE = 2


class PageKind(Enum):
    """What a page of the album shows."""

    COVER = "cover"
    TITLE = "title"
    CONTENT = "content"


class Album:
    """A paged view of check-in records, newest first, behind a cover and a title page."""

    def __init__(self, records: Iterable[CheckinRecord] = ()) -> None:
        self.records: list[CheckinRecord] = sorted_by_date(records)
        self.current_page: int = COVER_PAGE

    @classmethod
    def from_log(cls, path: str | Path = DEFAULT_LOG_PATH) -> "Album":
        """Build an album from the text check-in log; an unreadable log gives an empty album."""
        try:
            records = read_log(path)
        except CheckinError:
            records = []
        return cls(records)

    @property
    def page_count(self) -> int:
        """Total number of pages, cover and title page included."""
        return len(self.records) + FIRST_CONTENT_PAGE

    @property
    def kind(self) -> PageKind:
        """The kind of the page currently shown."""
        if self.current_page == COVER_PAGE:
            return PageKind.COVER
        if self.current_page == TITLE_PAGE:
            return PageKind.TITLE
        return PageKind.CONTENT

    @property
    def can_go_back(self) -> bool:
        """True unless the cover is shown."""
        return self.current_page > COVER_PAGE

    @property
    def can_go_forward(self) -> bool:
        """True unless the last page is shown."""
        return self.current_page < self.page_count - 1

    def go_to(self, index: int) -> bool:
        """Show the page at index; an index outside the album is ignored. Return whether it moved."""
        if not 0 <= index < self.page_count:
            return False
        self.current_page = index
        return True

    def flip(self) -> bool:
        """Open the album from the cover to its title page."""
        return self.go_to(TITLE_PAGE)

    def next_page(self) -> bool:
        """Turn to the following page, if there is one."""
        return self.go_to(self.current_page + 1)

    def previous_page(self) -> bool:
        """Turn back to the preceding page, if there is one."""
        return self.go_to(self.current_page - 1)

    def page_label(self) -> str | None:
        """Return "n / total" over the content pages, or None on the cover and title page."""
        if self.kind is not PageKind.CONTENT:
            return None
        return f"{self.current_page - 1} / {self.page_count - FIRST_CONTENT_PAGE}"

    def current_record(self) -> CheckinRecord | None:
        """Return the record on the current content page, or None on the cover and title page."""
        if self.kind is not PageKind.CONTENT:
            return None
        return self.records[self.current_page - FIRST_CONTENT_PAGE]