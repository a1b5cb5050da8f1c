"""Page-number pagination for list endpoints.

List endpoints answer with ``{"data": [...], "page": n, "total_entries": n,
"total_pages": n}``. A :class:`Page` keeps the request record it was fetched
with, so the next page is the same request with ``page`` incremented.

Example:
    ```python
    page = await client.cards.list(CardListParams(page_size=50))
    async for card in page.auto_paging_iter():
        print(card.token)
    ```
"""

import dataclasses
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """One page of a list response."""

    data: list[T]
    page: int
    total_entries: int
    total_pages: int
    params: Any = dataclasses.field(repr=False)
    fetch: Callable[[Any], Awaitable["Page[T]"]] = dataclasses.field(repr=False, compare=False)

    @classmethod
    def from_response(
        cls,
        body: dict[str, Any],
        *,
        item_factory: Callable[[dict[str, Any]], T],
        params: Any,
        fetch: Callable[[Any], Awaitable["Page[T]"]],
    ) -> "Page[T]":
        """Build a page from a decoded list response."""
        items = body.get("data") or []
        return cls(
            data=[item_factory(item) for item in items],
            page=int(body.get("page") or 1),
            total_entries=int(body.get("total_entries") or len(items)),
            total_pages=int(body.get("total_pages") or 1),
            params=params,
            fetch=fetch,
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def has_next_page(self) -> bool:
        """True while this page is non-empty and not the last one."""
        return bool(self.data) and self.page < self.total_pages

    def next_page_params(self) -> Any:
        """Return a copy of the request record pointing at the next page."""
        return dataclasses.replace(self.params, page=self.page + 1)

    async def get_next_page(self) -> "Page[T] | None":
        """Fetch the next page, or return None on the last page."""
        if not self.has_next_page():
            return None
        logger.debug(f"Fetching page {self.page + 1} of {self.total_pages}")
        return await self.fetch(self.next_page_params())

    async def auto_paging_iter(self) -> AsyncIterator[T]:
        """Iterate over items of this page and every following page."""
        page: Page[T] | None = self
        while page is not None:
            for item in page.data:
                yield item
            page = await page.get_next_page()
