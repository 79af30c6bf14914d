#!/usr/bin/env python3
"""
Page controller: fetch one batch of users, keep it, render it.

Steps (one linear sequence, the only wait is the HTTP call):
  1) Fetch BATCH_SIZE users from the RandomUser API.
  2) Replace the stored batch with the result.
  3) Render every stored user, in order, as person-0 .. person-(n-1).
"""

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from .api_client import fetch_batch
from .config import Settings
from .document import AddressDocument
from .errors import AddressBookError
from .models import UserBatch
from .renderer import ListRenderer
from .revealer import DetailRevealer, ToggleControl
from .store import UserStore

logger = logging.getLogger(__name__)

BATCH_SIZE = 8

FetchFn = Callable[[int], UserBatch]


class PageController:
    def __init__(
        self,
        document: AddressDocument,
        fetch: FetchFn = fetch_batch,
        batch_size: int = BATCH_SIZE,
    ):
        self.document = document
        self.fetch = fetch
        self.batch_size = batch_size
        self.store = UserStore()
        self.revealer = DetailRevealer(document)
        self.renderer = ListRenderer(document, self.revealer)
        self.toggles: Dict[str, ToggleControl] = {}

    def run(self) -> UserBatch:
        # Fetch errors propagate from here untouched; nothing gets rendered in that case.
        batch = self.fetch(self.batch_size)
        self.store.replace(batch)

        # Running again only appends: ids restart at 0 and old items stay in the page.
        for index, record in enumerate(self.store.all()):
            control = self.renderer.render(record, index)
            self.toggles[control.item_id] = control

        logger.info("rendered %s users into #%s", len(self.store), self.document.container.get("id"))
        return self.store.all()

    def toggle(self, item_id: str) -> bool:
        """Activate the "Show Info" control of `item_id`; unknown ids do nothing."""
        control = self.toggles.get(item_id)
        if control is None:
            logger.debug("toggle ignored, no control registered for %s", item_id)
            return False
        return control.activate()


# -----------------------------------------------------------------------------
# Top-level entry: turn the outcome of one run into a value instead of a crash
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PageLoaded:
    records: UserBatch
    ok = True


@dataclass(frozen=True)
class PageFailed:
    error: Exception
    ok = False


PageResult = Union[PageLoaded, PageFailed]


def load_page(controller: PageController) -> PageResult:
    # No retry and no partial success: either the whole batch renders or nothing does.
    try:
        records = controller.run()
    except AddressBookError as exc:
        logger.exception("address book failed to load")
        return PageFailed(exc)
    return PageLoaded(records)


def build_page(
    settings: Optional[Settings] = None,
    fetch: Optional[FetchFn] = None,
    markup: Optional[str] = None,
) -> PageController:
    # Wires the API url and timeout from settings into fetch_batch unless a fetch is given.
    settings = settings or Settings.from_env()
    if fetch is None:
        fetch = functools.partial(fetch_batch, timeout=settings.http_timeout, api_url=settings.api_url)
    document = AddressDocument.from_html(markup) if markup is not None else AddressDocument.from_html()
    return PageController(document, fetch=fetch)
