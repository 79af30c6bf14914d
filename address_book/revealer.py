#!/usr/bin/env python3
"""
"Show Info": append a user's full data to the list item that displays them.
"""

import copy
import json
import logging
from typing import Any, Dict

from .document import AddressDocument

logger = logging.getLogger(__name__)


class DetailRevealer:
    def __init__(self, document: AddressDocument):
        self.document = document

    def reveal(self, item_id: str, serialized_record: str) -> bool:
        """
        Append `serialized_record` as a new text node of the item `item_id`.

        An unknown id is a no-op and returns False. Calling this twice for the same item
        appends the text twice; nothing is deduplicated.
        """
        try:
            item = self._lookup(item_id)
        except LookupError:
            logger.debug("reveal ignored, no list item with id %s", item_id)
            return False
        item.append(self.document.create_text(serialized_record))
        return True

    def _lookup(self, item_id: str):
        item = self.document.get_element_by_id(item_id)
        if item is None:
            raise LookupError(item_id)
        return item


class ToggleControl:
    # The handler behind one "Show Info" button. It keeps its own copy of the record,
    # so what it reveals never changes when the store is replaced later.

    def __init__(self, item_id: str, record_data: Dict[str, Any], revealer: DetailRevealer):
        self.item_id = item_id
        self.record_data = copy.deepcopy(record_data)
        self.revealer = revealer

    def activate(self) -> bool:
        return self.revealer.reveal(self.item_id, json.dumps(self.record_data))
