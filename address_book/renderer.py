#!/usr/bin/env python3
"""
Build one <li> per user in the address-list container.

Each item looks like:

    <li id="person-0">
      <img src="...thumbnail...">Jane
      <form method="post" action="/toggles/person-0"><button type="submit">Show Info</button></form>
    </li>
"""

from .document import AddressDocument
from .models import UserRecord
from .revealer import DetailRevealer, ToggleControl

TOGGLE_LABEL = "Show Info"


def item_id(index: int) -> str:
    return f"person-{index}"


class ListRenderer:
    def __init__(self, document: AddressDocument, revealer: DetailRevealer):
        self.document = document
        self.revealer = revealer

    def render(self, record: UserRecord, index: int) -> ToggleControl:
        # Appends at the end of the container: existing items are never moved or removed.
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")

        doc = self.document
        li = doc.create_tag("li", id=item_id(index))

        li.append(doc.create_tag("img", src=record.picture_thumbnail_url))
        li.append(doc.create_text(record.first_name))

        # The button only names the item; the record itself lives in the ToggleControl.
        form = doc.create_tag("form", method="post", action=f"/toggles/{li['id']}")
        button = doc.create_tag("button", type="submit")
        button.string = TOGGLE_LABEL
        form.append(button)
        li.append(form)

        doc.container.append(li)
        return ToggleControl(li["id"], record.data, self.revealer)
