#!/usr/bin/env python3
"""
The HTML document the address list is rendered into.

BeautifulSoup owns the tree: this module only finds the container, creates tags and
text nodes, and serializes the page back to HTML.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

CONTAINER_ID = "address-list"

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Address Book</title>
</head>
<body>
<h1>Address Book</h1>
<ul id="address-list"></ul>
</body>
</html>
"""


class AddressDocument:
    def __init__(self, soup: BeautifulSoup):
        self.soup = soup
        container = soup.find(id=CONTAINER_ID)
        if container is None:
            raise LookupError(f"page has no element with id {CONTAINER_ID!r}")
        self.container: Tag = container

    @classmethod
    def from_html(cls, markup: str = PAGE_TEMPLATE) -> "AddressDocument":
        # Anything already inside the container is kept; new items go after it.
        return cls(BeautifulSoup(markup, "html.parser"))

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        return self.soup.find(id=element_id)

    def create_tag(self, name: str, **attrs: str) -> Tag:
        return self.soup.new_tag(name, attrs=attrs)

    def create_text(self, text: str) -> NavigableString:
        return NavigableString(text)

    def items(self) -> List[Tag]:
        """The list items directly under the container, in document order."""
        return self.container.find_all("li", recursive=False)

    def render_html(self) -> str:
        return str(self.soup)
