#!/usr/bin/env python3
"""
IO utilities for writing the rendered address_list.html file.
"""

from pathlib import Path

HTML_FILENAME = "address_list.html"


def get_data_dir(BASE_DIR: Path) -> Path:
    # This function creates and returns the path to the "data" directory inside the given base directory.
    DATA_DIR = BASE_DIR / "data"
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR


def write_page_html(html: str, BASE_DIR: Path) -> Path:
    # Every run produces a fresh page, so the file is overwritten rather than appended to.
    html_path = get_data_dir(BASE_DIR) / HTML_FILENAME
    html_path.write_text(html, encoding="utf-8")
    return html_path
