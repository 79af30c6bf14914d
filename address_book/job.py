#!/usr/bin/env python3
"""
One-shot address book job:
- fetch 8 users from the API
- render them into the address list
- write the page to data/address_list.html
- print summary for logs
"""

import logging
from typing import Optional

from .config import Settings
from .io_utils import write_page_html
from .logging_utils import configure_logging
from .page import PageLoaded, build_page, load_page
from .transformations import flatten_batch

logger = logging.getLogger(__name__)


def run_page_job(settings: Optional[Settings] = None, fetch=None) -> dict:  # dict of metrics about the run.
    """
    Load the page once and return metrics as a dict
    (so FastAPI or other callers can inspect the result).

    Steps:
      1) Fetch and render the batch (PageController).
      2) Write the rendered HTML, even when the load failed (empty list).
      3) Print summary metrics.
    """
    settings = settings or Settings.from_env()

    # --------------------------------------------------------------------------------------------------
    # 1) Fetch + render
    # --------------------------------------------------------------------------------------------------
    controller = build_page(settings, fetch=fetch)
    result = load_page(controller)

    # --------------------------------------------------------------------------------------------------
    # 2) Write the page
    # --------------------------------------------------------------------------------------------------
    html_path = write_page_html(controller.document.render_html(), settings.base_dir)

    # --------------------------------------------------------------------------------------------------
    # 3) Collect and print metrics (stdout -> cron / .sh logs)
    # --------------------------------------------------------------------------------------------------
    loaded = isinstance(result, PageLoaded)
    metrics = {
        "status": "loaded" if loaded else "failed",
        "rows_rendered": len(controller.document.items()),
        "html_path": str(html_path),
        "error": None if loaded else str(result.error),
    }

    print(f"wrote {metrics['rows_rendered']} users to {metrics['html_path']}")
    print(f"api_url={settings.api_url}")
    print(f"status={metrics['status']}")
    if loaded:
        print(flatten_batch(result.records).to_string(index=False))
    else:
        print(f"error={metrics['error']}")

    return metrics


def main() -> int:
    configure_logging(Settings.from_env().log_level)
    metrics = run_page_job()
    # Exit code matters for cron: 0 = page loaded, 1 = fetch failed.
    return 0 if metrics["status"] == "loaded" else 1


# Only run the job when this file is executed directly (not when it's imported)
if __name__ == "__main__":
    raise SystemExit(main())
