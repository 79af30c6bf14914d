# api_server.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from address_book.config import Settings
from address_book.logging_utils import configure_logging
from address_book.page import PageController, PageLoaded, PageResult, build_page, load_page

logger = logging.getLogger(__name__)

app = FastAPI(  # API metadata
    title="Address Book",
    description="Serves a list of random users fetched from the RandomUser API.",
    version="0.1.0",
)

# The page is built and loaded once per process, at startup.
page: Optional[PageController] = None
page_result: Optional[PageResult] = None


@app.on_event("startup")
def load_address_book():
    global page, page_result
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    page = build_page(settings)
    page_result = load_page(page)


@app.get("/health")  # Health check endpoint for load balancers / uptime monitors.
def health():
    return {"status": "ok"}


@app.get("/status")
def status():
    if page_result is None:
        return {"status": "pending", "rows": 0}
    return {
        "status": "loaded" if isinstance(page_result, PageLoaded) else "failed",
        "rows": len(page.document.items()) if page is not None else 0,
    }


@app.get("/", response_class=HTMLResponse)
def address_list():
    if page is None:
        return HTMLResponse("", status_code=503)
    return HTMLResponse(page.document.render_html())


@app.post("/toggles/{item_id}")
def show_info(item_id: str):
    """
    "Show Info" button. Appends the user's full data to the item and sends the browser
    back to the list. An unknown item id changes nothing.
    """
    if page is not None:
        page.toggle(item_id)
    return RedirectResponse("/", status_code=303)
