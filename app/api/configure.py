"""
Configuration endpoints for the Arabic Stream Hub addon.

The configure page collects an optional Real-Debrid API key. The key is
kept in memory for this instance only; without it streams fall back to
direct torrent (P2P) playback.

Note: the page is intentionally unauthenticated, as Stremio opens it
directly from the addon settings.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).with_name("templates")))


@router.get("/configure", response_class=HTMLResponse)
def configure_page(request: Request):
    return templates.TemplateResponse(
        request,
        "configure.html",
        {"credential_set": request.app.state.credentials.is_set()},
    )


@router.post("/configure", response_class=HTMLResponse)
def configure_save(
    request: Request,
    debrid_api_key: Annotated[str, Form(alias="DEBRID_API_KEY")] = "",
):
    if not request.app.state.credentials.set(debrid_api_key):
        return templates.TemplateResponse(
            request,
            "configure_error.html",
            {},
            status_code=400,
        )

    # Never log the key itself
    print("[INFO] Debrid API Key received and set (hidden for security in logs).")

    return templates.TemplateResponse(request, "configure_saved.html", {})
