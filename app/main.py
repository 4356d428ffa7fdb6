"""
Application entry point.

This module creates the FastAPI app, holds the in-memory unlock
credential, and wires together the API routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.configure import router as configure_router
from api.stremio import router as stremio_router
from core.config import DEBRID_API_KEY, HOST, PORT, SOURCES_FILE, STREMIO_ADDON_URL
from core.credentials import CredentialStore
from debrid.realdebrid import RealDebridClient
from streams.sources import load_source_provider


def create_app(source_provider=None) -> FastAPI:
    app = FastAPI()

    # Stremio desktop/web clients require permissive CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
    )

    app.state.credentials = CredentialStore(DEBRID_API_KEY)
    app.state.source_provider = source_provider or load_source_provider(SOURCES_FILE)
    app.state.unlocker_factory = RealDebridClient

    @app.on_event("startup")
    def startup():
        print(f"[INFO] Arabic Stream Hub starting on port {PORT}")
        print(f"[INFO] Addon URL: {STREMIO_ADDON_URL}")

    # Public Stremio addon endpoints
    app.include_router(stremio_router)

    # Configure page
    app.include_router(configure_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
