"""
Application configuration.

This module centralizes environment-based configuration for the
Arabic Stream Hub addon, including TMDB access, the Real-Debrid
endpoint, network timeouts, and server binding.
"""

import os

# TMDB access; must be provided at startup, fail fast if missing
TMDB_API_KEY = os.getenv("TMDB_API_KEY")

if not TMDB_API_KEY:
    raise RuntimeError("TMDB_API_KEY is not set")

TMDB_BASE = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"
TMDB_LANGUAGE = os.getenv("TMDB_LANGUAGE", "ar-AE")

# TMDB discover endpoints return fixed-size pages
TMDB_PAGE_SIZE = 20

# Unlock service (Real-Debrid REST API)
REAL_DEBRID_BASE_URL = os.getenv(
    "REAL_DEBRID_BASE_URL",
    "https://api.real-debrid.com/rest/1.0",
)

# Optional credential applied at startup; the configure page overrides it
DEBRID_API_KEY = os.getenv("DEBRID_API_KEY", "")

# Per-call timeout (seconds) for every outbound request
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

# Candidates resolved in parallel per stream request (1 = sequential)
RESOLVE_WORKERS = int(os.getenv("RESOLVE_WORKERS", "1"))

# Server binding
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "7000"))

# Public addon URL shown in the startup log
STREMIO_ADDON_URL = os.getenv(
    "STREMIO_ADDON_URL",
    f"http://localhost:{PORT}/manifest.json",
)

# Stream provider display name shown in Stremio
STREAM_PROVIDER_NAME = os.getenv("STREAM_PROVIDER_NAME", "Arabic Stream Hub")

# Optional JSON file mapping content ids to magnet URIs (static candidate list)
SOURCES_FILE = os.getenv("SOURCES_FILE")
