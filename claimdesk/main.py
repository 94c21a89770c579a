import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from claimdesk.config import get_settings
from claimdesk.routers import cases, claims, returns
from claimdesk.utils.errors import register_exception_handlers

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

CLIENT_DIST = Path(settings.CLIENT_DIST_DIR)

app = FastAPI(title="ClaimDesk")


@app.on_event("startup")
def on_startup():
    # Ensure all DB tables exist after all models are imported
    from claimdesk.models.base import init_db

    try:
        init_db()
    except Exception as e:
        logger.error(f"Startup table creation failed: {e}")
        raise


register_exception_handlers(app)

# CORS configuration for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(claims.router, prefix="/api/claims", tags=["claims"])
app.include_router(returns.router, prefix="/api/returns", tags=["returns"])
app.include_router(cases.router, prefix="/api/cases", tags=["cases"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


# Serve built client assets when present
if (CLIENT_DIST / "assets").is_dir():
    app.mount("/assets", StaticFiles(directory=str(CLIENT_DIST / "assets")), name="assets")


# Any other GET gets the client entry document; unknown API paths stay 404
@app.get("/{full_path:path}", include_in_schema=False)
def client_entry(full_path: str):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")
    index = CLIENT_DIST / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Client build not found")
    return FileResponse(index)


# --- Entry point for local runs ---
if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("claimdesk.main:app", host="0.0.0.0", port=port, reload=False)
