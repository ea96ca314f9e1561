"""FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded

from cvchat.api.limiter import limiter
from cvchat.config import settings
from cvchat.db.base import init_db
from cvchat.utils.logging import setup_logging

ALLOWED_ORIGINS = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

FRONTEND_DIR = Path(__file__).parent.parent.parent / "frontend" / "dist"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize database on startup."""
    setup_logging(settings.log_level)
    init_db()
    yield


app = FastAPI(
    title="CV Chat API",
    description="Chat with an AI assistant about a CV imported from markdown",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from cvchat.api.routes import chat, cv, profile, sections, suggestions  # noqa: E402

app.include_router(profile.router, prefix="/api/cv-profile", tags=["Profile"])
app.include_router(sections.router, prefix="/api/cv-sections", tags=["Sections"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(cv.router, prefix="/api/cv", tags=["CV"])
app.include_router(suggestions.router, prefix="/api/suggestions", tags=["Suggestions"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Serve static files from frontend build
if FRONTEND_DIR.exists():
    app.mount("/assets", StaticFiles(directory=FRONTEND_DIR / "assets"), name="assets")

    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        """Serve the SPA for all non-API routes."""
        file_path = FRONTEND_DIR / full_path
        if file_path.exists() and file_path.is_file():
            return FileResponse(file_path)
        return FileResponse(FRONTEND_DIR / "index.html")
