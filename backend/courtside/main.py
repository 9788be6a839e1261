import logging
import os
import subprocess
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courtside.database import init_db
from courtside.routes import courts, players, public, runtime, signups, tournaments

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Get build info
def get_build_info():
    """Get git commit hash or build timestamp"""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=os.path.dirname(os.path.dirname(__file__)),
            capture_output=True,
            text=True,
            timeout=2,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (OSError, subprocess.SubprocessError):
        pass

    # Fallback to build timestamp
    return datetime.now().strftime("%Y%m%d-%H%M%S")


BUILD_HASH = get_build_info()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    route_count = sum(1 for r in app.routes if getattr(r, "path", None))
    logger.info("Courtside API ready: %d routes, build %s", route_count, BUILD_HASH)
    yield


app = FastAPI(title="Courtside Tournament API", lifespan=lifespan)

_cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tournaments.router, prefix="/api", tags=["tournaments"])
# Runtime (court assignment, results, advancement)
app.include_router(runtime.router, prefix="/api", tags=["runtime"])
app.include_router(courts.router, prefix="/api", tags=["courts"])
app.include_router(signups.router, prefix="/api", tags=["signups"])
app.include_router(players.router, prefix="/api", tags=["players"])

# Public read-only endpoints (no auth)
app.include_router(public.router, prefix="/api", tags=["public"])


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify which code is running"""
    return {"app_name": "Courtside Tournament API", "build_hash": BUILD_HASH, "status": "healthy"}
