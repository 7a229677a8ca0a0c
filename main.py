import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from api import errors
from api.gate import route_gate
from api.routes.router import api_router, site_router
from config import settings
from services.db import init_models

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.create_tables:
        await init_models()
        _LOG.info("schema ready (%s)", settings.env_name)
    yield


app = FastAPI(title="Fitness Tracker API", version="1.0.0", lifespan=lifespan)

# CORS: the site itself is the only browser origin that may carry the session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.site_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(route_gate)
errors.install(app)

app.include_router(api_router, prefix="/api")
app.include_router(site_router)


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.env_name}
