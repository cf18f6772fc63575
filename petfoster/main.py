import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from petfoster.api.router import router as api_router
from petfoster.core.config import settings
from petfoster.core.errors import install_error_handlers
from petfoster.core.http_logging import install_http_logging
from petfoster.core.logging import configure_logging
from petfoster.services.filter_fields import build_filter_registry

configure_logging()
_LOG = logging.getLogger("petfoster")

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_http_logging(app)
install_error_handlers(app)

# Filled before the app serves anything and only read afterwards.
app.state.filter_fields = build_filter_registry()
_LOG.info("filter field registry ready for %s", ", ".join(app.state.filter_fields.entities()))

app.include_router(api_router)

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}

def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.LISTEN_HOST, port=settings.LISTEN_PORT, log_config=None)
