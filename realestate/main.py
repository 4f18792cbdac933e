from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from realestate.api.exception_handlers import register_exception_handlers
from realestate.api.router import api_router
from realestate.core.config import settings


def allowed_origins() -> list[str]:
    """The frontend origin (scheme and host only), when FRONTEND_URL is set."""
    if not settings.frontend_url:
        return []
    parsed = urlparse(settings.frontend_url)
    return [f"{parsed.scheme}://{parsed.netloc}"]


app = FastAPI(
    title="Real Estate Management API",
    description="Owners, properties, tenants, contracts, payments and maintenance.",
)

origins = allowed_origins()
if origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
