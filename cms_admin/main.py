from fastapi import FastAPI

from cms_admin.api import account
from cms_admin.config import settings
from cms_admin.log import configure_logging

configure_logging(settings.log_level)

app = FastAPI(
    title="CMS Admin",
    description="Server-side account helpers for the CMS admin console",
    version="0.1.0",
)

app.include_router(account.router, prefix="/api", tags=["account"])


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.app_env}
