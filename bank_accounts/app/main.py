import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router
from .core.config import get_settings
from .core.db import init_db
from .core.dependencies import close_customer_client
from .services import check_rule_coverage

settings = get_settings()
logging.basicConfig(level=settings.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI):
    check_rule_coverage()
    init_db()
    yield
    close_customer_client()

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(accounts_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
