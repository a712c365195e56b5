import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.database import SessionLocal, init_db
from core.errors import register_error_handlers
from core.logging_config import setup_logging

from employee.router import employee_router
from employee.service import seed_demo_employees
from employee.store import EmployeeStore

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "Employees",
        "description": "Employee operations",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_DEMO_DATA:
        with SessionLocal() as db:
            seed_demo_employees(EmployeeStore(db))
    logger.info("%s ready", settings.PROJECT_NAME)
    yield


app = FastAPI(title=settings.PROJECT_NAME, openapi_tags=openapi_tags, lifespan=lifespan)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_error_handlers(app)

app.include_router(employee_router, prefix=settings.API_PREFIX)


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
