import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.routes import admin, messages, student, teacher, users
from app.core.config import get_settings
from app.core.errors import InternalError
from app.db.base import Base
from app.db.session import engine

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


class UTF8Middleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Content-Type"] = "application/json; charset=utf-8"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    os.makedirs(settings.files_dir, exist_ok=True)
    logger.info(f"{settings.project_name} started, media in {settings.files_dir}")
    yield


app = FastAPI(title=settings.project_name, lifespan=lifespan)

app.add_middleware(UTF8Middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Missing or invalid fields", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(OSError)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


app.include_router(users.router, tags=["users"])
app.include_router(messages.router, tags=["messages"])
app.include_router(student.router, tags=["student"])
app.include_router(teacher.router, tags=["teacher"])
app.include_router(admin.router, tags=["admin"])

app.mount(settings.files_base_url, StaticFiles(directory=settings.files_dir, check_dir=False), name="uploads")


@app.get("/")
def root():
    return {"message": "🚀 School Mate Server Running Successfully!"}
