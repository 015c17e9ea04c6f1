import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from student_directory.database import init_db
from student_directory.exceptions import (
    ConstraintViolation,
    DirectoryServiceException,
    StorageUnavailable,
    ValidationError,
)
from student_directory.routes import department_routes, student_routes

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title)

# The UI is served from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(department_routes.router)
app.include_router(student_routes.router)

ERROR_STATUS = {
    ValidationError: 422,
    ConstraintViolation: 409,
    StorageUnavailable: 503,
}


@app.exception_handler(DirectoryServiceException)
async def directory_error_handler(request: Request, exc: DirectoryServiceException):
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "errors": exc.details},
    )


@app.on_event("startup")
async def startup():
    init_db()
    logger.info(f"{settings.app_title} started")


@app.get("/api/health")
async def health():
    return {"status": "ok"}
