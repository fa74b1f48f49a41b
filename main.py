import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Depends, Body, Request, Response
from fastapi.responses import JSONResponse

from api.schemas import UserResponse, ValidationErrorResponse, ErrorResponse, HealthResponse
from api.dependencies import get_registration_service, get_user_repository
from application.services import RegistrationService
from domain.exceptions import RegistrationValidationError, UserAlreadyExistsError
from infrastructure.config import get_settings
from infrastructure.repositories.mongo_repositories import MongoUserRepository

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the configured user store before serving requests"""
    repository = get_user_repository()
    if isinstance(repository, MongoUserRepository):
        await repository.ensure_indexes()
    logger.info(f"{settings.app_name} started with '{settings.user_store}' user store")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    description="User registration for the Noteful notes application",
    version="1.0.0",
    lifespan=lifespan
)

# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(RegistrationValidationError)
async def registration_validation_error_handler(request: Request, exc: RegistrationValidationError):
    return JSONResponse(status_code=exc.code, content=exc.to_dict())

@app.exception_handler(UserAlreadyExistsError)
async def user_already_exists_handler(request: Request, exc: UserAlreadyExistsError):
    return JSONResponse(status_code=exc.status, content=exc.to_dict())

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"status": 500, "message": "Internal Server Error"})

# ============================================================================
# HEALTH ENDPOINT
# ============================================================================

@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# ============================================================================
# USER ENDPOINTS
# ============================================================================

@app.post(
    "/api/users",
    response_model=UserResponse,
    status_code=201,
    tags=["Users"],
    responses={422: {"model": ValidationErrorResponse}, 400: {"model": ErrorResponse}},
)
async def register_user(
    request: Request,
    response: Response,
    payload: Dict[str, Any] = Body(default={}),
    service: RegistrationService = Depends(get_registration_service)
):
    """Register a new user"""
    user = await service.register(payload)
    response.headers["Location"] = f"{request.url.path}/{user.id}"
    return UserResponse(**user.to_public())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
