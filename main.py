"""
Main application entry point for the Contact Management API.

This module initializes the FastAPI application, configures CORS,
installs the exception handlers that render every failure in the
``{"errors": ...}`` envelope, and includes the routers for users,
contacts and addresses.

Modules:
- FastAPI: Web framework
- CORSMiddleware: Middleware for handling CORS
- app.database: Database engine
- app.models: SQLAlchemy models
- app.users: Users router
- app.contacts: Contacts router
- app.addresses: Addresses router
- app.core: Application settings
- app.logger: Configured loguru logger
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.database import engine
from app import models, contacts, addresses
from app.users import router as users_router
from app.core import get_settings
from app.logger import logger

# Create tables (for development only)
models.Base.metadata.create_all(bind=engine)

settings = get_settings()

# Initialize FastAPI application
app = FastAPI(title="Contact Management API")

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path and resulting status of every request."""
    response = await call_next(request)
    logger.debug(
        "{} {} -> {}", request.method, request.url.path, response.status_code
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render HTTP errors in the error envelope.

    Returns:
        JSONResponse: ``{"errors": <detail>}`` with the original status code.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Render request validation failures as a list of field errors.

    Returns:
        JSONResponse: 400 response with one entry per failing field.
    """
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) or ".".join(loc)
        errors.append({"field": field, "message": error.get("msg", "")})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected failures and answer with a generic 500 envelope."""
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": "Internal server error"},
    )


# Include routers for application areas
app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(contacts.router, prefix=settings.API_PREFIX)
app.include_router(addresses.router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """
    Root endpoint for the API.

    Returns a simple JSON message directing users to the Swagger UI.

    Returns:
        dict: JSON message with information about the API
    """
    return {"msg": "Contact Management API. Visit /docs for Swagger UI"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
