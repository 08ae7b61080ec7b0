# app/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routers import admin, carts, health, orders, products
from app.exceptions import ShopError
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    message = first.get("msg", "Invalid request")
    return JSONResponse(status_code=400, content={"error": message, "code": "VALIDATION_ERROR"})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "code": "NOT_FOUND", "path": request.url.path},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail), "code": "HTTP_ERROR"})


async def unhandled_error_handler(request: Request, exc: Exception):
    # szczegoly tylko w logu, klient dostaje ogolny komunikat
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Something went wrong", "code": "INTERNAL_ERROR"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.error(f"{request.method} {request.url.path} -> unhandled error")
            raise
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(admin.router)

    return app
