from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request

from core.exceptions import FPLServiceError
from core.logging import get_logger
from schemas.common import error_response, ApiStatus

log = get_logger("middleware")


def setup_middleware(app: FastAPI):
    """Setup CORS and global exception handlers"""

    # Global exception handler for validation errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", url=str(request.url), errors=exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": exc.errors()}
            )
        )

    # Service errors carry their own status and code; clients never see upstream detail
    @app.exception_handler(FPLServiceError)
    async def fpl_service_exception_handler(request: Request, exc: FPLServiceError):
        log.warning(
            "fpl_service_error",
            url=str(request.url),
            error_code=exc.error_code,
            reason=getattr(exc, "reason", None),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                message=exc.message,
                status=exc.api_status,
                error_code=exc.error_code,
            )
        )

    # Read-only GET API; any origin may poll it
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
