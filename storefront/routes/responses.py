# routes/responses.py
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from storefront.models.enums import ErrorKind
from storefront.services.result import Result
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONSTRAINT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope_response(result: Result, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Render a Result as its envelope, choosing the status code from the failure kind."""
    status_code = success_status if result.success else STATUS_BY_KIND[result.kind]
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result.to_envelope()))


def validation_error_response(request: Request, exc: RequestValidationError) -> JSONResponse:
    # the rejected input is left out; it may hold values JSON cannot carry (NaN, Infinity)
    details = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    logger.warning("Validation error on {} {}: {}", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({"success": False, "error": "Validation error", "details": details}),
    )
