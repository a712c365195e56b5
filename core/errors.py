import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class EmployeeNotFound(Exception):
    """Raised when an employee id lookup comes back empty."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        self.message = f"No Employee found with ID: {employee_id}"
        super().__init__(self.message)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(EmployeeNotFound)
    async def employee_not_found_handler(request: Request, exc: EmployeeNotFound):
        logger.warning("%s (%s %s)", exc.message, request.method, request.url.path)
        return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ]
            },
        )
