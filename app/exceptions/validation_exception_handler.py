from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi import status
from app.constants.error import ERROR


def format_errors(raw_errors) -> list:
    errors = []

    for err in raw_errors:
        field = err["loc"][-1] if err["loc"] else "__root__"

        default_msg = err["msg"]

        custom_msg = getattr(ERROR, f"REQUIRED_{str(field).upper()}", default_msg)

        errors.append({
            "field": field,
            "message": custom_msg
        })

    return errors


def validation_exception_handler(request, exc: RequestValidationError):

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "statusCode": 400,
            "errors": "Validation failed",
            "message": format_errors(exc.errors())
        }
    )
