from fastapi.responses import JSONResponse
from app.exceptions.custom_exception import CustomException, ValidationError


def custom_exception_handler(request, exc: CustomException):
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "statusCode": exc.status_code,
                "errors": exc.message,
                "message": exc.errors
            }
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "statusCode": exc.status_code,
            "message": exc.message
        }
    )
