from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config.database_config import Base, engine
from app.config.logger_config import setup_logging
from app.exceptions import CustomException, custom_exception_handler, validation_exception_handler
from app.models import form_model  # noqa: F401  registers tables on Base.metadata
from app.routes.form_router import form_controller
from app.routes.public_router import public_controller
from app.utils.logger_utils import log_info

# Initialize logging
setup_logging()

app = FastAPI(
    title="Form Builder",
    swagger_ui_parameters={
        "persistAuthorization": True
    }
)

log_info(context="APP_STARTUP", message="FastAPI application started")


@app.get("/health")
def server_life_check():
    return {"statusCode": 200, "data": "Your server is running successfully"}


Base.metadata.create_all(bind=engine)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(CustomException, custom_exception_handler)

app.include_router(form_controller, prefix="/forms", tags=["Forms"])
app.include_router(public_controller, prefix="/submit", tags=["Submissions"])

origins = [
    "*"
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
