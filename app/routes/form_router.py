from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.config.database_config import get_db
from app.constants.messages import MESSAGE
from app.middleware.auth_middleware import auth_middleware
from app.models.form_model import Form
from app.schema.form_schema import FormContentUpdate, FormResponse, FormWithSubmissionsResponse
from app.services import form_service
from app.utils.logger_utils import handle_route_error

form_controller = APIRouter()


def serialize_form(form: Form, with_submissions: bool = False) -> Dict[str, Any]:
    schema = FormWithSubmissionsResponse if with_submissions else FormResponse
    payload = schema.model_validate(form)
    payload.share_link = form_service.build_share_link(form.share_url)
    return payload.model_dump(mode="json")


@form_controller.get("/stats", response_model=dict)
def handle_form_stats(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        response = form_service.get_form_stats(db, user_id)
        return {"statusCode": 200, "message": MESSAGE.FORM_STATS, "data": response}
    except Exception as e:
        handle_route_error(error=e, context="GET /forms/stats")


@form_controller.post("/create", response_model=dict, status_code=201)
def handle_create_form(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    """
    Create a draft form
    SQL: INSERT INTO forms (user_id, name, description, ...) VALUES (?, ?, ?, ...)
    """
    try:
        form_id = form_service.create_form(db, data, user_id)
        return {"statusCode": 201, "message": MESSAGE.FORM_CREATED, "data": {"id": form_id}}
    except Exception as e:
        handle_route_error(error=e, context="POST /forms/create")


@form_controller.get("", response_model=dict)
def handle_get_forms(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        forms = form_service.get_forms(db, user_id)
        return {
            "statusCode": 200,
            "message": MESSAGE.FORMS_FOUND,
            "data": [serialize_form(form) for form in forms],
        }
    except Exception as e:
        handle_route_error(error=e, context="GET /forms")


@form_controller.get("/{form_id}", response_model=dict)
def handle_get_form(
    form_id: int,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        form = form_service.get_form_by_id(db, form_id, user_id)
        return {"statusCode": 200, "message": MESSAGE.FORM_FOUND, "data": serialize_form(form)}
    except Exception as e:
        handle_route_error(error=e, context=f"GET /forms/{form_id}")


@form_controller.put("/{form_id}/content", response_model=dict)
def handle_update_form_content(
    form_id: int,
    data: FormContentUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        form = form_service.update_form_content(db, form_id, data.content, user_id)
        return {"statusCode": 200, "message": MESSAGE.FORM_UPDATED, "data": serialize_form(form)}
    except Exception as e:
        handle_route_error(error=e, context=f"PUT /forms/{form_id}/content")


@form_controller.post("/{form_id}/publish", response_model=dict)
def handle_publish_form(
    form_id: int,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        form = form_service.publish_form(db, form_id, user_id)
        return {"statusCode": 200, "message": MESSAGE.FORM_PUBLISHED, "data": serialize_form(form)}
    except Exception as e:
        handle_route_error(error=e, context=f"POST /forms/{form_id}/publish")


@form_controller.get("/{form_id}/submissions", response_model=dict)
def handle_get_form_submissions(
    form_id: int,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(auth_middleware),
):
    try:
        form = form_service.get_form_with_submissions(db, form_id, user_id)
        return {
            "statusCode": 200,
            "message": MESSAGE.SUBMISSIONS_FOUND,
            "data": serialize_form(form, with_submissions=True),
        }
    except Exception as e:
        handle_route_error(error=e, context=f"GET /forms/{form_id}/submissions")
