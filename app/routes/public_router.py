from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database_config import get_db
from app.constants.messages import MESSAGE
from app.routes.form_router import serialize_form
from app.schema.form_schema import SubmissionCreate
from app.services import form_service
from app.utils.logger_utils import handle_route_error

public_controller = APIRouter()


@public_controller.get("/{share_url}", response_model=dict)
def handle_get_form_content(share_url: str, db: Session = Depends(get_db)):
    """
    Load a form layout for a public visitor; counts one visit
    SQL: UPDATE forms SET visits = visits + 1 WHERE share_url = ?
    """
    try:
        content = form_service.get_form_content_by_url(db, share_url)
        return {"statusCode": 200, "message": MESSAGE.FORM_CONTENT, "data": {"content": content}}
    except Exception as e:
        handle_route_error(error=e, context="GET /submit/{share_url}")


@public_controller.post("/{share_url}", response_model=dict, status_code=201)
def handle_submit_form(share_url: str, data: SubmissionCreate, db: Session = Depends(get_db)):
    try:
        form = form_service.submit_form(db, share_url, data.content)
        return {
            "statusCode": 201,
            "message": MESSAGE.FORM_SUBMITTED,
            "data": {"id": form.id, "submissions": form.submissions},
        }
    except Exception as e:
        handle_route_error(error=e, context="POST /submit/{share_url}")
