from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.config.env_config import settings
from app.constants.error import ERROR
from app.exceptions import AuthError, CustomException, NotFoundError, PersistenceError, ValidationError
from app.models.form_model import Form, FormSubmission
from app.schema.form_schema import validate_form_input
from app.utils.logger_utils import handle_service_error, log_database_operation
import logging

logger = logging.getLogger(__name__)


def _require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise AuthError()
    return user_id


def _owned_form_query(db: Session, form_id: int, user_id: str):
    return db.query(Form).filter(Form.id == form_id, Form.user_id == user_id)


def build_share_link(share_url: str) -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/submit/{share_url}"


def calculate_stats(visits: int, submissions: int) -> Dict[str, Any]:
    visits = visits or 0
    submissions = submissions or 0

    submission_rate = 0.0
    if visits > 0:
        submission_rate = (submissions / visits) * 100

    bounce_rate = 100 - submission_rate

    return {
        "visits": visits,
        "submissions": submissions,
        "submissionRate": submission_rate,
        "bounceRate": bounce_rate,
    }


def get_form_stats(db: Session, user_id: Optional[str]) -> Dict[str, Any]:
    """
    Aggregate visits and submissions over every form owned by the user
    SQL: SELECT SUM(visits), SUM(submissions) FROM forms WHERE user_id = ?
    """
    try:
        user_id = _require_user(user_id)

        visits, submissions = (
            db.query(
                func.coalesce(func.sum(Form.visits), 0),
                func.coalesce(func.sum(Form.submissions), 0),
            )
            .filter(Form.user_id == user_id)
            .one()
        )
        return calculate_stats(int(visits), int(submissions))
    except CustomException:
        raise
    except SQLAlchemyError as e:
        handle_service_error(e, "get_form_stats", PersistenceError())


def create_form(db: Session, data: Any, user_id: Optional[str]) -> int:
    """
    Validate the input, then insert a draft form owned by the user.
    Returns the new form id.
    """
    validation = validate_form_input(data)
    if not validation.success:
        raise ValidationError(errors=validation.errors)

    try:
        user_id = _require_user(user_id)

        new_form = Form(
            user_id=user_id,
            name=validation.data.name,
            description=validation.data.description,
        )
        db.add(new_form)
        db.commit()
        db.refresh(new_form)

        if new_form.id is None:
            raise PersistenceError(ERROR.FORM_NOT_CREATED)

        log_database_operation("INSERT", "create_form", {"form_id": new_form.id, "user_id": user_id})
        return new_form.id
    except CustomException:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        handle_service_error(e, "create_form", PersistenceError(ERROR.FORM_NOT_CREATED))


def get_forms(db: Session, user_id: Optional[str]) -> List[Form]:
    try:
        user_id = _require_user(user_id)

        return (
            db.query(Form)
            .filter(Form.user_id == user_id)
            .order_by(Form.created_at.desc(), Form.id.desc())
            .all()
        )
    except CustomException:
        raise
    except SQLAlchemyError as e:
        handle_service_error(e, "get_forms", PersistenceError())


def get_form_by_id(db: Session, form_id: int, user_id: Optional[str]) -> Form:
    try:
        user_id = _require_user(user_id)

        form = _owned_form_query(db, form_id, user_id).first()
        if not form:
            raise NotFoundError()
        return form
    except CustomException:
        raise
    except SQLAlchemyError as e:
        handle_service_error(e, "get_form_by_id", PersistenceError())


def update_form_content(db: Session, form_id: int, content: str, user_id: Optional[str]) -> Form:
    """
    Overwrite the layout document of an owned form.
    Published state is not checked here; the builder UI stops editing after publish.
    """
    try:
        user_id = _require_user(user_id)

        form = _owned_form_query(db, form_id, user_id).first()
        if not form:
            raise NotFoundError()

        form.content = content
        db.commit()
        db.refresh(form)

        log_database_operation("UPDATE", "update_form_content", {"form_id": form_id})
        return form
    except CustomException:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        handle_service_error(e, "update_form_content", PersistenceError())


def publish_form(db: Session, form_id: int, user_id: Optional[str]) -> Form:
    """One-way draft -> published transition. Re-publishing leaves the form published."""
    try:
        user_id = _require_user(user_id)

        form = _owned_form_query(db, form_id, user_id).first()
        if not form:
            raise NotFoundError()

        form.published = True
        db.commit()
        db.refresh(form)

        logger.info(f"Form {form_id} published by {user_id}")
        log_database_operation("UPDATE", "publish_form", {"form_id": form_id})
        return form
    except CustomException:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        handle_service_error(e, "publish_form", PersistenceError())


def get_form_content_by_url(db: Session, share_url: str) -> str:
    """
    Public fetch of a form's layout, counting one visit.
    Drafts are served too; only submit_form requires the form to be published.
    SQL: UPDATE forms SET visits = visits + 1 WHERE share_url = ?
    """
    try:
        updated = (
            db.query(Form)
            .filter(Form.share_url == share_url)
            .update({Form.visits: Form.visits + 1})
        )
        if not updated:
            db.rollback()
            raise NotFoundError()

        content = db.query(Form.content).filter(Form.share_url == share_url).scalar()
        db.commit()

        log_database_operation("UPDATE", "get_form_content_by_url", {"share_url": share_url})
        return content
    except CustomException:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        handle_service_error(e, "get_form_content_by_url", PersistenceError())


def submit_form(db: Session, share_url: str, content: str) -> Form:
    """
    Record a public submission against a published form.
    SQL: UPDATE forms SET submissions = submissions + 1 WHERE share_url = ? AND published = 1
         INSERT INTO form_submissions (form_id, content, created_at) VALUES (?, ?, ?)
    """
    try:
        updated = (
            db.query(Form)
            .filter(Form.share_url == share_url, Form.published.is_(True))
            .update({Form.submissions: Form.submissions + 1})
        )
        if not updated:
            db.rollback()
            raise NotFoundError(ERROR.FORM_NOT_PUBLISHED)

        form = db.query(Form).filter(Form.share_url == share_url).one()
        db.add(FormSubmission(form_id=form.id, content=content))
        db.commit()
        db.refresh(form)

        log_database_operation("INSERT", "submit_form", {"form_id": form.id})
        return form
    except CustomException:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        handle_service_error(e, "submit_form", PersistenceError(ERROR.SUBMISSION_NOT_CREATED))


def get_form_with_submissions(db: Session, form_id: int, user_id: Optional[str]) -> Form:
    try:
        user_id = _require_user(user_id)

        form = (
            _owned_form_query(db, form_id, user_id)
            .options(selectinload(Form.form_submissions))
            .first()
        )
        if not form:
            raise NotFoundError()
        return form
    except CustomException:
        raise
    except SQLAlchemyError as e:
        handle_service_error(e, "get_form_with_submissions", PersistenceError())
