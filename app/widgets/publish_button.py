from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

from sqlalchemy.orm import Session

from app.config.logger_config import get_logger
from app.services import form_service
from app.utils.logger_utils import log_info

logger = get_logger(__name__)


@dataclass(frozen=True)
class Toast:
    title: str
    description: str


SUCCESS_TOAST = Toast(title="Success", description="Your form has been published!")
ERROR_TOAST = Toast(title="Error", description="Something went wrong, please try again.")

DIALOG_TITLE = "Are you sure?"
DIALOG_DESCRIPTION = (
    "You cannot edit the form after publishing. This action is irreversible. "
    "By publishing this form you will make it available to the public "
    "and you will be able to collect submissions."
)


class PublishFormButton:
    """
    Confirmation flow in front of the publish action.

    ``open()`` shows the dialog, ``proceed()`` runs ``publish_action(form_id)``
    exactly once while the Proceed trigger is disabled. Success or failure is
    reported through ``notify``; the dialog closes either way.
    """

    def __init__(
        self,
        form_id: int,
        publish_action: Callable[[int], Awaitable[Any]],
        notify: Callable[[Toast], None],
        refresh: Optional[Callable[[], None]] = None,
    ):
        self.form_id = form_id
        self._publish_action = publish_action
        self._notify = notify
        self._refresh = refresh
        self.is_open = False
        self.loading = False

    @property
    def proceed_disabled(self) -> bool:
        return self.loading

    def open(self) -> None:
        self.is_open = True

    def cancel(self) -> None:
        if not self.loading:
            self.is_open = False

    async def proceed(self) -> bool:
        if not self.is_open or self.proceed_disabled:
            return False

        self.loading = True
        try:
            await self._publish_action(self.form_id)
        except Exception as e:
            logger.warning(f"[PublishFormButton] publish of form {self.form_id} failed: {e}")
            self._notify(ERROR_TOAST)
            return False
        else:
            log_info(context="PublishFormButton", message=f"Form {self.form_id} published")
            self._notify(SUCCESS_TOAST)
            if self._refresh:
                self._refresh()
            return True
        finally:
            self.loading = False
            self.is_open = False

    def render(self) -> Dict[str, Any]:
        return {
            "label": "Publish",
            "dialog": {
                "open": self.is_open,
                "title": DIALOG_TITLE,
                "description": DIALOG_DESCRIPTION,
                "actions": [
                    {"label": "Cancel", "disabled": False},
                    {"label": "Proceed", "disabled": self.proceed_disabled, "busy": self.loading},
                ],
            },
        }


def service_publish_action(db: Session, user_id: Optional[str]) -> Callable[[int], Awaitable[Any]]:
    """Bind publish_form to a session and caller so the button can await it."""

    async def publish(form_id: int):
        return form_service.publish_form(db, form_id, user_id)

    return publish
