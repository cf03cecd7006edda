import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.config.database_config import Base


def utc_now():
    return datetime.now(timezone.utc)


class FormStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Form(Base):
    __tablename__ = "forms"

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(String(255), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=False, default="[]")

    published = Column(Boolean, nullable=False, default=False)
    visits = Column(Integer, nullable=False, default=0)
    submissions = Column(Integer, nullable=False, default=0)

    share_url = Column(
        String(36),
        nullable=False,
        unique=True,
        index=True,
        default=lambda: str(uuid.uuid4()),
    )

    created_at = Column(DateTime, default=utc_now, nullable=False)

    form_submissions = relationship(
        "FormSubmission",
        back_populates="form",
        order_by="FormSubmission.id",
    )

    @property
    def status(self) -> FormStatus:
        return FormStatus.PUBLISHED if self.published else FormStatus.DRAFT


class FormSubmission(Base):
    __tablename__ = "form_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    form_id = Column(
        Integer,
        ForeignKey("forms.id"),
        nullable=False,
        index=True,
    )

    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    form = relationship("Form", back_populates="form_submissions")
