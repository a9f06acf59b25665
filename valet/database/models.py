from datetime import datetime
import uuid

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class License(Base):
    """
    A purchased software license.

    Registration fields are stored as empty strings rather than NULL so the
    edit form can compare them against text inputs directly.
    """

    __tablename__ = "licenses"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    software_name = Column(String, nullable=False, default="")
    download_url = Column(String, nullable=True)
    registered_to_name = Column(String, nullable=False, default="")
    registered_to_email = Column(String, nullable=False, default="")
    license_key = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")  # markdown
    icon_path = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    attachments = relationship(
        "Attachment",
        back_populates="license",
        cascade="all, delete-orphan",
        order_by="Attachment.added_at",
    )

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"License(id={self.id}, software_name={self.software_name})"


class Attachment(Base):
    __tablename__ = "attachments"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    license_id = Column(String, ForeignKey("licenses.id"), nullable=False)
    filename = Column(String, nullable=False)
    data = Column(LargeBinary, nullable=False)
    size = Column(Integer, nullable=False, default=0)
    added_at = Column(DateTime, default=datetime.utcnow)

    license = relationship("License", back_populates="attachments")

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Attachment(id={self.id}, license_id={self.license_id}, filename={self.filename})"
