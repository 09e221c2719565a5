"""SQLAlchemy models for card profiles and their custom links."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class ProfileRecord(Base):
    __tablename__ = "profiles"

    slug = Column(String(128), primary_key=True)
    full_name = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    website = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    avatar_url = Column(Text, nullable=True)
    theme = Column(String(32), default="light", nullable=False)
    theme_color = Column(String(16), nullable=True)
    theme_gradient_from = Column(String(16), nullable=True)
    theme_gradient_to = Column(String(16), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    links = relationship(
        "LinkRecord",
        back_populates="profile",
        cascade="all,delete-orphan",
        order_by="LinkRecord.id",
        lazy="selectin",
    )

    def as_record(self) -> dict:
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}


class LinkRecord(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_slug = Column(String(128), ForeignKey("profiles.slug", ondelete="CASCADE"), nullable=False, index=True)
    label = Column(String(255), nullable=True)
    url = Column(Text, nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    profile = relationship("ProfileRecord", back_populates="links")

    def as_record(self) -> dict:
        return {"id": self.id, "label": self.label, "url": self.url, "sort_order": self.sort_order}
