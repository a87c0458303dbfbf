"""SQLAlchemy ORM models.

Column names follow the existing MySQL schema; identifiers are stored as raw
16-byte values so the primary key indexes stay fixed-width.
"""

from datetime import datetime

from sqlalchemy import BINARY, CHAR, DateTime, ForeignKey, String
from sqlalchemy.dialects.mysql import DATETIME as MYSQL_DATETIME
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.validation import (
    ACTIVATION_TOKEN_LENGTH,
    EMAIL_MAX_LENGTH,
    PASSWORD_HASH_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)

# MySQL drops fractional seconds unless the precision is declared.
PreciseDateTime = DateTime().with_variant(MYSQL_DATETIME(fsp=6), "mysql")


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Registered user profile."""

    __tablename__ = "profile"

    id: Mapped[bytes] = mapped_column("profileId", BINARY(16), primary_key=True)
    activation_token: Mapped[str | None] = mapped_column(
        "profileActivationToken", CHAR(ACTIVATION_TOKEN_LENGTH), index=True
    )
    email: Mapped[str] = mapped_column(
        "profileEmail", String(EMAIL_MAX_LENGTH), nullable=False, unique=True
    )
    password_hash: Mapped[str] = mapped_column(
        "profileHash", CHAR(PASSWORD_HASH_LENGTH), nullable=False
    )
    username: Mapped[str] = mapped_column(
        "profileUsername", String(USERNAME_MAX_LENGTH), nullable=False, unique=True
    )


class PostModel(Base):
    """Post written by a profile."""

    __tablename__ = "post"

    id: Mapped[bytes] = mapped_column("postId", BINARY(16), primary_key=True)
    profile_id: Mapped[bytes] = mapped_column(
        "postProfileId",
        BINARY(16),
        ForeignKey("profile.profileId", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        "postContent", String(POST_CONTENT_MAX_LENGTH), nullable=False
    )
    date: Mapped[datetime] = mapped_column("postDate", PreciseDateTime, nullable=False)
    title: Mapped[str] = mapped_column(
        "postTitle", String(POST_TITLE_MAX_LENGTH), nullable=False
    )
