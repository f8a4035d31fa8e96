# pyright: reportUnannotatedClassAttribute=false
import uuid
from datetime import datetime

from sqlmodel import Field
from sqlalchemy import BigInteger, DateTime, String, Text

from ...schemas.user import UserPreferencesBase
from ._common import utcnow


class User(UserPreferencesBase, table=True):
    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    username: str = Field(
        index=True,
        unique=True,
        nullable=False,
        sa_type=String,
    )

    # bcrypt hash once persisted
    password: str = Field(default="", nullable=False, sa_type=String)

    stylesheet: str = Field(default="", sa_type=Text)
    block_filter_entry_rules: str = Field(default="", sa_type=Text)
    keep_filter_entry_rules: str = Field(default="", sa_type=Text)

    # form integers are parsed as int64
    entries_per_page: int = Field(default=100, sa_type=BigInteger)
    default_reading_speed: int = Field(default=265, sa_type=BigInteger)
    cjk_reading_speed: int = Field(default=500, sa_type=BigInteger)

    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )
