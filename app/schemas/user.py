import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from sqlmodel import SQLModel


class UserPreferencesBase(SQLModel):
    theme: str = "light_serif"
    language: str = "en_US"
    timezone: str = "UTC"
    entry_direction: str = "asc"
    entry_order: str = "published_at"
    entries_per_page: int = 100
    keyboard_shortcuts: bool = True
    show_reading_time: bool = True
    stylesheet: str = ""
    entry_swipe: bool = True
    gesture_nav: str = "tap"
    display_mode: str = "standalone"
    default_reading_speed: int = 265
    cjk_reading_speed: int = 500
    default_home_page: str = "unread"
    categories_sorting_order: str = "unread_count"
    mark_read_on_view: bool = True
    media_playback_rate: float = 1.0
    block_filter_entry_rules: str = ""
    keep_filter_entry_rules: str = ""


class UserRead(BaseModel):
    id: uuid.UUID
    username: str
    language: str
    timezone: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
