from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

from ..helpers.form_values import parse_flag, parse_float_or, parse_int_or

FormFlag = Annotated[bool, BeforeValidator(parse_flag)]
FormInt = Annotated[int, BeforeValidator(parse_int_or)]
FormRate = Annotated[float, BeforeValidator(parse_float_or)]


class SettingsForm(BaseModel):
    """Settings page submission, decoded but not yet validated.

    Field names are the verbatim form keys. Absent keys take the zero value
    of their type, except `media_playback_rate` which defaults to normal speed.
    """

    username: str = ""
    password: str = ""
    confirmation: str = ""
    theme: str = ""
    language: str = ""
    timezone: str = ""
    entry_direction: str = ""
    entry_order: str = ""
    entries_per_page: FormInt = 0
    keyboard_shortcuts: FormFlag = False
    show_reading_time: FormFlag = False
    custom_css: str = ""
    entry_swipe: FormFlag = False
    gesture_nav: str = ""
    display_mode: str = ""
    default_reading_speed: FormInt = 0
    cjk_reading_speed: FormInt = 0
    default_home_page: str = ""
    categories_sorting_order: str = ""
    mark_read_on_view: FormFlag = False
    media_playback_rate: FormRate = 1.0
    block_filter_entry_rules: str = ""
    keep_filter_entry_rules: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ValidatedSettings(SettingsForm):
    """A SettingsForm that passed validation, with its password normalized."""


class UserSettingsRead(BaseModel):
    username: str
    theme: str
    language: str
    timezone: str
    entry_direction: str
    entry_order: str
    entries_per_page: int
    keyboard_shortcuts: bool
    show_reading_time: bool
    stylesheet: str
    entry_swipe: bool
    gesture_nav: str
    display_mode: str
    default_reading_speed: int
    cjk_reading_speed: int
    default_home_page: str
    categories_sorting_order: str
    mark_read_on_view: bool
    media_playback_rate: float
    block_filter_entry_rules: str
    keep_filter_entry_rules: str

    model_config = ConfigDict(from_attributes=True)
