from collections.abc import Mapping

from ..domain.errors import (
    MandatoryFieldsError,
    PasswordMismatchError,
    PlaybackRateRangeError,
    ReadingSpeedNotPositiveError,
)
from ..models import User
from ..schemas.user_settings import SettingsForm, ValidatedSettings

MANDATORY_FIELDS = (
    "username",
    "theme",
    "language",
    "timezone",
    "entry_direction",
    "display_mode",
    "default_home_page",
)

MIN_MEDIA_PLAYBACK_RATE = 0.25
MAX_MEDIA_PLAYBACK_RATE = 4.0


def decode_settings_form(values: Mapping[str, str]) -> SettingsForm:
    """Build a SettingsForm from raw form values.

    Never fails: unparsable numbers fall back to 0 (integers) or 1.0
    (playback rate) and are left for `validate_settings` to judge.
    """
    raw = {name: values[name] for name in SettingsForm.model_fields if name in values}
    return SettingsForm.model_validate(raw)


def validate_settings(form: SettingsForm) -> ValidatedSettings:
    """Check the business rules in order and stop at the first broken one.

    Returns a new value; `form` itself is left as submitted.
    """
    if any(getattr(form, name) == "" for name in MANDATORY_FIELDS):
        raise MandatoryFieldsError()

    if form.cjk_reading_speed <= 0 or form.default_reading_speed <= 0:
        raise ReadingSpeedNotPositiveError()

    password = form.password
    if form.confirmation == "":
        # Browsers autofill the password field; without a confirmation the
        # user did not mean to change it.
        password = ""
    elif form.password != "" and form.password != form.confirmation:
        raise PasswordMismatchError()

    if not (
        MIN_MEDIA_PLAYBACK_RATE <= form.media_playback_rate <= MAX_MEDIA_PLAYBACK_RATE
    ):
        raise PlaybackRateRangeError()

    return ValidatedSettings.model_validate(
        {**form.model_dump(), "password": password}
    )


def merge_settings(settings: ValidatedSettings, user: User) -> User:
    user.username = settings.username
    user.theme = settings.theme
    user.language = settings.language
    user.timezone = settings.timezone
    user.entry_direction = settings.entry_direction
    user.entry_order = settings.entry_order
    user.entries_per_page = settings.entries_per_page
    user.keyboard_shortcuts = settings.keyboard_shortcuts
    user.show_reading_time = settings.show_reading_time
    user.stylesheet = settings.custom_css
    user.entry_swipe = settings.entry_swipe
    user.gesture_nav = settings.gesture_nav
    user.display_mode = settings.display_mode
    user.cjk_reading_speed = settings.cjk_reading_speed
    user.default_reading_speed = settings.default_reading_speed
    user.default_home_page = settings.default_home_page
    user.categories_sorting_order = settings.categories_sorting_order
    user.mark_read_on_view = settings.mark_read_on_view
    user.media_playback_rate = settings.media_playback_rate
    user.block_filter_entry_rules = settings.block_filter_entry_rules
    user.keep_filter_entry_rules = settings.keep_filter_entry_rules

    # stored as given; hashing happens before the user is persisted
    if settings.password != "":
        user.password = settings.password

    return user
