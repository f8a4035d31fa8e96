import enum


class SettingsErrorKind(str, enum.Enum):
    """Reasons a settings form is rejected; values are message catalog keys."""

    MANDATORY_FIELDS = "error.settings_mandatory_fields"
    READING_SPEED_NOT_POSITIVE = "error.settings_reading_speed_is_positive"
    PASSWORD_MISMATCH = "error.different_passwords"
    PLAYBACK_RATE_RANGE = "error.settings_media_playback_rate_range"
