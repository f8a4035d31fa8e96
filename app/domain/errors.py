from __future__ import annotations

from typing import ClassVar

from .enums import SettingsErrorKind


class SettingsValidationError(Exception):
    """Raised when a decoded settings form breaks a business rule.

    These are user-correctable input errors. `kind` identifies the rule
    and doubles as the message catalog key.
    """

    kind: ClassVar[SettingsErrorKind]

    def __init__(self) -> None:
        super().__init__(self.kind.value)

    @property
    def code(self) -> str:
        return self.kind.value


class MandatoryFieldsError(SettingsValidationError):
    kind = SettingsErrorKind.MANDATORY_FIELDS


class ReadingSpeedNotPositiveError(SettingsValidationError):
    kind = SettingsErrorKind.READING_SPEED_NOT_POSITIVE


class PasswordMismatchError(SettingsValidationError):
    kind = SettingsErrorKind.PASSWORD_MISMATCH


class PlaybackRateRangeError(SettingsValidationError):
    kind = SettingsErrorKind.PLAYBACK_RATE_RANGE
