"""Tests for the settings business rules."""

from __future__ import annotations

import pytest

from app.domain.enums import SettingsErrorKind
from app.domain.errors import (
    MandatoryFieldsError,
    PasswordMismatchError,
    PlaybackRateRangeError,
    ReadingSpeedNotPositiveError,
    SettingsValidationError,
)
from app.helpers.user_settings import (
    MANDATORY_FIELDS,
    decode_settings_form,
    validate_settings,
)
from app.schemas.user_settings import ValidatedSettings


def _validate(values):
    return validate_settings(decode_settings_form(values))


def test_valid_form_passes(form_values):
    validated = _validate(form_values)
    assert isinstance(validated, ValidatedSettings)
    assert validated.username == "alice"


@pytest.mark.parametrize("field", MANDATORY_FIELDS)
def test_missing_mandatory_field(form_values, field):
    del form_values[field]
    with pytest.raises(MandatoryFieldsError):
        _validate(form_values)


@pytest.mark.parametrize("field", MANDATORY_FIELDS)
def test_empty_mandatory_field(form_values, field):
    form_values[field] = ""
    with pytest.raises(MandatoryFieldsError):
        _validate(form_values)


@pytest.mark.parametrize("field", ["default_reading_speed", "cjk_reading_speed"])
@pytest.mark.parametrize("raw", ["0", "-1", "notanumber", ""])
def test_reading_speed_must_be_positive(form_values, field, raw):
    form_values[field] = raw
    with pytest.raises(ReadingSpeedNotPositiveError):
        _validate(form_values)


def test_mandatory_fields_checked_before_reading_speed(form_values):
    form_values["theme"] = ""
    form_values["default_reading_speed"] = "0"
    with pytest.raises(MandatoryFieldsError):
        _validate(form_values)


def test_empty_confirmation_clears_password(form_values):
    form_values["password"] = "anything"
    form_values["confirmation"] = ""

    form = decode_settings_form(form_values)
    validated = validate_settings(form)

    assert validated.password == ""
    # the submitted form is left untouched
    assert form.password == "anything"


def test_different_passwords(form_values):
    form_values["password"] = "abc"
    form_values["confirmation"] = "xyz"
    with pytest.raises(PasswordMismatchError):
        _validate(form_values)


def test_matching_passwords_are_kept(form_values):
    form_values["password"] = "abc"
    form_values["confirmation"] = "abc"
    assert _validate(form_values).password == "abc"


def test_confirmation_without_password_is_accepted(form_values):
    form_values["password"] = ""
    form_values["confirmation"] = "xyz"
    assert _validate(form_values).password == ""


@pytest.mark.parametrize("raw", ["0.1", "5", "0.2499", "4.01", "-1", "inf", "nan"])
def test_playback_rate_out_of_range(form_values, raw):
    form_values["media_playback_rate"] = raw
    with pytest.raises(PlaybackRateRangeError):
        _validate(form_values)


@pytest.mark.parametrize(("raw", "expected"), [("0.25", 0.25), ("1", 1.0), ("4", 4.0)])
def test_playback_rate_bounds_are_inclusive(form_values, raw, expected):
    form_values["media_playback_rate"] = raw
    assert _validate(form_values).media_playback_rate == expected


@pytest.mark.parametrize("raw", ["fast", "+nan", "\uff11.\uff15"])
def test_unparsable_playback_rate_is_normal_speed(form_values, raw):
    form_values["media_playback_rate"] = raw
    assert _validate(form_values).media_playback_rate == 1.0


def test_password_mismatch_checked_before_playback_rate(form_values):
    form_values["password"] = "abc"
    form_values["confirmation"] = "xyz"
    form_values["media_playback_rate"] = "9"
    with pytest.raises(PasswordMismatchError):
        _validate(form_values)


@pytest.mark.parametrize(
    ("field", "raw"),
    [
        ("entries_per_page", "0"),
        ("entries_per_page", "-20"),
        ("entries_per_page", "notanumber"),
        ("entry_order", ""),
        ("custom_css", ""),
        ("gesture_nav", ""),
        ("categories_sorting_order", ""),
        ("block_filter_entry_rules", ""),
        ("keep_filter_entry_rules", "EntryTitle=("),
    ],
)
def test_unchecked_fields_accept_anything(form_values, field, raw):
    form_values[field] = raw
    _validate(form_values)


def test_errors_carry_catalog_keys(form_values):
    form_values["username"] = ""
    with pytest.raises(SettingsValidationError) as exc_info:
        _validate(form_values)

    assert exc_info.value.kind is SettingsErrorKind.MANDATORY_FIELDS
    assert exc_info.value.code == "error.settings_mandatory_fields"
