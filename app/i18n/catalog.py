from __future__ import annotations

from ..config import settings

LANGUAGES: dict[str, str] = {
    "en_US": "English",
    "pl_PL": "Polski",
    "de_DE": "Deutsch",
    "fr_FR": "Français",
}

MESSAGES: dict[str, dict[str, str]] = {
    "en_US": {
        "error.settings_mandatory_fields": (
            "The fields username, theme, language, timezone, entry direction, "
            "display mode and default home page are mandatory."
        ),
        "error.settings_reading_speed_is_positive": (
            "The reading speeds must be positive integers."
        ),
        "error.different_passwords": "Passwords are not the same.",
        "error.settings_media_playback_rate_range": (
            "Playback speed must be between 0.25 and 4."
        ),
        "error.user_already_exists": "This user already exists.",
        "error.password_too_long": "The password is too long.",
    },
    "pl_PL": {
        "error.settings_mandatory_fields": (
            "Pola nazwa użytkownika, motyw, język, strefa czasowa, kierunek "
            "sortowania, tryb wyświetlania i strona startowa są obowiązkowe."
        ),
        "error.settings_reading_speed_is_positive": (
            "Prędkości czytania muszą być dodatnimi liczbami całkowitymi."
        ),
        "error.different_passwords": "Hasła nie są identyczne.",
        "error.settings_media_playback_rate_range": (
            "Prędkość odtwarzania musi mieścić się między 0,25 a 4."
        ),
        "error.user_already_exists": "Ten użytkownik już istnieje.",
        "error.password_too_long": "Hasło jest za długie.",
    },
    "de_DE": {
        "error.settings_mandatory_fields": (
            "Die Felder Benutzername, Thema, Sprache, Zeitzone, Sortierrichtung, "
            "Anzeigemodus und Startseite sind Pflichtfelder."
        ),
        "error.settings_reading_speed_is_positive": (
            "Die Lesegeschwindigkeiten müssen positive Ganzzahlen sein."
        ),
        "error.different_passwords": "Die Passwörter stimmen nicht überein.",
        "error.settings_media_playback_rate_range": (
            "Die Wiedergabegeschwindigkeit muss zwischen 0,25 und 4 liegen."
        ),
        "error.user_already_exists": "Dieser Benutzer existiert bereits.",
        "error.password_too_long": "Das Passwort ist zu lang.",
    },
    "fr_FR": {
        "error.settings_mandatory_fields": (
            "Les champs nom d'utilisateur, thème, langue, fuseau horaire, sens "
            "de tri, mode d'affichage et page d'accueil sont obligatoires."
        ),
        "error.settings_reading_speed_is_positive": (
            "Les vitesses de lecture doivent être des entiers positifs."
        ),
        "error.different_passwords": "Les mots de passe ne sont pas identiques.",
        "error.settings_media_playback_rate_range": (
            "La vitesse de lecture doit être comprise entre 0,25 et 4."
        ),
        "error.user_already_exists": "Cet utilisateur existe déjà.",
        "error.password_too_long": "Le mot de passe est trop long.",
    },
}


def available_languages() -> dict[str, str]:
    return dict(LANGUAGES)


def translate(key: str, language: str) -> str:
    """Return the message for `key` in `language`.

    Unknown languages use the configured default language; a key missing
    from both catalogs is returned unchanged.
    """
    catalog = MESSAGES.get(language)
    if catalog is not None and key in catalog:
        return catalog[key]

    fallback = MESSAGES.get(settings.DEFAULT_LANGUAGE, {})
    return fallback.get(key, key)
