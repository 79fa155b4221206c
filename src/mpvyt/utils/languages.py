"""Language code to display name lookup."""

from typing import Dict

# ISO 639-1 codes of languages YouTube commonly dubs into
LANGUAGE_NAMES: Dict[str, str] = {
    "ar": "Arabic",
    "bn": "Bengali",
    "cs": "Czech",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "es": "Spanish",
    "fa": "Persian",
    "fi": "Finnish",
    "fil": "Filipino",
    "fr": "French",
    "he": "Hebrew",
    "hi": "Hindi",
    "hu": "Hungarian",
    "id": "Indonesian",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "ml": "Malayalam",
    "ms": "Malay",
    "nl": "Dutch",
    "no": "Norwegian",
    "pa": "Punjabi",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sv": "Swedish",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "vi": "Vietnamese",
    "zh": "Chinese",
}

REGION_NAMES: Dict[str, str] = {
    "br": "Brazil",
    "pt": "Portugal",
    "us": "United States",
    "gb": "United Kingdom",
    "in": "India",
    "mx": "Mexico",
    "419": "Latin America",
    "es": "Spain",
    "ca": "Canada",
    "fr": "France",
    "cn": "China",
    "tw": "Taiwan",
    "hk": "Hong Kong",
}


def get_language_name(language_code: str) -> str | None:
    """
    Get a display name for a language code such as ``de`` or ``pt-BR``.

    Args:
        language_code: BCP-47 style code, case-insensitive

    Returns:
        Language name (with region when known) or None if unrecognized
    """
    if not language_code:
        return None
    parts = language_code.replace("_", "-").lower().split("-")
    name = LANGUAGE_NAMES.get(parts[0])
    if name is None:
        return None
    if len(parts) > 1:
        region = REGION_NAMES.get(parts[1], parts[1].upper())
        return f"{name} ({region})"
    return name
