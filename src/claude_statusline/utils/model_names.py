"""Short display names for Claude model identifiers."""

import re

KNOWN_MODELS: dict[str, str] = {
    "claude-sonnet-4": "S4",
    "claude-sonnet-3.7": "S3.7",
    "claude-opus-4.1": "O4.1",
    "claude-opus-4": "O4",
    "claude-haiku-3.5": "H3.5",
}

# Versions are one or two digit groups; longer runs are date stamps.
_FAMILY_PATTERN = re.compile(r"(sonnet|opus|haiku)[\s-]*(\d{1,2}(?:[.-]\d{1,2})?(?!\d))?", re.IGNORECASE)


def short_model_name(model_id: str) -> str:
    """Compact label for a model id, e.g. "claude-sonnet-4-20250514" -> "S4"."""
    if not model_id:
        return "?"

    lowered = model_id.lower()
    # Longest key first so "claude-opus-4.1" beats "claude-opus-4".
    for key in sorted(KNOWN_MODELS, key=len, reverse=True):
        if key in lowered:
            return KNOWN_MODELS[key]

    match = _FAMILY_PATTERN.search(model_id)
    if match:
        letter = match.group(1)[0].upper()
        version = match.group(2)
        if not version:
            return f"{letter}?"
        version = version.replace("-", ".")
        return f"{letter}{version}"

    compact = re.sub(r"[^a-zA-Z0-9]", "", model_id)
    return compact[:4].upper() or "?"
