from typing import Any
from urllib.parse import parse_qsl

# Accepted spellings per logical input field (first non-empty wins)
FIELD_ALIASES = {
    "text": ("text", "message", "content"),
    "transcript": ("transcript", "text"),
    "ocrText": ("ocrText", "ocr_text", "text"),
    "url": ("url", "link", "href"),
}


def extract_field(payload: Any, field: str) -> str:
    """
    Pull one logical input out of whatever body shape the client sent.

    - dict: look up the field and its aliases
    - str: the body itself is the value (bare JSON string or plain text)
    - anything else (None, list, number): treated as missing -> ""
    """
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    if not isinstance(payload, dict):
        return ""

    for key in FIELD_ALIASES.get(field, (field,)):
        v = payload.get(key)
        if v is None:
            continue
        if isinstance(v, str):
            if v.strip():
                return v
            continue
        # numbers etc. are still content (e.g. an OCR of "123456")
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
    return ""


def coerce_body(payload: Any, content_type: str = "") -> Any:
    """
    FastAPI hands non-JSON bodies over as raw bytes. Form posts become a dict;
    anything else is treated as plain text.
    """
    if not isinstance(payload, (bytes, bytearray)):
        return payload
    raw = bytes(payload).decode("utf-8", errors="replace")
    if "application/x-www-form-urlencoded" in (content_type or "").lower():
        return dict(parse_qsl(raw, keep_blank_values=True))
    return raw
