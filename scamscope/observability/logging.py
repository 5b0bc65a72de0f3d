import json
import time
from scamscope.settings import settings

# Submitted content never reaches the logs verbatim when redaction is on
SENSITIVE_KEYS = {"text", "transcript", "ocrText", "preview", "url", "content", "payload"}

def _redact_value(v):
    if isinstance(v, str) and len(v) > 0:
        return f"[REDACTED:{len(v)}chars]"
    if isinstance(v, dict):
        return {k: _redact_value(val) for k, val in v.items()}
    return v

def redact_fields(fields: dict) -> dict:
    clean = {}
    for k, v in fields.items():
        if k in SENSITIVE_KEYS:
            clean[k] = _redact_value(v)
        elif isinstance(v, dict):
            clean[k] = {sk: (_redact_value(sv) if sk in SENSITIVE_KEYS else sv) for sk, sv in v.items()}
        else:
            clean[k] = v
    return clean

def log(event: str, **fields):
    if not settings.LOG_EVENTS:
        return
    payload = {"ts": int(time.time()), "event": event}
    if settings.ENABLE_PII_REDACTION:
        payload.update(redact_fields(fields))
    else:
        payload.update(fields)
    print(json.dumps(payload, ensure_ascii=False, default=str))
