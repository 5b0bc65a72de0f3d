import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Comma-separated; "*" allows any origin (browser-based testers)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Response shaping
    PREVIEW_MAX_CHARS: int = int(os.getenv("PREVIEW_MAX_CHARS", "500"))

    # Table uploads are staged here and removed once parsed
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads")
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(20 * 1024 * 1024)))

    # Structured event logs
    LOG_EVENTS: bool = os.getenv("LOG_EVENTS", "true").lower() == "true"
    ENABLE_PII_REDACTION: bool = os.getenv("ENABLE_PII_REDACTION", "true").lower() == "true"

settings = Settings()
