"""
Upload staging
--------------
Table uploads are copied to a private file under UPLOAD_DIR, read back, and
deleted when the `with` block exits, whether parsing succeeded or raised.
"""

from __future__ import annotations

import shutil
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from scamscope.observability.logging import log
from scamscope.settings import settings

_CHUNK = 64 * 1024


class UploadTooLarge(Exception):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"upload exceeds {limit} bytes")


def _copy_limited(src: BinaryIO, dst: BinaryIO, limit: int) -> int:
    total = 0
    while True:
        chunk = src.read(_CHUNK)
        if not chunk:
            return total
        total += len(chunk)
        if total > limit:
            raise UploadTooLarge(limit)
        dst.write(chunk)


@contextmanager
def staged_upload(src: BinaryIO, suffix: str = ".csv", upload_dir: Optional[str] = None) -> Iterator[Path]:
    directory = Path(upload_dir or settings.UPLOAD_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{uuid.uuid4().hex}{suffix}"
    try:
        with open(path, "wb") as dst:
            _copy_limited(src, dst, settings.MAX_UPLOAD_BYTES)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            log(event="upload_cleanup_failed", path=str(path), error=str(e))
