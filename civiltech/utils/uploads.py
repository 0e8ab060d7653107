import os
import shutil
import threading
import time
from pathlib import Path
from typing import Optional

import structlog
from fastapi import UploadFile

logger = structlog.get_logger(__name__)

_token_lock = threading.Lock()
_last_token = 0


def next_upload_token() -> int:
    """Millisecond timestamp, bumped so it never repeats within the process."""
    global _last_token
    with _token_lock:
        token = time.time_ns() // 1_000_000
        if token <= _last_token:
            token = _last_token + 1
        _last_token = token
        return token


def build_upload_name(original_filename: Optional[str], prefix: str = "file-") -> str:
    ext = os.path.splitext(original_filename or "")[1]
    return f"{prefix}{next_upload_token()}{ext}"


def save_upload(upload: Optional[UploadFile], upload_dir: str, prefix: str = "file-") -> Optional[str]:
    """
    Writes an uploaded part into upload_dir and returns the generated filename.

    Returns None when the request carried no file. Type and size are not checked.
    """
    if upload is None or not upload.filename:
        return None

    target_dir = Path(upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    filename = build_upload_name(upload.filename, prefix)

    with open(target_dir / filename, "wb") as buffer:
        shutil.copyfileobj(upload.file, buffer)

    logger.info("upload_stored", filename=filename, original=upload.filename)
    return filename
