import logging
import os
import secrets
import time
from urllib.parse import urlparse

from fastapi import HTTPException, UploadFile
from PIL import Image

from core.config import settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".jpeg", ".jpg", ".png", ".gif", ".webp")
ALLOWED_MIME_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")


def _build_filename(prefix: str, original_name: str) -> str:
    ext = os.path.splitext(original_name or "")[1].lower()
    ts = int(time.time() * 1000)
    return f"{prefix}-{ts}-{secrets.randbelow(10**9)}{ext}"


def _compress_in_place(file_path: str, size_bytes: int) -> int:
    """Re-encode an image in its own format and keep the result only if smaller."""
    try:
        with Image.open(file_path) as img:
            ext = os.path.splitext(file_path)[1].lower()
            tmp_path = file_path + ".tmp"
            save_kwargs = {}
            if ext in (".jpg", ".jpeg"):
                if img.mode in ("RGBA", "P"):
                    img = img.convert("RGB")
                save_kwargs = {"format": "JPEG", "quality": 85, "optimize": True, "progressive": True}
            elif ext == ".png":
                save_kwargs = {"format": "PNG", "optimize": True, "compress_level": 9}
            elif ext == ".webp":
                save_kwargs = {"format": "WEBP", "quality": 85, "method": 6}

            if save_kwargs:
                img.save(tmp_path, **save_kwargs)
                new_size = os.path.getsize(tmp_path)
                if new_size < size_bytes:
                    os.replace(tmp_path, file_path)
                    return new_size
                os.remove(tmp_path)
    except (OSError, ValueError) as exc:
        # Keep the original bytes if Pillow cannot handle the file
        logger.warning("[upload] compression skipped for %s: %s", file_path, exc)
    return size_bytes


def save_image_upload(media: UploadFile, prefix: str) -> str:
    """Stream an uploaded image into MEDIA_DIR and return its public URL path."""
    original_name = media.filename or "file"
    ext = os.path.splitext(original_name)[1].lower()
    mime = (media.content_type or "").lower()
    if ext not in ALLOWED_EXTENSIONS or mime not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="Only image files are allowed (jpeg, jpg, png, gif, webp)")

    os.makedirs(settings.MEDIA_DIR, exist_ok=True)
    filename = _build_filename(prefix, original_name)
    file_path = os.path.join(settings.MEDIA_DIR, filename)

    # Stream to disk to avoid high memory usage
    size_bytes = 0
    with open(file_path, "wb") as out:
        while True:
            chunk = media.file.read(1024 * 1024)
            if not chunk:
                break
            size_bytes += len(chunk)
            if size_bytes > settings.MAX_UPLOAD_BYTES:
                break
            out.write(chunk)

    if size_bytes > settings.MAX_UPLOAD_BYTES:
        os.remove(file_path)
        raise HTTPException(status_code=413, detail="File too large")

    size_bytes = _compress_in_place(file_path, size_bytes)
    logger.info("[upload] stored %s (%d bytes)", filename, size_bytes)
    return f"{settings.MEDIA_URL_PATH}/{filename}"


def media_path_for_url(url: str | None) -> str | None:
    """Map a public upload URL back to its file under MEDIA_DIR, if it is one of ours."""
    if not isinstance(url, str) or not url:
        return None
    path = urlparse(url).path
    if not path.startswith(settings.MEDIA_URL_PATH.rstrip("/") + "/"):
        return None
    name = os.path.basename(path)
    if not name:
        return None
    return os.path.join(settings.MEDIA_DIR, name)


def delete_media_file(url: str | None) -> bool:
    path = media_path_for_url(url)
    if not path or not os.path.exists(path):
        return False
    try:
        os.remove(path)
    except OSError as exc:
        # Never block the database delete on a filesystem error
        logger.warning("[upload] could not remove %s: %s", path, exc)
        return False
    return True
