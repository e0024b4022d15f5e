import os
import random
import re
import time
from flask import current_app
from werkzeug.utils import secure_filename
from app.exceptions import ValidationError

ALLOWED_MIMES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}


def stored_filename(original: str) -> str:
    """``<slug>-<millis>-<random><ext>``; slug is the lowercased basename, max 30 chars."""
    base, ext = os.path.splitext(original or "")
    slug = re.sub(r"[^a-z0-9]", "-", base.lower())[:30]
    ext = secure_filename(ext.lower()) if ext else ""
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
    return f"{slug}-{suffix}{ext}"


def _size_of(file_storage) -> int:
    stream = file_storage.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def save_image(file_storage) -> str:
    """Validate and store an uploaded image; return its public URL."""
    if file_storage is None or not file_storage.filename:
        raise ValidationError("Aucun fichier fourni")
    if file_storage.mimetype not in ALLOWED_MIMES:
        raise ValidationError("Type de fichier non autorisé. Utilisez JPG, PNG ou WebP")
    if _size_of(file_storage) > current_app.config["MAX_UPLOAD_BYTES"]:
        raise ValidationError("Fichier trop volumineux (5 Mo maximum)")

    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    filename = stored_filename(file_storage.filename)
    file_storage.save(os.path.join(folder, filename))
    current_app.logger.info("image stored: %s", filename)
    return f"/uploads/{filename}"


__all__ = ["ALLOWED_MIMES", "stored_filename", "save_image"]
