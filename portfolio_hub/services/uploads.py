"""
Image Upload Service

Stores editor image uploads on disk and returns the public URL.
"""

import logging
import os
import secrets
import time

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = '/public/uploads'


def generate_filename(original_name):
    """Return a collision-resistant name keeping the original extension."""
    # Only the extension is sanitized; secure_filename drops non-ASCII stems
    ext = secure_filename(os.path.splitext(original_name or '')[1].lstrip('.')).lower()
    if ext:
        ext = '.' + ext
    return f'{int(time.time() * 1000)}-{secrets.token_hex(8)}{ext}'


def save_image(file_storage, upload_folder):
    """Save an uploaded file and return its URL under /public/uploads.

    Args:
        file_storage: werkzeug FileStorage from request.files
        upload_folder: directory the file is written to (created if missing)

    Returns:
        URL path of the stored image
    """
    os.makedirs(upload_folder, exist_ok=True)
    filename = generate_filename(file_storage.filename)
    file_storage.save(os.path.join(upload_folder, filename))
    logger.info('Stored upload %s', filename)
    return f'{PUBLIC_PREFIX}/{filename}'
