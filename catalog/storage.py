import logging
import os
import time

from flask import current_app

logger = logging.getLogger(__name__)


class LocalStorage:
    """Product images on the local filesystem, served publicly at /uploads."""

    def _folder(self):
        return current_app.config["UPLOAD_FOLDER"]

    def save(self, file, field_name):
        upload_folder = self._folder()
        os.makedirs(upload_folder, exist_ok=True)
        ext = os.path.splitext(file.filename or "")[1]
        millis = int(time.time() * 1000)
        filename = f"{field_name}-{millis}{ext}"
        while os.path.exists(os.path.join(upload_folder, filename)):
            millis += 1
            filename = f"{field_name}-{millis}{ext}"
        file.save(os.path.join(upload_folder, filename))
        logger.debug("Stored upload %s", filename)
        return f"uploads/{filename}"

    def path_for(self, image_path):
        if not image_path:
            return ""
        return os.path.join(self._folder(), os.path.basename(image_path))

    def get_url(self, image_path):
        if not image_path:
            return ""
        prefix = current_app.config["UPLOAD_URL_PREFIX"]
        return f"{prefix}/{os.path.basename(image_path)}"

    def delete(self, image_path):
        filepath = self.path_for(image_path)
        if filepath and os.path.exists(filepath):
            os.remove(filepath)


storage = LocalStorage()
