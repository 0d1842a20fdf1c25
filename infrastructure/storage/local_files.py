import logging
import mimetypes
from pathlib import Path

from core.services.file_storage import FileStorage, StoredFile, InvalidFilenameError, UploadNotFoundError


logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Читает файлы из одной фиксированной директории"""
    def __init__(self, base_dir: str):
        self.base_dir = Path(base_dir).resolve()

    def _resolve(self, filename: str) -> Path:
        path = (self.base_dir / filename).resolve()
        if path.parent != self.base_dir:
            raise InvalidFilenameError("Invalid filename")
        return path

    def read(self, filename: str) -> StoredFile:
        path = self._resolve(filename)
        try:
            content = path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            logger.info("Upload %s not readable: %s", path, e)
            raise UploadNotFoundError("File not found") from e
        media_type, _ = mimetypes.guess_type(path.name)
        return StoredFile(
            filename=path.name,
            content=content,
            media_type=media_type or "application/octet-stream",
        )
