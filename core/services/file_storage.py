from abc import ABC, abstractmethod
from dataclasses import dataclass


class InvalidFilenameError(ValueError):
    pass

class UploadNotFoundError(LookupError):
    pass


@dataclass
class StoredFile:
    filename: str
    content: bytes
    media_type: str = "application/octet-stream"

class FileStorage(ABC):
    @abstractmethod
    def read(self, filename: str) -> StoredFile: ...
