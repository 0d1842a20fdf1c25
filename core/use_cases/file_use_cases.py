from core.services.file_storage import FileStorage, StoredFile, InvalidFilenameError


_FORBIDDEN_NAMES = {"", ".", ".."}

def validate_filename(filename: str) -> str:
    if filename in _FORBIDDEN_NAMES or "/" in filename or "\\" in filename or "\x00" in filename:
        raise InvalidFilenameError("Invalid filename")
    return filename

def read_upload(storage: FileStorage, filename: str) -> StoredFile:
    return storage.read(validate_filename(filename))
