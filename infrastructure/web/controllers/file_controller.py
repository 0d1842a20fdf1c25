from fastapi import APIRouter, Depends, HTTPException, Response, status

from core.services.file_storage import FileStorage, InvalidFilenameError, UploadNotFoundError
from core.use_cases.file_use_cases import read_upload
from infrastructure.web.dependencies import get_file_storage


router = APIRouter(prefix="/api", tags=["files"])


@router.get("/file/{filename}")
def download_file(filename: str, storage: FileStorage = Depends(get_file_storage)):
    try:
        stored = read_upload(storage, filename)
    except InvalidFilenameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UploadNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(content=stored.content, media_type=stored.media_type)
