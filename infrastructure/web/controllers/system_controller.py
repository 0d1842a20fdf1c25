from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from core.services.async_operation import AsyncOperation
from core.use_cases.operation_use_cases import run_async_operation, OperationFailedError
from infrastructure.web.dependencies import get_async_operation


router = APIRouter(prefix="/api", tags=["system"])


class HelloResponse(BaseModel):
    message: str


@router.get("/hello", response_model=HelloResponse)
def hello():
    return HelloResponse(message="Hello from API!")

@router.get("/async-operation")
async def async_operation(operation: AsyncOperation = Depends(get_async_operation)) -> Dict[str, Any]:
    try:
        return await run_async_operation(operation)
    except OperationFailedError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
