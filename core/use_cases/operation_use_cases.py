import logging
from typing import Any, Dict
from core.services.async_operation import AsyncOperation


logger = logging.getLogger(__name__)


class OperationFailedError(RuntimeError):
    pass

async def run_async_operation(operation: AsyncOperation) -> Dict[str, Any]:
    try:
        return await operation.run()
    except Exception as e:
        # подробности только в лог, наружу — общий ответ
        logger.warning("Async operation failed: %s", e, exc_info=True)
        raise OperationFailedError("Service temporarily unavailable") from e
