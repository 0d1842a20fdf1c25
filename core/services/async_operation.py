from abc import ABC, abstractmethod
from typing import Any, Dict


class AsyncOperation(ABC):
    """Внешняя асинхронная операция, которая может упасть"""
    @abstractmethod
    async def run(self) -> Dict[str, Any]: ...
