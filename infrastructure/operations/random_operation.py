import asyncio
import random
from typing import Any, Dict, Optional

from core.services.async_operation import AsyncOperation
from config.settings import settings


class ServiceFailure(RuntimeError):
    pass


class RandomAsyncOperation(AsyncOperation):
    """Имитация нестабильного сервиса: падает с вероятностью failure_rate"""
    def __init__(self, failure_rate: float = 0.5, latency_seconds: float = 0.0,
                 rng: Optional[random.Random] = None):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be within [0, 1]")
        self.failure_rate = failure_rate
        self.latency_seconds = latency_seconds
        self.rng = rng or random.Random()

    async def run(self) -> Dict[str, Any]:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
        if self.rng.random() < self.failure_rate:
            raise ServiceFailure("Random service failure")
        return {"data": "Success"}


def build_random_operation() -> RandomAsyncOperation:
    return RandomAsyncOperation(
        failure_rate=settings.ASYNC_FAILURE_RATE,
        latency_seconds=settings.ASYNC_LATENCY_SECONDS,
    )
