import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional

from kubewait.errors import TimeoutExceeded
from kubewait.kube import ResourceKind, check_readiness
from .context import ReadinessVerdict, SelectorQuery, WaitConfig

logger = logging.getLogger("kubewait.engine")

# lower bound for a request timeout capped by an almost expired deadline
_MIN_REQUEST_TIMEOUT = 0.01


class ReadinessWaiter:
    def __init__(self, apis: Dict[str, Any], request_timeout: Optional[float] = None):
        self.apis = apis
        self.request_timeout = request_timeout

    async def wait(
        self, selector: SelectorQuery, kind: ResourceKind, config: WaitConfig
    ) -> ReadinessVerdict:
        """Block until every matched resource is ready.

        Raises ``TimeoutExceeded`` once ``config.deadline`` passes. The
        inter-cycle sleep is cancelled immediately on deadline expiry or when
        the surrounding task is cancelled.
        """
        if config.deadline is None:
            return await self._poll(selector, kind, config)
        try:
            return await asyncio.wait_for(
                self._poll(selector, kind, config), timeout=config.remaining()
            )
        except TimeoutExceeded:
            raise
        except asyncio.TimeoutError:
            raise TimeoutExceeded(kind.value, config.timeout) from None

    def cycle_request_timeout(self, config: WaitConfig) -> Optional[float]:
        """Per-request timeout for the next list call, never past the deadline."""
        remaining = config.remaining()
        if remaining is None:
            return self.request_timeout
        remaining = max(remaining, _MIN_REQUEST_TIMEOUT)
        if self.request_timeout is None:
            return remaining
        return min(self.request_timeout, remaining)

    async def _poll(
        self, selector: SelectorQuery, kind: ResourceKind, config: WaitConfig
    ) -> ReadinessVerdict:
        loop = asyncio.get_event_loop()
        # not the default executor: asyncio.run joins that one on exit
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="kubewait-list")
        cycle = 0
        try:
            while True:
                cycle += 1
                logger.debug("Readiness check #%d for %ss", cycle, kind.value)
                verdict = await loop.run_in_executor(
                    executor,
                    check_readiness,
                    self.apis,
                    selector,
                    kind,
                    self.cycle_request_timeout(config),
                )
                if verdict.ready:
                    return verdict
                if config.expired():
                    raise TimeoutExceeded(kind.value, config.timeout)
                await asyncio.sleep(config.interval)
        finally:
            executor.shutdown(wait=False)


async def wait_for_readiness(
    apis: Dict[str, Any],
    selector: SelectorQuery,
    kind: ResourceKind,
    config: WaitConfig,
    request_timeout: Optional[float] = None,
) -> ReadinessVerdict:
    return await ReadinessWaiter(apis, request_timeout).wait(selector, kind, config)
