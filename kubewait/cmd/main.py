import asyncio
import logging
import signal

from kubewait.config import WaitSettings
from kubewait.engine.context import SelectorQuery, WaitConfig
from kubewait.engine.runner import ReadinessWaiter
from kubewait.errors import WaitError
from kubewait.kube import get_k8s_api_clients

logger = logging.getLogger("kubewait.main")

EXIT_OK = 0
EXIT_INTERRUPTED = 130


async def run(settings: WaitSettings) -> None:
    kind = settings.resource_kind
    selector = SelectorQuery(
        namespace=settings.namespace, label_selector=settings.label_selector
    )
    config = WaitConfig.from_timeout(settings.interval, settings.timeout)

    logger.info(
        "Waiting for %ss namespace=%s selector='%s' timeout=%s interval=%gs",
        kind.value,
        settings.namespace or "<all>",
        settings.label_selector,
        f"{settings.timeout:g}s" if settings.timeout else "none",
        settings.interval,
    )

    apis = get_k8s_api_clients(settings.kubeconfig)
    waiter = ReadinessWaiter(apis, request_timeout=settings.request_timeout)

    task = asyncio.ensure_future(waiter.wait(selector, kind, config))
    loop = asyncio.get_event_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, _handle_signal, task, sig)
    try:
        await task
    finally:
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.remove_signal_handler(sig)


def _handle_signal(task: asyncio.Future, sig: int) -> None:
    logger.info("Received signal %s, stopping wait", signal.Signals(sig).name)
    task.cancel()


def main(settings: WaitSettings) -> int:
    try:
        asyncio.run(run(settings))
    except WaitError as e:
        logger.error("%s", e)
        return e.exit_code
    except asyncio.CancelledError:
        logger.error("Interrupted while waiting for resources to become ready")
        return EXIT_INTERRUPTED
    return EXIT_OK
