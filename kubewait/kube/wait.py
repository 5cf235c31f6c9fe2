import logging
from typing import Any, Dict, Optional

from kubewait.engine.context import ReadinessVerdict, SelectorQuery
from .readiness import is_ready
from .resources import ResourceKind, list_resources, resource_name

logger = logging.getLogger("kubewait.wait")


def check_readiness(
    apis: Dict[str, Any],
    selector: SelectorQuery,
    kind: ResourceKind,
    request_timeout: Optional[float] = None,
) -> ReadinessVerdict:
    """Run one poll cycle: list a fresh snapshot and evaluate every item.

    ``ListError`` and ``DataError`` propagate to the caller; an empty
    snapshot is reported as not ready.
    """
    items = list_resources(
        apis, kind, selector.namespace, selector.label_selector, request_timeout
    )

    if not items:
        logger.info(
            "No %ss found with label selector '%s', waiting...",
            kind.value,
            selector.label_selector,
        )
        return ReadinessVerdict(ready=False)

    verdict = ReadinessVerdict(ready=True)
    qualified = not selector.namespace
    for item in items:
        name = resource_name(item, qualified=qualified)
        ready = is_ready(kind, item)
        verdict.items[name] = ready
        if ready:
            logger.info("%s %s is ready.", kind.value, name)
        else:
            verdict.ready = False
            logger.info("%s %s is not ready, waiting...", kind.value, name)

    if verdict.ready:
        logger.info("All %ss are ready!", kind.value)
    return verdict
