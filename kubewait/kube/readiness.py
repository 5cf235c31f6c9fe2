"""Per-kind readiness predicates.

Each predicate inspects an already fetched object and never calls the API.
Counters the API server leaves unset are read as 0. An object whose desired
count is unset is reported not ready, since comparing against an implicit 0
would pass trivially.
"""

from typing import Any, Callable, Dict, Optional, Tuple

from kubernetes import client

from kubewait.errors import DataError
from .resources import ResourceKind

Predicate = Callable[[Any], bool]


def _count(value: Optional[int]) -> int:
    return value or 0


def _desired_replicas(obj) -> Optional[int]:
    if obj.spec is None:
        return None
    return obj.spec.replicas


def pod_ready(pod: client.V1Pod) -> bool:
    if pod.status is None:
        return False
    for condition in pod.status.conditions or []:
        if condition.type == "Ready" and condition.status == "True":
            return True
    return False


def job_ready(job: client.V1Job) -> bool:
    if job.status is None:
        return False
    return _count(job.status.succeeded) > 0


def deployment_ready(deployment: client.V1Deployment) -> bool:
    desired = _desired_replicas(deployment)
    status = deployment.status
    if desired is None or status is None:
        return False
    return (
        _count(status.updated_replicas) == desired
        and _count(status.available_replicas) == desired
    )


def stateful_set_ready(sts: client.V1StatefulSet) -> bool:
    desired = _desired_replicas(sts)
    if desired is None or sts.status is None:
        return False
    return _count(sts.status.ready_replicas) == desired


def daemon_set_ready(ds: client.V1DaemonSet) -> bool:
    status = ds.status
    if status is None or status.desired_number_scheduled is None:
        return False
    return status.desired_number_scheduled == _count(status.number_ready)


def replica_set_ready(rs: client.V1ReplicaSet) -> bool:
    desired = _desired_replicas(rs)
    if desired is None or rs.status is None:
        return False
    return _count(rs.status.ready_replicas) == desired


_PREDICATES: Dict[ResourceKind, Tuple[type, Predicate]] = {
    ResourceKind.POD: (client.V1Pod, pod_ready),
    ResourceKind.JOB: (client.V1Job, job_ready),
    ResourceKind.DEPLOYMENT: (client.V1Deployment, deployment_ready),
    ResourceKind.STATEFULSET: (client.V1StatefulSet, stateful_set_ready),
    ResourceKind.DAEMONSET: (client.V1DaemonSet, daemon_set_ready),
    ResourceKind.REPLICASET: (client.V1ReplicaSet, replica_set_ready),
}


def is_ready(kind: ResourceKind, obj: Any) -> bool:
    """Return whether ``obj`` has reached its desired running state.

    Raises ``DataError`` if ``kind`` is not a supported resource kind or if
    ``obj`` is not the API model that ``kind`` lists.
    """
    try:
        model, predicate = _PREDICATES[kind]
    except (KeyError, TypeError):
        raise DataError(f"unsupported resource type: {kind!r}") from None
    if not isinstance(obj, model):
        raise DataError(
            f"unsupported resource type: {type(obj).__name__} (expected {model.__name__})"
        )
    return predicate(obj)
