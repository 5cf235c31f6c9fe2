import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from kubernetes.client import ApiException
from urllib3.exceptions import HTTPError

from kubewait.errors import ConfigError, ListError

logger = logging.getLogger("kubewait.kube")


class ResourceKind(str, Enum):
    POD = "pod"
    JOB = "job"
    DEPLOYMENT = "deployment"
    STATEFULSET = "statefulset"
    DAEMONSET = "daemonset"
    REPLICASET = "replicaset"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ResourceKind":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            supported = ", ".join(f"'{k.value}'" for k in cls)
            raise ConfigError(
                f"Invalid resource type: '{value or ''}'. Supported resource types are: {supported}."
            ) from None


# kind -> (api group key, namespaced list method, all-namespaces list method)
_LISTERS: Dict[ResourceKind, Tuple[str, str, str]] = {
    ResourceKind.POD: ("core", "list_namespaced_pod", "list_pod_for_all_namespaces"),
    ResourceKind.JOB: ("batch", "list_namespaced_job", "list_job_for_all_namespaces"),
    ResourceKind.DEPLOYMENT: ("apps", "list_namespaced_deployment", "list_deployment_for_all_namespaces"),
    ResourceKind.STATEFULSET: ("apps", "list_namespaced_stateful_set", "list_stateful_set_for_all_namespaces"),
    ResourceKind.DAEMONSET: ("apps", "list_namespaced_daemon_set", "list_daemon_set_for_all_namespaces"),
    ResourceKind.REPLICASET: ("apps", "list_namespaced_replica_set", "list_replica_set_for_all_namespaces"),
}


def list_resources(
    apis: Dict[str, Any],
    kind: ResourceKind,
    namespace: str,
    label_selector: str,
    request_timeout: Optional[float] = None,
) -> List[Any]:
    """Fetch one snapshot of ``kind`` objects matching ``label_selector``.

    An empty ``namespace`` lists across every namespace the credentials can
    see. Any API or transport failure is raised as ``ListError``.
    """
    api_key, namespaced, cluster_wide = _LISTERS[kind]
    api = apis[api_key]

    kwargs: Dict[str, Any] = {"label_selector": label_selector}
    if request_timeout:
        kwargs["_request_timeout"] = request_timeout

    logger.debug(
        "Listing %ss namespace=%r selector=%r", kind.value, namespace or "*", label_selector
    )
    try:
        if namespace:
            result = getattr(api, namespaced)(namespace=namespace, **kwargs)
        else:
            result = getattr(api, cluster_wide)(**kwargs)
    except (ApiException, HTTPError) as e:
        raise ListError(kind.value, e) from e
    return list(result.items or [])


def resource_name(obj: Any, qualified: bool = False) -> str:
    meta = obj.metadata
    if meta is None:
        return "<unnamed>"
    if qualified and meta.namespace:
        return f"{meta.namespace}/{meta.name}"
    return meta.name
