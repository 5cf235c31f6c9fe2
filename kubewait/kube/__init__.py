from .client import get_k8s_api_clients
from .readiness import is_ready
from .resources import ResourceKind, list_resources, resource_name
from .wait import check_readiness

__all__ = [
    "get_k8s_api_clients",
    "is_ready",
    "ResourceKind",
    "list_resources",
    "resource_name",
    "check_readiness",
]
