import logging
from typing import Any, Dict, Optional

import yaml
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from kubewait.errors import ClientError

logger = logging.getLogger("kubewait.kube")


def _load_config(kubeconfig: Optional[str]) -> None:
    if kubeconfig:
        config.load_kube_config(config_file=kubeconfig)
        logger.debug("Loaded kubeconfig from %s", kubeconfig)
        return
    try:
        config.load_incluster_config()
        logger.debug("Loaded in-cluster config")
    except ConfigException:
        config.load_kube_config()
        logger.debug("Loaded default kubeconfig")


def get_k8s_api_clients(kubeconfig: Optional[str] = None) -> Dict[str, Any]:
    try:
        _load_config(kubeconfig)
    except (ConfigException, OSError, yaml.YAMLError) as e:
        raise ClientError(f"Failed to load Kubernetes config: {e}") from e

    api_client = client.ApiClient()
    return {
        "core": client.CoreV1Api(api_client),
        "apps": client.AppsV1Api(api_client),
        "batch": client.BatchV1Api(api_client),
    }
