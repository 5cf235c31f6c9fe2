import argparse
import logging
import os
import sys

from kubewait.config import resolve_settings
from kubewait.errors import ConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubewait",
        description="Wait until Kubernetes resources matching a label selector are ready",
    )
    parser.add_argument("--namespace", help="The namespace to monitor (env NAMESPACE, default: all)")
    parser.add_argument(
        "--label-selector",
        help="The label selector to filter resources (env LABEL_SELECTOR)",
    )
    parser.add_argument(
        "--resource-type",
        help="The resource type to monitor: pod, job, deployment, statefulset, "
        "daemonset or replicaset (env RESOURCE_TYPE)",
    )
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file (env KUBECONFIG)")
    parser.add_argument(
        "--timeout",
        help="Maximum seconds to wait for readiness, 0 waits forever (env TIMEOUT_SECONDS)",
    )
    parser.add_argument(
        "--interval",
        help="Seconds between readiness checks, default 5 (env INTERVAL_SECONDS)",
    )
    parser.add_argument(
        "--request-timeout",
        help="Seconds before a single API request is abandoned, must be positive, default 30 "
        "(env REQUEST_TIMEOUT_SECONDS)",
    )
    parser.add_argument(
        "--config",
        help="YAML settings file path or http(s) URL (env KUBEWAIT_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (overrides --log-level to DEBUG)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level_name = "DEBUG" if args.debug else args.log_level.upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("kubewait")

    try:
        settings = resolve_settings(args, os.environ)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(e.exit_code)

    from .main import main as wait_main

    sys.exit(wait_main(settings))
