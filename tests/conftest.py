"""Pytest configuration and fixtures for kubewait tests."""

import pytest
from unittest.mock import MagicMock, Mock
from kubernetes import client


def _with_meta(obj, name, namespace="default"):
    obj.metadata = Mock()
    obj.metadata.name = name
    obj.metadata.namespace = namespace
    return obj


@pytest.fixture
def mock_apis():
    """Mocked API groups in the shape returned by get_k8s_api_clients."""
    return {
        "core": MagicMock(spec=client.CoreV1Api),
        "apps": MagicMock(spec=client.AppsV1Api),
        "batch": MagicMock(spec=client.BatchV1Api),
    }


@pytest.fixture
def make_pod():
    def _make(name="pod-a", ready=True, namespace="default"):
        pod = _with_meta(Mock(spec=client.V1Pod), name, namespace)
        pod.status = Mock()
        pod.status.conditions = [
            Mock(type="PodScheduled", status="True"),
            Mock(type="Ready", status="True" if ready else "False"),
        ]
        return pod

    return _make


@pytest.fixture
def make_job():
    def _make(name="job-a", succeeded=1, namespace="default"):
        job = _with_meta(Mock(spec=client.V1Job), name, namespace)
        job.status = Mock()
        job.status.succeeded = succeeded
        return job

    return _make


@pytest.fixture
def make_deployment():
    def _make(name="deploy-a", replicas=3, updated=3, available=3, namespace="default"):
        deployment = _with_meta(Mock(spec=client.V1Deployment), name, namespace)
        deployment.spec = Mock()
        deployment.spec.replicas = replicas
        deployment.status = Mock()
        deployment.status.updated_replicas = updated
        deployment.status.available_replicas = available
        return deployment

    return _make


@pytest.fixture
def make_stateful_set():
    def _make(name="sts-a", replicas=2, ready=2, namespace="default"):
        sts = _with_meta(Mock(spec=client.V1StatefulSet), name, namespace)
        sts.spec = Mock()
        sts.spec.replicas = replicas
        sts.status = Mock()
        sts.status.ready_replicas = ready
        return sts

    return _make


@pytest.fixture
def make_daemon_set():
    def _make(name="ds-a", desired=4, ready=4, namespace="default"):
        ds = _with_meta(Mock(spec=client.V1DaemonSet), name, namespace)
        ds.status = Mock()
        ds.status.desired_number_scheduled = desired
        ds.status.number_ready = ready
        return ds

    return _make


@pytest.fixture
def make_replica_set():
    def _make(name="rs-a", replicas=2, ready=2, namespace="default"):
        rs = _with_meta(Mock(spec=client.V1ReplicaSet), name, namespace)
        rs.spec = Mock()
        rs.spec.replicas = replicas
        rs.status = Mock()
        rs.status.ready_replicas = ready
        return rs

    return _make


def listing(*items):
    """Mock list response carrying ``items``."""
    result = Mock()
    result.items = list(items)
    return result


@pytest.fixture
def list_of():
    return listing
