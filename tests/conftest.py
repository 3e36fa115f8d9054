import base64
import os

import pytest
from unittest.mock import MagicMock
from prometheus_client import REGISTRY

from gitlab_credentials_k8s.converters import GitLabCredentialConverter

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def create_mock_secret(name, labels=None, annotations=None, data=None):
    """Helper function to create a mock Kubernetes secret with encoded data."""
    secret = MagicMock()
    secret.metadata.name = name
    secret.metadata.namespace = "default"
    secret.metadata.labels = labels
    secret.metadata.annotations = annotations
    secret.data = None if data is None else {
        k: base64.b64encode(v.encode('utf-8')).decode('utf-8') for k, v in data.items()}
    return secret


@pytest.fixture
def make_secret():
    """Fixture for building mock Kubernetes secrets."""
    return create_mock_secret


@pytest.fixture
def fixture_path():
    """Fixture returning the path of a YAML Secret fixture."""
    def _path(name):
        return os.path.join(FIXTURES_DIR, name)
    return _path


@pytest.fixture
def converter():
    """Fixture for the GitLab credential converter."""
    return GitLabCredentialConverter()


@pytest.fixture
def gitlab_secret():
    """Fixture for a valid, labelled gitlabToken secret."""
    return create_mock_secret(
        "a-test-secret",
        labels={"jenkins.io/credentials-type": "gitlabToken"},
        annotations={"jenkins.io/credentials-description": "a gitlab token"},
        data={"text": "someSuperDuperSecret"},
    )


@pytest.fixture(autouse=True)
def clear_prometheus_registry():
    """Clear the default Prometheus registry before each test."""
    collectors = list(REGISTRY._collector_to_names.keys())
    for collector in collectors:
        REGISTRY.unregister(collector)
