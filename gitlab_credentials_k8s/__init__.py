"""Convert Kubernetes Secrets into GitLab access token credentials."""

__version__ = "0.1.0"
