"""Exceptions raised while turning Kubernetes Secrets into credentials."""


class GitLabCredentialsError(Exception):
    """Base exception for all gitlab-credentials-k8s errors."""

    pass


class CredentialsConversionError(GitLabCredentialsError):
    """Raised when a Secret cannot be converted into a credential.

    The message is meant for the user and names the offending property,
    e.g. a missing ``text`` entry or data that is not base64 encoded UTF-8.
    """

    pass


class SecretManifestError(GitLabCredentialsError):
    """Raised when a Secret manifest cannot be read from disk.

    This can occur when:
    - The file does not exist or cannot be read
    - The file is not valid YAML
    - The YAML does not describe a Kubernetes Secret
    """

    pass
