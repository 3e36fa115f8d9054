"""Helpers for reading credential properties out of Kubernetes Secrets."""

from .exceptions import CredentialsConversionError

CREDENTIALS_TYPE_LABEL = "jenkins.io/credentials-type"
CREDENTIALS_DESCRIPTION_ANNOTATION = "jenkins.io/credentials-description"


def get_optional_secret_data(secret, key):
    """Return the raw (still base64 encoded) value of a data entry, or None."""
    return (secret.data or {}).get(key)


def get_non_null_secret_data(secret, key, message):
    """Return the raw value of a data entry, failing with message when absent."""
    return require_non_null(get_optional_secret_data(secret, key), message)


def require_non_null(value, message):
    if value is None:
        raise CredentialsConversionError(message)
    return value


def get_credential_id(secret):
    return secret.metadata.name


def get_credential_description(secret):
    return (secret.metadata.annotations or {}).get(CREDENTIALS_DESCRIPTION_ANNOTATION)


def get_credential_type(secret):
    """Return the credential type tag from the Secret's labels, if any."""
    return (secret.metadata.labels or {}).get(CREDENTIALS_TYPE_LABEL)
