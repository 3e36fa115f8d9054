"""Credential provider - converts labelled Secrets into credentials."""

import logging
from prometheus_client import Counter, Histogram

from .converters import find_converter, get_converter
from .secrets import get_credential_type

logger = logging.getLogger("gitlab-credentials-k8s")

# Prometheus metrics
CREDENTIALS_CONVERTED = Counter(
    'gitlab_credentials_converted_total', 'Total number of secrets converted into credentials')
CONVERSION_ERRORS_TOTAL = Counter(
    'gitlab_credentials_conversion_errors_total', 'Total number of secrets that failed to convert')
SECRETS_SKIPPED = Counter(
    'gitlab_credentials_secrets_skipped_total', 'Total number of secrets without a supported credential type')
CONVERSION_DURATION = Histogram(
    'gitlab_credentials_conversion_duration_seconds', 'Duration of converting a secret')


class CredentialProvider:
    """Turns the Secrets handed over by the CI platform into credentials."""

    def find_secrets(self, secrets):
        """Keep only the secrets labelled with a supported credential type."""
        found = []
        for secret in secrets:
            if find_converter(get_credential_type(secret)) is not None:
                found.append(secret)
            else:
                SECRETS_SKIPPED.inc()
                logger.debug(
                    f"Skipping secret '{secret.metadata.name}' without a supported credential type")
        return found

    @CONVERSION_DURATION.time()
    def convert_secret(self, secret):
        """
        Converts a single secret with the converter registered for its type.

        Raises CredentialsConversionError when the secret content is invalid
        and ValueError when its type has no converter.
        """
        credential_type = get_credential_type(secret)
        converter = get_converter(credential_type)
        try:
            credential = converter.convert(secret)
        except Exception:
            CONVERSION_ERRORS_TOTAL.inc()
            raise

        CREDENTIALS_CONVERTED.inc()
        logger.info(
            f"Converted secret '{secret.metadata.name}' into a {credential_type} credential.")
        return credential

    def convert_secrets(self, secrets):
        """
        Converts every supported secret, keyed by credential id.

        A secret that fails to convert is logged and left out, as is a secret
        whose credential id is already taken by an earlier secret.
        """
        credentials = {}
        for secret in self.find_secrets(secrets):
            try:
                credential = self.convert_secret(secret)
            except Exception as e:
                logger.error(
                    f"Error converting secret '{secret.metadata.name}': {e}")
                continue
            if credential.id in credentials:
                CONVERSION_ERRORS_TOTAL.inc()
                logger.error(
                    f"Secret '{secret.metadata.name}' in ns '{secret.metadata.namespace}' "
                    f"duplicates credential id '{credential.id}', keeping the first one.")
                continue
            credentials[credential.id] = credential
        return credentials
