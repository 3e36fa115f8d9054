"""GitLab credentials from Kubernetes - Entry point."""

import logging
import os
import sys
from dotenv import load_dotenv
from prometheus_client import REGISTRY, write_to_textfile

from .exceptions import SecretManifestError
from .provider import CredentialProvider
from .utils import load_secret_manifest

logger = logging.getLogger("gitlab-credentials-k8s")


def main(argv=None):
    """Convert the Secret manifests named on the command line."""
    # Load environment variables from .env file
    load_dotenv()

    # Get log level from environment variable (default to INFO)
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if log_level not in valid_log_levels:
        log_level = "INFO"

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug(f"Log level set to: {log_level}")

    paths = sys.argv[1:] if argv is None else argv
    if not paths:
        logger.error("Usage: gitlab-credentials-k8s MANIFEST [MANIFEST...]")
        sys.exit(1)

    try:
        secrets = [load_secret_manifest(path) for path in paths]
    except SecretManifestError as e:
        logger.error(str(e))
        sys.exit(1)

    provider = CredentialProvider()
    credentials = provider.convert_secrets(secrets)
    for credential in credentials.values():
        logger.info(
            f"Credential '{credential.id}' ({type(credential).__name__}, scope {credential.scope.value}) is ready.")

    metrics_textfile = os.environ.get("METRICS_TEXTFILE")
    if metrics_textfile:
        write_to_textfile(metrics_textfile, REGISTRY)
        logger.info(f"Metrics written to {metrics_textfile}.")

    if len(credentials) != len(secrets):
        logger.error(
            f"Converted {len(credentials)} of {len(secrets)} secrets.")
        sys.exit(1)

    logger.info(f"Converted {len(credentials)} secrets.")
    sys.exit(0)


if __name__ == '__main__':
    main()
