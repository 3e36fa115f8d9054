import base64
import binascii
import logging
from typing import Optional

import yaml
from kubernetes import client

from .exceptions import SecretManifestError

logger = logging.getLogger("gitlab-credentials-k8s")


def base64_decode(s: str) -> Optional[bytes]:
    """
    Convert the base64 representation of some bytes back to bytes.

    Only the standard alphabet with correct padding is accepted; unlike
    decoders that treat padding as optional, "c29tZQ" is rejected.

    :param s: the base64 encoded representation of the bytes
    :return: the decoded bytes, or None if the string could not be decoded
    """
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(
            f"Failed to base64 decode secret data, is the format valid? {e}")
    return None


def base64_decode_to_string(s: str) -> Optional[str]:
    """
    Convert the base64 representation of a UTF-8 string back to a string.

    Decoding is strict: malformed or unmappable byte sequences fail the
    conversion instead of being replaced.

    :param s: the base64 encoded representation of the UTF-8 bytes
    :return: the decoded text, or None if the string could not be converted
    """
    data = base64_decode(s)
    if data is None:
        return None
    try:
        return data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as e:
        logger.warning(
            f"Failed to convert secret data, is this a valid UTF-8 string? {e}")
    return None


def _mapping(manifest, key, path):
    """Return manifest[key] as a dict, failing when it is not a mapping."""
    value = manifest.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SecretManifestError(
            f"Manifest '{path}' has an invalid '{key}' section (expected a mapping)")
    return value


def load_secret_manifest(path):
    """Load a Kubernetes Secret manifest from a YAML file.

    Data entries without a value are left out; any other non-string value
    is rejected.
    """
    try:
        with open(path, encoding="utf-8") as f:
            manifest = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SecretManifestError(
            f"Could not read Secret manifest '{path}': {e}") from e

    if not isinstance(manifest, dict) or manifest.get("kind") != "Secret":
        raise SecretManifestError(
            f"Manifest '{path}' does not describe a Kubernetes Secret")

    metadata = _mapping(manifest, "metadata", path)
    data = {}
    for key, value in _mapping(manifest, "data", path).items():
        if value is None:
            continue
        if not isinstance(value, str):
            raise SecretManifestError(
                f"Manifest '{path}' has a non-string value for data entry '{key}'")
        data[key] = value

    logger.debug(f"Loaded Secret '{metadata.get('name')}' from '{path}'")
    return client.V1Secret(
        api_version=manifest.get("apiVersion"),
        kind="Secret",
        metadata=client.V1ObjectMeta(
            name=metadata.get("name"),
            namespace=metadata.get("namespace"),
            labels=metadata.get("labels"),
            annotations=metadata.get("annotations"),
        ),
        data=data or None,
        type=manifest.get("type"),
    )
