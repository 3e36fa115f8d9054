"""Credential types produced from Kubernetes Secrets."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CredentialsScope(str, Enum):
    """Visibility of a credential within the CI platform."""

    GLOBAL = "GLOBAL"
    SYSTEM = "SYSTEM"


class SecretText:
    """Token text that is kept out of reprs and log lines."""

    def __init__(self, plain_text):
        self._plain_text = plain_text

    def get_plain_text(self):
        return self._plain_text

    def __eq__(self, other):
        if not isinstance(other, SecretText):
            return NotImplemented
        return self._plain_text == other._plain_text

    def __hash__(self):
        return hash(self._plain_text)

    def __repr__(self):
        return "SecretText(****)"

    __str__ = __repr__


@dataclass(frozen=True)
class PersonalAccessToken:
    """A GitLab personal access token credential.

    Attributes:
        scope: Where the credential is visible.
        id: Credential identifier, taken from the Secret name.
        description: Free text description, may be None.
        token: The access token.

    """

    scope: CredentialsScope
    id: str
    description: Optional[str]
    token: SecretText


@dataclass(frozen=True)
class GroupAccessToken:
    """A GitLab group access token credential.

    Same shape as PersonalAccessToken; the CI platform tells them apart by
    type.
    """

    scope: CredentialsScope
    id: str
    description: Optional[str]
    token: SecretText
