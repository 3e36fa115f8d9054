import logging

from .converter import SecretToCredentialConverter
from ..credentials import (
    CredentialsScope,
    GroupAccessToken,
    PersonalAccessToken,
    SecretText,
)
from ..exceptions import CredentialsConversionError
from ..secrets import (
    get_credential_description,
    get_credential_id,
    get_non_null_secret_data,
    get_optional_secret_data,
    require_non_null,
)
from ..utils import base64_decode_to_string

logger = logging.getLogger("gitlab-credentials-k8s.gitlab")

TOKEN_TYPES = {
    "personal": PersonalAccessToken,
    "group": GroupAccessToken,
}


class GitLabCredentialConverter(SecretToCredentialConverter):
    """Converts `gitlabToken` Secrets into GitLab access token credentials."""

    CREDENTIAL_TYPE = "gitlabToken"

    def can_convert(self, credential_type):
        return credential_type == self.CREDENTIAL_TYPE

    def convert(self, secret):
        token_base64 = get_non_null_secret_data(
            secret, "text",
            "gitlabToken credential is missing the token (in the text property)")
        token = require_non_null(
            base64_decode_to_string(token_base64),
            "gitlabToken credential has an invalid token "
            "(the data in the text property must be base64 encoded UTF-8)")

        credential_class = TOKEN_TYPES[self._token_type(secret)]
        logger.debug(
            f"Building {credential_class.__name__} from secret '{secret.metadata.name}'")
        return credential_class(
            scope=CredentialsScope.GLOBAL,
            id=get_credential_id(secret),
            description=get_credential_description(secret),
            token=SecretText(token),
        )

    def _token_type(self, secret):
        """Read the optional tokenType property, defaulting to a personal token."""
        token_type_base64 = get_optional_secret_data(secret, "tokenType")
        if token_type_base64 is None:
            return "personal"

        token_type = require_non_null(
            base64_decode_to_string(token_type_base64),
            "gitlabToken credential has an invalid token type "
            "(the data in the tokenType property must be base64 encoded UTF-8)")
        if token_type not in TOKEN_TYPES:
            raise CredentialsConversionError(
                f"gitlabToken credential has an unsupported token type '{token_type}' "
                f"(the tokenType property must be one of: {', '.join(sorted(TOKEN_TYPES))})")
        return token_type
