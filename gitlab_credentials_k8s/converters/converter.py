import abc


class SecretToCredentialConverter(abc.ABC):
    """Abstract base class for a Secret to credential converter."""

    @abc.abstractmethod
    def can_convert(self, credential_type):
        """Check if this converter handles the given credential type."""
        pass

    @abc.abstractmethod
    def convert(self, secret):
        """Convert a Secret into a credential."""
        pass
