from .gitlab import GitLabCredentialConverter

SUPPORTED_CONVERTERS = {
    GitLabCredentialConverter.CREDENTIAL_TYPE: GitLabCredentialConverter,
}

def find_converter(credential_type):
    """Return the first registered converter accepting the type, or None."""
    for converter_class in SUPPORTED_CONVERTERS.values():
        converter = converter_class()
        if converter.can_convert(credential_type):
            return converter
    return None

def get_converter(credential_type):
    converter = find_converter(credential_type)
    if not converter:
        raise ValueError(f"Unsupported credential type: {credential_type}")
    return converter
