# src/wordfinder/core/errors.py
"""
Provider failures.

A word that the provider does not know is not an error: it comes back
as a response with found=False. These exceptions cover everything else.
"""


class ProviderError(RuntimeError):
    """Lookup could not be completed (network, HTTP status, ...)."""


class MalformedResponseError(ProviderError):
    """Provider answered, but the payload could not be decoded or has the wrong shape."""


class ProviderConfigError(ProviderError):
    """Credentials are missing or were rejected. Retrying will not help."""
