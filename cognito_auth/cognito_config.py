import os
import logging
from dotenv import load_dotenv, find_dotenv
from cognito_auth.utils import get_secret_hash

logger = logging.getLogger(__name__)

CLIENT_ID_VAR = 'COGNITO_CLIENT_ID'
CLIENT_SECRET_VAR = 'COGNITO_CLIENT_SECRET'


class MissingCredentialsError(RuntimeError):
    """Raised when the Cognito app client credentials are not configured."""


def load_client_credentials():
    """
    Read the app client id and secret from the environment at call time.
    A .env file in the working directory is loaded first; variables already
    set in the process environment take precedence over it.

    An empty client secret is returned as-is so that hashing reports it.
    """
    load_dotenv(find_dotenv(usecwd=True))

    client_id = os.getenv(CLIENT_ID_VAR)
    client_secret = os.getenv(CLIENT_SECRET_VAR)

    missing = []
    if not client_id:
        missing.append(CLIENT_ID_VAR)
    if client_secret is None:
        missing.append(CLIENT_SECRET_VAR)
    if missing:
        logger.error("Cognito credentials not configured: %s", ", ".join(missing))
        raise MissingCredentialsError(f"{' and '.join(missing)} must be set")

    return client_id, client_secret


def get_secret_hash_for_user(username):
    """Secret hash for ``username`` using the configured app client."""
    client_id, client_secret = load_client_credentials()
    return get_secret_hash(username, client_id, client_secret)
