import hmac
import hashlib
import base64
import logging

logger = logging.getLogger(__name__)


class InvalidKeyError(KeyError):
    """Raised when the client secret encodes to an empty HMAC key."""

    def __str__(self):
        # KeyError quotes its argument; show the plain message instead
        return str(self.args[0]) if self.args else ''


def _to_utf8(text: str) -> bytes:
    """UTF-8 bytes of ``text``, with lone surrogates replaced by U+FFFD."""
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace").encode("utf-8")


def get_secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """
    Compute the Cognito secret hash for a user.

    This is the base64-encoded HMAC-SHA256 of ``username + client_id``,
    keyed with the app client's secret. Cognito requires it on sign-up,
    login and password-reset calls when the app client has a secret.
    Empty username or client_id are accepted; the secret must not be empty.
    """
    key = _to_utf8(client_secret)
    if not key:
        logger.warning("Rejected secret hash request: zero-length client secret")
        raise InvalidKeyError("Zero-length key is not supported")

    message = _to_utf8(username) + _to_utf8(client_id)
    dig = hmac.new(
        key,
        msg=message,
        digestmod=hashlib.sha256
    ).digest()

    logger.debug("Computed secret hash over %d message bytes", len(message))
    return base64.b64encode(dig).decode()


def verify_secret_hash(username: str, client_id: str, client_secret: str, secret_hash: str) -> bool:
    """Check a secret hash against the one computed from the credentials, in constant time."""
    expected = get_secret_hash(username, client_id, client_secret)
    return hmac.compare_digest(_to_utf8(expected), _to_utf8(secret_hash))
