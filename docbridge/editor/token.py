"""HS256 JSON Web Tokens shared with the document editor server."""

from typing import Any

import jwt
from loguru import logger

from docbridge.errors import InvalidTokenError

ALGORITHM = "HS256"


def sign_token(payload: dict[str, Any], secret: str) -> str:
    """Sign a payload as a compact JWT.

    Parameters
    ----------
    payload : dict[str, Any]
        JSON-serializable claims, typically the editor configuration.
    secret : str
        The secret shared with the editor server.

    Returns
    -------
    str
        The ``header.payload.signature`` token.

    Raises
    ------
    InvalidTokenError
        If the secret is empty.
    """
    if not secret:
        raise InvalidTokenError("Cannot sign a token without a secret")
    return jwt.encode(payload, secret, algorithm=ALGORITHM, headers={"typ": "JWT"})


def verify_token(token: str, secret: str) -> dict[str, Any]:
    """Verify a token signed with the shared secret and return its payload.

    Parameters
    ----------
    token : str
        The compact token, optionally prefixed with ``Bearer ``.
    secret : str
        The secret shared with the editor server.

    Returns
    -------
    dict[str, Any]
        The decoded claims.

    Raises
    ------
    InvalidTokenError
        If the secret is empty, or the token is malformed or badly signed.
    """
    if not secret:
        raise InvalidTokenError("Cannot verify a token without a secret")
    if token.startswith("Bearer "):
        token = token[len("Bearer ") :]
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.warning(f"Token verification failed: {e}")
        raise InvalidTokenError(str(e)) from e
