"""
OAuth access tokens for the Firestore REST API.

Uses Application Default Credentials (GOOGLE_APPLICATION_CREDENTIALS, gcloud
user credentials, or the metadata server) scoped to Datastore/Firestore.
"""

import logging

import google.auth
from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
from google.auth.transport.requests import Request

from crossfire_grafana.core.config import FIRESTORE_SCOPE
from crossfire_grafana.core.errors import CredentialsError

logger = logging.getLogger(__name__)


def get_access_token() -> str:
    """
    Find default credentials and mint a fresh bearer token.

    Tokens are not cached; every Firestore operation asks for one.
    """
    try:
        credentials, _project = google.auth.default(scopes=[FIRESTORE_SCOPE])
    except DefaultCredentialsError as e:
        raise CredentialsError(f"failed to find default credentials: {e}") from e

    try:
        credentials.refresh(Request())
    except GoogleAuthError as e:
        raise CredentialsError(f"failed to generate access token: {e}") from e

    token = credentials.token
    if not token:
        raise CredentialsError("failed to generate access token: empty token")
    logger.debug("[credentials:get_access_token] OUT token acquired")
    return token
