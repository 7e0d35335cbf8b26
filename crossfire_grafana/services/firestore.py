"""
Firestore REST client: collection listing (paginated) and collection-group queries.

Responsibility: Authenticate with a bearer token, call the documents endpoints,
and hand back documents with their typed value wrappers untouched.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from crossfire_grafana.core.config import (
    DATABASE_ID,
    DEAD_LETTERS_PARENT,
    FIRESTORE_API_TIMEOUT,
    FIRESTORE_BASE_URL,
    PROJECT_ID,
)
from crossfire_grafana.core.errors import CredentialsError, FirestoreError
from crossfire_grafana.schemas.documents import FirestoreDocument
from crossfire_grafana.services.credentials import get_access_token

logger = logging.getLogger(__name__)


class InvalidCollectionPathError(Exception):
    """Raised when a collection path has empty, dot, or method-like (":") segments."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"invalid collection path: {collection!r}")


def collection_path(collection: str) -> str:
    """
    URL path for a collection below the documents root, each segment percent-encoded.

    Dot segments would be resolved by the HTTP client and ":" selects a REST
    method, so both are rejected rather than escaped.
    """
    segments = (collection or "").split("/")
    for segment in segments:
        if segment in ("", ".", "..") or ":" in segment:
            raise InvalidCollectionPathError(collection)
    return "/".join(quote(segment, safe="") for segment in segments)


def _new_client() -> httpx.Client:
    return httpx.Client(timeout=FIRESTORE_API_TIMEOUT)


def documents_url() -> str:
    """Base documents URL for the configured project and database."""
    if not PROJECT_ID:
        raise FirestoreError("PROJECT_ID is not configured")
    return f"{FIRESTORE_BASE_URL}/projects/{PROJECT_ID}/databases/{DATABASE_ID}/documents"


def _auth_headers() -> dict[str, str]:
    try:
        token = get_access_token()
    except CredentialsError as e:
        raise CredentialsError(f"failed to get access token: {e.message}") from e
    return {"Authorization": f"Bearer {token}"}


def _send(client: httpx.Client, method: str, url: str, **kwargs: Any) -> Any:
    """Issue one request and return the decoded JSON body, raising FirestoreError on failure."""
    try:
        response = client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        raise FirestoreError(f"failed to make request: {e}") from e

    if response.status_code != 200:
        logger.warning(
            "[firestore] %s %s -> %s: %s", method, url, response.status_code, response.text[:200]
        )
        raise FirestoreError(
            f"firestore API returned error: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        raise FirestoreError(f"failed to parse response: {e}") from e


def list_documents(collection: str) -> list[FirestoreDocument]:
    """
    Return every document in a top-level collection.

    Follows nextPageToken until Firestore stops returning one.
    """
    url = f"{documents_url()}/{collection_path(collection)}"
    headers = _auth_headers()
    logger.info("[firestore:list_documents] IN  collection=%s", collection)

    documents: list[FirestoreDocument] = []
    page_token = ""
    pages = 0
    with _new_client() as client:
        while True:
            params = {"pageToken": page_token} if page_token else None
            data = _send(client, "GET", url, headers=headers, params=params)
            if not isinstance(data, dict):
                raise FirestoreError("failed to parse response: expected a JSON object")
            pages += 1
            for raw in data.get("documents") or []:
                documents.append(FirestoreDocument.model_validate(raw))
            page_token = data.get("nextPageToken") or ""
            if not page_token:
                break

    logger.info(
        "[firestore:list_documents] OUT collection=%s pages=%d documents=%d", collection, pages, len(documents)
    )
    return documents


def run_collection_group_query(collection_id: str) -> list[FirestoreDocument]:
    """
    Query every collection named collection_id, at any depth, via :runQuery.

    Result entries without a document (the lone readTime entry of an empty
    result) are skipped.
    """
    url = f"{documents_url()}:runQuery"
    headers = _auth_headers()
    payload = {
        "structuredQuery": {
            "from": [{"collectionId": collection_id, "allDescendants": True}],
        }
    }
    logger.info("[firestore:run_collection_group_query] IN  collection_id=%s", collection_id)

    with _new_client() as client:
        data = _send(client, "POST", url, headers=headers, json=payload)
    if not isinstance(data, list):
        raise FirestoreError("failed to parse response: expected a JSON array")

    documents = [
        FirestoreDocument.model_validate(entry["document"])
        for entry in data
        if isinstance(entry, dict) and isinstance(entry.get("document"), dict)
    ]
    logger.info(
        "[firestore:run_collection_group_query] OUT collection_id=%s documents=%d", collection_id, len(documents)
    )
    return documents


def fetch_dead_letter_documents(sub_collection: str, parent: str = DEAD_LETTERS_PARENT) -> list[dict[str, Any]]:
    """
    Dead-letter documents for one day's subcollection (e.g. 2024-12-16).

    Only documents that carry fields are kept; each is tagged with the
    subcollection it came from under "subCategory".
    """
    logger.info("[firestore:fetch_dead_letter_documents] IN  parent=%s sub_collection=%s", parent, sub_collection)
    documents = run_collection_group_query(sub_collection)
    return [
        {"name": doc.name, "fields": doc.fields, "subCategory": sub_collection}
        for doc in documents
        if doc.fields
    ]
