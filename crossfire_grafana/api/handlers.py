"""
API handlers: call services, shape rows for the dashboard, map errors to HTTP.

Responsibility: Bridge HTTP types and services. Exception-to-HTTP mapping lives
here so services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import HTTPException

from crossfire_grafana.core.config import DEAD_LETTERS_PARENT, RESTAURANTS_COLLECTION
from crossfire_grafana.core.errors import FirestoreError
from crossfire_grafana.schemas.documents import DocumentsResponse
from crossfire_grafana.services.firestore import (
    InvalidCollectionPathError,
    fetch_dead_letter_documents,
    list_documents,
    run_collection_group_query,
)
from crossfire_grafana.services.transform import collection_rows, dead_letter_rows, latest_order_rows

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Documents fetched successfully"


def _require_sub_collection(sub_collection: str) -> str:
    value = (sub_collection or "").strip()
    if not value:
        raise HTTPException(status_code=400, detail="subCollection query parameter is required")
    return value


def _upstream_failure(e: FirestoreError) -> HTTPException:
    logger.exception("Firestore call failed")
    return HTTPException(status_code=500, detail=e.message)


def handle_restaurants_cache() -> DocumentsResponse:
    """Every document of the restaurants collection, unflattened."""
    try:
        documents = list_documents(RESTAURANTS_COLLECTION)
    except FirestoreError as e:
        raise _upstream_failure(e) from e
    return DocumentsResponse(
        message=f"{SUCCESS_MESSAGE} from {RESTAURANTS_COLLECTION}",
        documents=[doc.model_dump() for doc in documents],
    )


def handle_latest_orders(sub_collection: str) -> DocumentsResponse:
    sub_collection = _require_sub_collection(sub_collection)
    try:
        documents = run_collection_group_query(sub_collection)
    except FirestoreError as e:
        raise _upstream_failure(e) from e
    rows = latest_order_rows(documents, sub_collection)
    logger.info("[handlers:latest_orders] OUT sub_collection=%s rows=%d", sub_collection, len(rows))
    return DocumentsResponse(message=SUCCESS_MESSAGE, documents=rows)


def handle_dead_letters(sub_collection: str) -> DocumentsResponse:
    """Dead letters for one day, one row per store order in the failed payload."""
    sub_collection = _require_sub_collection(sub_collection)
    try:
        documents = fetch_dead_letter_documents(sub_collection, parent=DEAD_LETTERS_PARENT)
    except FirestoreError as e:
        raise _upstream_failure(e) from e
    rows = dead_letter_rows(documents)
    logger.info(
        "[handlers:dead_letters] OUT sub_collection=%s documents=%d rows=%d",
        sub_collection,
        len(documents),
        len(rows),
    )
    return DocumentsResponse(message=SUCCESS_MESSAGE, documents=rows)


def handle_collection_data(collection: str) -> DocumentsResponse:
    collection = (collection or "").strip().strip("/")
    if not collection:
        raise HTTPException(status_code=400, detail="collection is required")
    try:
        documents = list_documents(collection)
    except InvalidCollectionPathError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except FirestoreError as e:
        raise _upstream_failure(e) from e
    return DocumentsResponse(message=f"{SUCCESS_MESSAGE} from {collection}", documents=collection_rows(documents))
