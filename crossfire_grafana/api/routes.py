"""
API route aggregator: register endpoints; no logic, only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Query

from crossfire_grafana.api.handlers import (
    handle_collection_data,
    handle_dead_letters,
    handle_latest_orders,
    handle_restaurants_cache,
)
from crossfire_grafana.schemas.documents import DocumentsResponse, ErrorResponse, StatusResponse

logger = logging.getLogger(__name__)
router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# --- System ---

@router.get("/", response_model=StatusResponse, tags=["system"])
def root():
    return {"message": "Server is running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Dashboard ---

@router.get(
    "/restaurants-cache",
    response_model=DocumentsResponse,
    responses=_ERRORS,
    tags=["dashboard"],
    summary="List the restaurants collection",
    description="Every document of the restaurants collection (all pages), fields left as Firestore typed values.",
)
def get_restaurants_cache() -> DocumentsResponse:
    return handle_restaurants_cache()


@router.get(
    "/latest-orders",
    response_model=DocumentsResponse,
    responses=_ERRORS,
    tags=["dashboard"],
    summary="Latest orders for one subcollection",
    description="Collection-group query on the given subcollection (e.g. I001). Adds combinedField: "
    "subCollection - orderNumber - createdAt - datePosted. 400 if subCollection is missing.",
)
def get_latest_orders(
    sub_collection: str = Query("", alias="subCollection", description="Subcollection id, e.g. I001."),
) -> DocumentsResponse:
    logger.info("[api:get_latest_orders] IN  subCollection=%r", sub_collection)
    return handle_latest_orders(sub_collection)


@router.get(
    "/dead-letters-specific",
    response_model=DocumentsResponse,
    responses=_ERRORS,
    tags=["dashboard"],
    summary="Dead letters for one day",
    description="Collection-group query on a dead-letters/NANALL day subcollection (e.g. 2024-12-16). One row per "
    "store order; combinedField: OrderNumber - State - StoreCode - Suburb - errorMessage.",
)
def get_dead_letters(
    sub_collection: str = Query("", alias="subCollection", description="Day subcollection, e.g. 2024-12-16."),
) -> DocumentsResponse:
    logger.info("[api:get_dead_letters] IN  subCollection=%r", sub_collection)
    return handle_dead_letters(sub_collection)


@router.get(
    "/collections/{collection:path}",
    response_model=DocumentsResponse,
    responses=_ERRORS,
    tags=["dashboard"],
    summary="List any collection as plain data",
    description="Every document of the collection as {id, data}, typed values decoded to plain JSON.",
)
def get_collection_data(collection: str) -> DocumentsResponse:
    logger.info("[api:get_collection_data] IN  collection=%r", collection)
    return handle_collection_data(collection)
