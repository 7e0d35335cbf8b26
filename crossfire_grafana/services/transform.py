"""
Flatten Firestore documents into dashboard rows.

Each row keeps the raw document name and fields and adds a "combinedField"
display string built from a few nested scalars.
"""

from typing import Any, Iterable

from crossfire_grafana.schemas.documents import FirestoreDocument
from crossfire_grafana.services.values import (
    array_values,
    decode_fields,
    document_id,
    map_fields,
    string_value,
)

SEPARATOR = " - "


def combine(*parts: str) -> str:
    return SEPARATOR.join(parts)


def latest_order_rows(documents: Iterable[FirestoreDocument], sub_collection: str) -> list[dict[str, Any]]:
    """One row per order: "<subCollection> - <orderNumber> - <createdAt> - <datePosted>"."""
    rows: list[dict[str, Any]] = []
    for doc in documents:
        fields = doc.fields or {}
        rows.append({
            "name": doc.name,
            "fields": doc.fields,
            "combinedField": combine(
                sub_collection,
                string_value(fields, "orderNumber"),
                string_value(fields, "createdAt"),
                string_value(fields, "datePosted"),
            ),
        })
    return rows


def dead_letter_rows(documents: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    One row per store order inside each dead letter's original payload.

    combinedField is "<OrderNumber> - <State> - <StoreCode> - <Suburb> - <errorMessage>",
    with OrderNumber from the payload, the address parts from the store order's
    BillTo, and errorMessage from the dead letter itself. A dead letter
    without store orders contributes no rows.
    """
    rows: list[dict[str, Any]] = []
    for doc in documents:
        fields = doc.get("fields") or {}
        payload = map_fields(fields.get("originalPayload"))
        order_number = string_value(payload, "OrderNumber")
        error_message = string_value(fields, "errorMessage")

        for store_order in array_values(payload.get("StoreOrders")):
            bill_to = map_fields(map_fields(store_order).get("BillTo"))
            rows.append({
                "combinedField": combine(
                    order_number,
                    string_value(bill_to, "State"),
                    string_value(bill_to, "StoreCode"),
                    string_value(bill_to, "Suburb"),
                    error_message,
                ),
                "name": doc.get("name", ""),
                "fields": fields,
            })
    return rows


def collection_rows(documents: Iterable[FirestoreDocument]) -> list[dict[str, Any]]:
    """Documents as {"id", "data"} with typed wrappers decoded to plain values."""
    return [{"id": document_id(doc.name), "data": decode_fields(doc.fields)} for doc in documents]
