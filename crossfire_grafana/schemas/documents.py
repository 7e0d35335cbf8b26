"""Schemas for Firestore documents and the dashboard endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class FirestoreDocument(BaseModel):
    """A document as returned by the Firestore REST API (typed value wrappers kept as-is)."""

    name: str = Field("", description="Full resource name, e.g. projects/p/databases/d/documents/restaurants/R001.")
    fields: dict[str, Any] | None = Field(None, description="Field name -> typed value wrapper (stringValue, mapValue, ...).")

    model_config = {"extra": "ignore"}


class DocumentsResponse(BaseModel):
    """Envelope returned by every document endpoint."""

    message: str = Field(..., description="Human-readable status message.")
    documents: list[dict[str, Any]] = Field(default_factory=list, description="Documents or flattened rows.")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Documents fetched successfully",
                    "documents": [
                        {
                            "name": "projects/p/databases/(default)/documents/latest-orders/x/I001/o1",
                            "fields": {"orderNumber": {"stringValue": "1001"}},
                            "combinedField": "I001 - 1001 -  - ",
                        }
                    ],
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str


class StatusResponse(BaseModel):
    message: str
