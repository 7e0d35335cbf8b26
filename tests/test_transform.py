"""
Unit tests for dashboard row flattening.
"""

from crossfire_grafana.schemas.documents import FirestoreDocument
from crossfire_grafana.services.transform import collection_rows, combine, dead_letter_rows, latest_order_rows


def _s(value: str) -> dict:
    return {"stringValue": value}


def _map(**fields) -> dict:
    return {"mapValue": {"fields": fields}}


def _store_order(state: str, store_code: str, suburb: str) -> dict:
    return _map(BillTo=_map(State=_s(state), StoreCode=_s(store_code), Suburb=_s(suburb)))


def _dead_letter(name: str, order_number: str, error: str, store_orders: list) -> dict:
    return {
        "name": name,
        "fields": {
            "errorMessage": _s(error),
            "originalPayload": _map(
                OrderNumber=_s(order_number),
                StoreOrders={"arrayValue": {"values": store_orders}},
            ),
        },
        "subCategory": "2024-12-16",
    }


def test_combine_joins_with_dashes() -> None:
    assert combine("a", "b", "c") == "a - b - c"
    assert combine("a", "", "c") == "a -  - c"


class TestLatestOrderRows:
    """Tests for latest_order_rows()."""

    def test_builds_combined_field(self) -> None:
        doc = FirestoreDocument(
            name="projects/p/databases/(default)/documents/latest-orders/x/I001/o1",
            fields={
                "orderNumber": _s("1001"),
                "createdAt": _s("2024-12-16T09:00:00Z"),
                "datePosted": _s("2024-12-16"),
                "total": {"doubleValue": 12.5},
            },
        )
        rows = latest_order_rows([doc], "I001")
        assert rows == [
            {
                "name": doc.name,
                "fields": doc.fields,
                "combinedField": "I001 - 1001 - 2024-12-16T09:00:00Z - 2024-12-16",
            }
        ]

    def test_missing_fields_render_empty(self) -> None:
        doc = FirestoreDocument(name="n", fields={"orderNumber": _s("7")})
        assert latest_order_rows([doc], "I002")[0]["combinedField"] == "I002 - 7 -  - "

    def test_document_without_fields(self) -> None:
        rows = latest_order_rows([FirestoreDocument(name="n")], "I003")
        assert rows == [{"name": "n", "fields": None, "combinedField": "I003 -  -  - "}]

    def test_empty_input(self) -> None:
        assert latest_order_rows([], "I001") == []


class TestDeadLetterRows:
    """Tests for dead_letter_rows()."""

    def test_one_row_per_store_order(self) -> None:
        doc = _dead_letter(
            "dl1",
            "SO-55",
            "store not found",
            [_store_order("VIC", "S01", "Carlton"), _store_order("NSW", "S02", "Newtown")],
        )
        rows = dead_letter_rows([doc])
        assert [r["combinedField"] for r in rows] == [
            "SO-55 - VIC - S01 - Carlton - store not found",
            "SO-55 - NSW - S02 - Newtown - store not found",
        ]
        assert all(r["name"] == "dl1" for r in rows)
        assert all(r["fields"] is doc["fields"] for r in rows)

    def test_no_store_orders_yields_no_rows(self) -> None:
        assert dead_letter_rows([_dead_letter("dl2", "SO-1", "err", [])]) == []
        assert dead_letter_rows([{"name": "dl3", "fields": {"errorMessage": _s("err")}}]) == []

    def test_missing_bill_to_parts_render_empty(self) -> None:
        doc = _dead_letter("dl4", "SO-9", "bad", [_map(BillTo=_map(State=_s("QLD"))), _map()])
        assert [r["combinedField"] for r in dead_letter_rows([doc])] == [
            "SO-9 - QLD -  -  - bad",
            "SO-9 -  -  -  - bad",
        ]

    def test_rows_follow_document_order(self) -> None:
        first = _dead_letter("a", "1", "e1", [_store_order("VIC", "S1", "X")])
        second = _dead_letter("b", "2", "e2", [_store_order("WA", "S2", "Y")])
        assert [r["name"] for r in dead_letter_rows([first, second])] == ["a", "b"]


def test_collection_rows_decodes_fields() -> None:
    doc = FirestoreDocument(
        name="projects/p/databases/(default)/documents/restaurants/R001",
        fields={"name": _s("Crossfire"), "seats": {"integerValue": "40"}},
    )
    assert collection_rows([doc]) == [{"id": "R001", "data": {"name": "Crossfire", "seats": 40}}]
