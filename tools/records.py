from typing import Any

from core.client import GridlyClient
from core.schemas import AddRecords, DeleteRecords, ListRecords, RecordHistory, UpdateRecords
from utils.response_utils import DeleteResult, JsonResult


def _paging(args) -> dict[str, Any]:
    return {"page": args.page.model_dump(by_alias=True) if args.page is not None else None}


def _records_body(records) -> list[dict[str, Any]]:
    # an absent id or path is left out rather than sent as null
    return [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in records]


async def list_records(client: GridlyClient, args: ListRecords) -> JsonResult:
    """List records of a view.

    `page` and `sort` are sent as JSON-encoded query parameters, and only when given.
    """
    params = _paging(args)
    params["sort"] = args.sort
    data = await client.request_json("GET", "records", {"view_id": args.view_id}, params=params)
    return JsonResult(data)


async def add_records(client: GridlyClient, args: AddRecords) -> JsonResult:
    data = await client.request_json(
        "POST",
        "records",
        {"view_id": args.view_id},
        body=_records_body(args.records),
    )
    return JsonResult(data)


async def update_records(client: GridlyClient, args: UpdateRecords) -> JsonResult:
    data = await client.request_json(
        "PATCH",
        "records",
        {"view_id": args.view_id},
        body=_records_body(args.records),
    )
    return JsonResult(data)


async def delete_records(client: GridlyClient, args: DeleteRecords) -> DeleteResult:
    success = await client.delete("records", {"view_id": args.view_id}, body={"ids": args.ids})
    return DeleteResult("Record(s)", success)


async def fetch_record_history(client: GridlyClient, args: RecordHistory) -> JsonResult:
    path = {"view_id": args.view_id, "record_id": args.record_id}
    return JsonResult(await client.request_json("GET", "record_history", path, params=_paging(args)))


def get_tools() -> dict[str, Any]:
    return {
        "list_records": {
            "func": list_records,
            "schema": ListRecords,
            "title": "List records",
            "description": "List records of a view, with optional pagination and sorting",
        },
        "add_records": {
            "func": add_records,
            "schema": AddRecords,
            "title": "Add records",
            "description": "Add new records to a view",
        },
        "update_records": {
            "func": update_records,
            "schema": UpdateRecords,
            "title": "Update records",
            "description": "Update existing records of a view",
        },
        "delete_records": {
            "func": delete_records,
            "schema": DeleteRecords,
            "title": "Delete records",
            "description": "Delete existing records of a view",
        },
        "fetch_record_history": {
            "func": fetch_record_history,
            "schema": RecordHistory,
            "title": "Fetch record history",
            "description": "Fetch the change history of a record",
        },
    }
