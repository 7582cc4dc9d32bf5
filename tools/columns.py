from typing import Any

from core.client import GridlyClient
from core.schemas import CreateColumn, UpdateColumn, ViewColumn, request_body
from utils.response_utils import DeleteResult, JsonResult


def _column_path(args) -> dict[str, str]:
    return {"view_id": args.view_id, "column_id": args.column_id}


async def retrieve_column(client: GridlyClient, args: ViewColumn) -> JsonResult:
    return JsonResult(await client.request_json("GET", "column", _column_path(args)))


async def create_column(client: GridlyClient, args: CreateColumn) -> JsonResult:
    data = await client.request_json(
        "POST",
        "columns",
        {"view_id": args.view_id},
        body=request_body(args, "view_id"),
    )
    return JsonResult(data)


async def update_column(client: GridlyClient, args: UpdateColumn) -> JsonResult:
    data = await client.request_json(
        "PATCH",
        "column",
        _column_path(args),
        body=request_body(args, "view_id", "column_id"),
    )
    return JsonResult(data)


async def delete_column(client: GridlyClient, args: ViewColumn) -> DeleteResult:
    return DeleteResult("Column", await client.delete("column", _column_path(args)))


def get_tools() -> dict[str, Any]:
    return {
        "retrieve_column": {
            "func": retrieve_column,
            "schema": ViewColumn,
            "title": "Retrieve column",
            "description": "Retrieve a column",
        },
        "create_column": {
            "func": create_column,
            "schema": CreateColumn,
            "title": "Create column",
            "description": "Create a column",
        },
        "update_column": {
            "func": update_column,
            "schema": UpdateColumn,
            "title": "Update column",
            "description": "Update a column",
        },
        "delete_column": {
            "func": delete_column,
            "schema": ViewColumn,
            "title": "Delete column",
            "description": "Delete a column",
        },
    }
