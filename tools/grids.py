from typing import Any

from core.client import GridlyClient
from core.schemas import CreateGrid, DatabaseId, GridId, UpdateGrid, request_body
from utils.response_utils import DeleteResult, JsonResult


async def list_grids(client: GridlyClient, args: DatabaseId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "grids", params={"dbId": args.database_id}))


async def retrieve_grid(client: GridlyClient, args: GridId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "grid", {"grid_id": args.grid_id}))


async def create_grid(client: GridlyClient, args: CreateGrid) -> JsonResult:
    """Create a grid in a database, optionally from a template grid.

    The database id travels as the `dbId` query parameter, everything else in the body.
    """
    data = await client.request_json(
        "POST",
        "grids",
        params={"dbId": args.database_id},
        body=request_body(args, "database_id"),
    )
    return JsonResult(data)


async def update_grid(client: GridlyClient, args: UpdateGrid) -> JsonResult:
    """Rename a grid and/or patch its metadata.

    Metadata keys set to null are removed by Gridly; they are sent as-is.
    """
    data = await client.request_json(
        "PATCH",
        "grid",
        {"grid_id": args.grid_id},
        body=request_body(args, "grid_id"),
    )
    return JsonResult(data)


async def delete_grid(client: GridlyClient, args: GridId) -> DeleteResult:
    return DeleteResult("Grid", await client.delete("grid", {"grid_id": args.grid_id}))


def get_tools() -> dict[str, Any]:
    return {
        "list_grids": {
            "func": list_grids,
            "schema": DatabaseId,
            "title": "List grids",
            "description": "List grids in a database",
        },
        "retrieve_grid": {
            "func": retrieve_grid,
            "schema": GridId,
            "title": "Retrieve grid",
            "description": "Retrieve a grid",
        },
        "create_grid": {
            "func": create_grid,
            "schema": CreateGrid,
            "title": "Create grid",
            "description": "Create a grid",
        },
        "update_grid": {
            "func": update_grid,
            "schema": UpdateGrid,
            "title": "Update grid",
            "description": "Update a grid",
        },
        "delete_grid": {
            "func": delete_grid,
            "schema": GridId,
            "title": "Delete grid",
            "description": "Delete a grid",
        },
    }
