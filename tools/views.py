from typing import Any

from core.client import GridlyClient
from core.schemas import CreateView, GridId, ViewId, request_body
from utils.response_utils import JsonResult


async def list_views(client: GridlyClient, args: GridId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "views", params={"gridId": args.grid_id}))


async def retrieve_view(client: GridlyClient, args: ViewId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "view", {"view_id": args.view_id}))


async def create_view(client: GridlyClient, args: CreateView) -> JsonResult:
    """Create a view over a grid. The grid id is part of the body, not the path."""
    return JsonResult(await client.request_json("POST", "views", body=request_body(args)))


def get_tools() -> dict[str, Any]:
    return {
        "list_views": {
            "func": list_views,
            "schema": GridId,
            "title": "List views",
            "description": "List views of a grid",
        },
        "retrieve_view": {
            "func": retrieve_view,
            "schema": ViewId,
            "title": "Retrieve view",
            "description": "Retrieve a view",
        },
        "create_view": {
            "func": create_view,
            "schema": CreateView,
            "title": "Create view",
            "description": "Create a view",
        },
    }
