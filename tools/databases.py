from typing import Any

from core.client import GridlyClient
from core.schemas import DatabaseId, OptionalProjectId
from utils.response_utils import JsonResult


async def list_databases(client: GridlyClient, args: OptionalProjectId) -> JsonResult:
    """List databases, optionally narrowed to one project.

    Without a project id the `projectId` query parameter is left out entirely.
    """
    data = await client.request_json("GET", "databases", params={"projectId": args.project_id})
    return JsonResult(data)


async def retrieve_database(client: GridlyClient, args: DatabaseId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "database", {"database_id": args.database_id}))


def get_tools() -> dict[str, Any]:
    return {
        "list_databases": {
            "func": list_databases,
            "schema": OptionalProjectId,
            "title": "List databases",
            "description": "List databases in a project",
        },
        "retrieve_database": {
            "func": retrieve_database,
            "schema": DatabaseId,
            "title": "Retrieve database",
            "description": "Retrieve a database",
        },
    }
