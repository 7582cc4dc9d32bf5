from typing import Any

from core.client import GridlyClient
from core.schemas import ViewDependency, ViewId
from utils.response_utils import DeleteResult, JsonResult


async def list_dependencies(client: GridlyClient, args: ViewId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "dependencies", {"view_id": args.view_id}))


async def retrieve_dependency(client: GridlyClient, args: ViewDependency) -> JsonResult:
    path = {"view_id": args.view_id, "dependency_id": args.dependency_id}
    return JsonResult(await client.request_json("GET", "dependency", path))


async def delete_dependency(client: GridlyClient, args: ViewDependency) -> DeleteResult:
    path = {"view_id": args.view_id, "dependency_id": args.dependency_id}
    return DeleteResult("Dependency", await client.delete("dependency", path))


def get_tools() -> dict[str, Any]:
    return {
        "list_dependencies": {
            "func": list_dependencies,
            "schema": ViewId,
            "title": "List dependencies",
            "description": "List dependencies",
        },
        "retrieve_dependency": {
            "func": retrieve_dependency,
            "schema": ViewDependency,
            "title": "Retrieve dependency",
            "description": "Retrieve a dependency",
        },
        "delete_dependency": {
            "func": delete_dependency,
            "schema": ViewDependency,
            "title": "Delete dependency",
            "description": "Delete a dependency",
        },
    }
