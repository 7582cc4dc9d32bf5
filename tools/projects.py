from typing import Any

from core.client import GridlyClient
from core.schemas import NoArguments, ProjectId
from utils.response_utils import JsonResult


async def list_projects(client: GridlyClient, args: NoArguments) -> JsonResult:
    """List the projects of the company owning the API key."""
    return JsonResult(await client.request_json("GET", "projects"))


async def retrieve_project(client: GridlyClient, args: ProjectId) -> JsonResult:
    return JsonResult(await client.request_json("GET", "project", {"project_id": args.project_id}))


def get_tools() -> dict[str, Any]:
    return {
        "list_projects": {
            "func": list_projects,
            "schema": NoArguments,
            "title": "List projects",
            "description": "List projects of a company",
        },
        "retrieve_project": {
            "func": retrieve_project,
            "schema": ProjectId,
            "title": "Retrieve project",
            "description": "Retrieve a project",
        },
    }
