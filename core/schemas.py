"""Input schemas for every Gridly tool.

Each tool input is a pydantic model. Attributes are snake_case, arguments on the
wire are camelCase (the alias). The JSON schema published in list_tools is
generated from the same model that validates call_tool arguments.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, create_model
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.errors import InvalidInputError, SchemaDefinitionError


class ToolInput(BaseModel):
    """Base for all tool inputs."""

    model_config = ConfigDict(alias_generator=to_camel)


ColumnType = Literal[
    "singleLine",
    "multipleLines",
    "richText",
    "markdown",
    "singleSelection",
    "multipleSelections",
    "boolean",
    "number",
    "datetime",
    "files",
    "reference",
    "language",
    "formula",
    "json",
    "yaml",
]

SortDirection = Literal["asc", "desc"]

NonNegativeInt = Annotated[StrictInt, Field(ge=0)]

# None is a "remove this key" signal for the remote side, not a local deletion
MetadataValue = Union[StrictStr, StrictBool, StrictInt, StrictFloat, None, Dict[str, Any]]


# --------------------------------------------------------------------------- #
# Composition helpers
# --------------------------------------------------------------------------- #


def _same_field(a, b) -> bool:
    return a.annotation == b.annotation and a.metadata == b.metadata and a.is_required() == b.is_required()


def merge_schemas(name: str, *models: Type[ToolInput], doc: Optional[str] = None) -> Type[ToolInput]:
    """Build a new input model holding the union of the given models' fields.

    A field declared by several models must be declared identically; otherwise
    SchemaDefinitionError is raised here, at definition time.
    """
    fields: Dict[str, Any] = {}
    origin: Dict[str, str] = {}
    for model in models:
        for field_name, info in model.model_fields.items():
            if field_name in fields:
                if not _same_field(fields[field_name][1], info):
                    raise SchemaDefinitionError(
                        f"{name}: field '{field_name}' declared differently by "
                        f"{origin[field_name]} and {model.__name__}"
                    )
                continue
            fields[field_name] = (info.annotation, info)
            origin[field_name] = model.__name__
    merged = create_model(name, __base__=ToolInput, **fields)
    if doc:
        merged.__doc__ = doc
    return merged


def optional_variant(model: Type[ToolInput], name: Optional[str] = None) -> Type[ToolInput]:
    """Same fields as `model`, every one of them optional (default None)."""
    fields: Dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        description = info.description
        if description and "(optional)" not in description.lower():
            description = f"{description} (optional)"
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (
            Optional[annotation],
            Field(default=None, description=description),
        )
    return create_model(name or f"Optional{model.__name__}", __base__=ToolInput, **fields)


def _violation(error: Dict[str, Any]) -> Dict[str, Any]:
    loc = error.get("loc") or ()
    field = ".".join(str(part) for part in loc) or "<root>"
    return {"field": field, "reason": error.get("msg", ""), "type": error.get("type", "")}


def validate_arguments(tool_name: str, model: Type[ToolInput], arguments: Optional[Dict[str, Any]]) -> ToolInput:
    """Validate a loosely typed argument bag, reporting every violation at once."""
    try:
        return model.model_validate(arguments if arguments is not None else {})
    except PydanticValidationError as exc:
        raise InvalidInputError(tool_name, [_violation(e) for e in exc.errors()]) from exc


def request_body(args: ToolInput, *routing: str) -> Dict[str, Any]:
    """Serialize validated arguments as a JSON body.

    Routing fields (ids already in the path or query) are left out, as are
    top-level optional fields that were not given. Nested values are untouched.
    """
    body = args.model_dump(mode="json", by_alias=True, exclude=set(routing))
    return {key: value for key, value in body.items() if value is not None}


def input_schema(model: Type[ToolInput]) -> Dict[str, Any]:
    """JSON schema describing the arguments `model` accepts."""
    schema = model.model_json_schema(by_alias=True)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


# --------------------------------------------------------------------------- #
# Identifier schemas
# --------------------------------------------------------------------------- #


class NoArguments(ToolInput):
    pass


class ProjectId(ToolInput):
    project_id: StrictInt = Field(description="Please provide the project ID")


OptionalProjectId = optional_variant(ProjectId)


class DatabaseId(ToolInput):
    database_id: StrictStr = Field(description="Please provide the database ID")


class GridId(ToolInput):
    grid_id: StrictStr = Field(description="Please provide the grid ID")


class ViewId(ToolInput):
    view_id: StrictStr = Field(description="Please provide the view ID")


class ColumnId(ToolInput):
    column_id: StrictStr = Field(description="Please provide the column ID")


class DependencyId(ToolInput):
    dependency_id: StrictStr = Field(description="Please provide the dependency ID")


class RecordId(ToolInput):
    record_id: StrictStr = Field(description="Please provide the record ID")


ViewColumn = merge_schemas("ViewColumn", ViewId, ColumnId)
ViewDependency = merge_schemas("ViewDependency", ViewId, DependencyId)
ViewRecord = merge_schemas("ViewRecord", ViewId, RecordId)


# --------------------------------------------------------------------------- #
# Shared value shapes
# --------------------------------------------------------------------------- #


class Pagination(ToolInput):
    offset: NonNegativeInt = Field(description="Number of records to skip")
    limit: NonNegativeInt = Field(description="Maximum number of records to return")


class Paging(ToolInput):
    page: Optional[Pagination] = Field(default=None, description="Pagination as {offset, limit} (Optional)")


class Sorting(ToolInput):
    sort: Optional[Dict[StrictStr, SortDirection]] = Field(
        default=None,
        description='Sort order as a map of column ID to "asc" or "desc" (Optional)',
    )


class GridMetadata(ToolInput):
    metadata: Optional[Dict[str, MetadataValue]] = Field(
        default=None,
        description="Please provide the metadata (Optional). A null value removes the key",
    )


class GridName(ToolInput):
    name: StrictStr = Field(description="Please provide the grid name")


class ViewColumnSetting(ToolInput):
    id: StrictStr = Field(description="Column ID")
    editable: StrictBool = Field(description="Enable editable for this column")


class Cell(ToolInput):
    column_id: StrictStr = Field(description="ID of a column in a view")
    value: StrictStr = Field(description="Value of a cell")


class Record(ToolInput):
    id: Optional[StrictStr] = Field(default=None, description="This parameter specify record Id of this record")
    path: Optional[StrictStr] = Field(
        default=None,
        description=(
            "This parameter specify path (folder) of this record. Use character / to indicate "
            "folder level (e.g Path Level 1/Path Level 2)"
        ),
    )
    cells: List[Cell] = Field(description="Cells of this record")


class ExistingRecord(Record):
    id: StrictStr = Field(description="ID of the record to update")


# --------------------------------------------------------------------------- #
# Tool input schemas
# --------------------------------------------------------------------------- #


class _GridCreateFields(ToolInput):
    template_grid_id: Optional[StrictStr] = Field(
        default=None, description="Please provide the template grid ID (Optional)"
    )


CreateGrid = merge_schemas("CreateGrid", DatabaseId, GridName, _GridCreateFields, GridMetadata)
UpdateGrid = merge_schemas("UpdateGrid", GridId, GridName, GridMetadata)


class _ViewCreateFields(ToolInput):
    name: StrictStr = Field(description="Please provide the view name")
    columns: Optional[List[ViewColumnSetting]] = Field(default=None, description="List of columns (Optional)")


CreateView = merge_schemas("CreateView", _ViewCreateFields, GridId)


class _ColumnCreateFields(ToolInput):
    id: Optional[StrictStr] = Field(default=None, description="Column ID (Optional)")
    name: StrictStr = Field(description="Please provide the column name")
    type: ColumnType = Field(description="Please provide the column type")


class _ColumnUpdateFields(ToolInput):
    name: StrictStr = Field(description="Please provide the new column name")


CreateColumn = merge_schemas("CreateColumn", ViewId, _ColumnCreateFields)
UpdateColumn = merge_schemas("UpdateColumn", ViewColumn, _ColumnUpdateFields)


class _RecordsToAdd(ToolInput):
    records: List[Record] = Field(description="Records to add")


class _RecordsToUpdate(ToolInput):
    records: List[ExistingRecord] = Field(description="Records to update, each with its ID")


class _RecordIds(ToolInput):
    ids: List[StrictStr] = Field(description="List of record IDs need to be deleted")


ListRecords = merge_schemas("ListRecords", ViewId, Paging, Sorting)
AddRecords = merge_schemas("AddRecords", ViewId, _RecordsToAdd)
UpdateRecords = merge_schemas("UpdateRecords", ViewId, _RecordsToUpdate)
DeleteRecords = merge_schemas("DeleteRecords", ViewId, _RecordIds)
RecordHistory = merge_schemas("RecordHistory", ViewRecord, Paging)
