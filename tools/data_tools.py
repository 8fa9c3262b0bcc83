# =============================================================================
# tools/data_tools.py  -  Data-Fetch Tools (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the tools the model may call while answering a prompt.  Each tool
#   is a thin wrapper around core/records.py: it validates the arguments the
#   model produced, runs the read, and shapes the result into the declared
#   output schema.
#
# HOW IT WORKS (the flow):
#   1. The ADK agent decides it needs the user's data (e.g., their lists)
#   2. It calls a tool by name (e.g., "get_user_lists") with a user_id
#   3. ADK routes the call to the FunctionTool built below
#   4. The arguments are checked against the tool's input schema; a violation
#      is rejected before the store is touched
#   5. The records are fetched, normalized and returned as {"records": [...]}
#
# CALLER BINDING:
#   Tools are built per call for the authenticated caller.  The user_id the
#   model passes is only honoured when it IS the caller; any other id (say,
#   one injected through the prompt) gets an empty result.
#
# TOOL REVISIONS:
#   none  -> []                                  (prompt-only assistant)
#   items -> [get_user_items]
#   all   -> [get_user_items, get_user_lists, get_user_folders]
#
# All tools here are read-only and idempotent, so the model may call any of
# them any number of times in any order.
# =============================================================================

import json
import logging
from dataclasses import dataclass

from google.adk.tools import FunctionTool
from pydantic import BaseModel, ConfigDict, ValidationError

from core.errors import ToolArgumentError
from core.records import FOLDERS, ITEMS, LISTS, RecordKind, fetch_records
from core.store import DocumentStore

logger = logging.getLogger(__name__)

# Tool traces are colored so tool traffic stands out in the function logs:
# cyan for calls, yellow for progress, green for responses.
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _trace(color: str, message: str) -> None:
    logger.info("%s[tool] %s%s", color, message, _RESET)


# =============================================================================
# Schemas
# =============================================================================
# user_id must already be a string.  ADK forwards only the parameters in the
# tool function's signature, so unknown arguments never reach validation.
# The output schemas mirror core.models records.
# =============================================================================
class UserRecordsInput(BaseModel):
    model_config = ConfigDict(strict=True)

    user_id: str = ""


class RecordOut(BaseModel):
    id: str
    name: str
    dateCreated: str
    description: str = ""
    dateModified: str = ""


class ItemRecordOut(RecordOut):
    count: int


class ItemsResponse(BaseModel):
    records: list[ItemRecordOut]


class RecordsResponse(BaseModel):
    records: list[RecordOut]


@dataclass(frozen=True)
class DataToolDef:
    """Everything needed to expose one record kind as a tool."""

    name: str
    description: str
    kind: RecordKind
    output_model: type[BaseModel]


ITEMS_TOOL = DataToolDef(
    name="get_user_items",
    description=(
        "Fetch every item created by the user. Each item has an id, name, "
        "count, dateCreated, description and dateModified (empty when the "
        "item was never modified). Pass the caller's user id as user_id."
    ),
    kind=ITEMS,
    output_model=ItemsResponse,
)

LISTS_TOOL = DataToolDef(
    name="get_user_lists",
    description=(
        "Fetch every list created by the user. Each list has an id, name, "
        "dateCreated, description and dateModified (empty when the list was "
        "never modified). Pass the caller's user id as user_id."
    ),
    kind=LISTS,
    output_model=RecordsResponse,
)

FOLDERS_TOOL = DataToolDef(
    name="get_user_folders",
    description=(
        "Fetch every folder created by the user. Each folder has an id, name, "
        "dateCreated, description and dateModified (empty when the folder was "
        "never modified). Pass the caller's user id as user_id."
    ),
    kind=FOLDERS,
    output_model=RecordsResponse,
)

TOOLSETS: dict[str, tuple[DataToolDef, ...]] = {
    "none": (),
    "items": (ITEMS_TOOL,),
    "all": (ITEMS_TOOL, LISTS_TOOL, FOLDERS_TOOL),
}


async def run_data_tool(tool_def: DataToolDef, store: DocumentStore, arguments: dict, caller_id: str) -> dict:
    """Validate ``arguments``, fetch the caller's records and return the tool response.

    ``caller_id`` is the authenticated uid, not anything the model produced.
    A ``user_id`` argument naming someone else yields no records.

    Raises:
        ToolArgumentError: if the arguments violate the input schema.
    """
    _trace(_CYAN, f"{tool_def.name}({arguments!r}) for caller {caller_id!r}")
    try:
        params = UserRecordsInput.model_validate(arguments)
    except ValidationError as exc:
        _trace(_YELLOW, f"rejected: {exc.error_count()} schema error(s)")
        raise ToolArgumentError(f"{tool_def.name}: invalid arguments: {exc}") from exc

    if params.user_id and params.user_id != caller_id:
        logger.warning("%s asked for %r on behalf of caller %r; refusing", tool_def.name, params.user_id, caller_id)
        records = []
    else:
        records = await fetch_records(store, tool_def.kind, params.user_id)
    _trace(_YELLOW, f"{len(records)} {tool_def.kind.collection}")

    response = tool_def.output_model.model_validate({"records": [r.to_dict() for r in records]}).model_dump()
    _trace(_GREEN, f"{tool_def.name} -> {json.dumps(response, separators=(',', ':'))}")
    return response


def build_tool(tool_def: DataToolDef, store: DocumentStore, caller_id: str) -> FunctionTool:
    """Bind a tool definition to a store and one caller as an ADK FunctionTool.

    ADK builds the declaration the model sees from the function's name,
    docstring and signature, so those are set from the definition.
    """

    async def data_tool(user_id: str = "") -> dict:
        return await run_data_tool(tool_def, store, {"user_id": user_id}, caller_id)

    data_tool.__name__ = tool_def.name
    data_tool.__qualname__ = tool_def.name
    data_tool.__doc__ = tool_def.description
    return FunctionTool(func=data_tool)


def get_tools(revision: str, store: DocumentStore, caller_id: str) -> list[FunctionTool]:
    """Return the tools the model may call for ``caller_id`` under a tool revision."""
    try:
        tool_defs = TOOLSETS[revision]
    except KeyError:
        raise ValueError(f"Unknown tool revision {revision!r}; expected one of {tuple(TOOLSETS)}") from None
    return [build_tool(tool_def, store, caller_id) for tool_def in tool_defs]
