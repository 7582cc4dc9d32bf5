from utils.get_endpoint import get_endpoint
from utils.response_utils import DeleteResult, JsonResult, ToolResult, format_result

__all__ = ["get_endpoint", "DeleteResult", "JsonResult", "ToolResult", "format_result"]
