"""
Turns loosely typed operation requests into validated operation models.
"""
import logging
from typing import Any, Dict, Union

from pydantic import TypeAdapter, ValidationError

from .exceptions import InvalidOperationArgument
from .models import Copyback, Delete, Duplicate, GenomeEnd, Insert, Invert, Operation

_logger = logging.getLogger(__name__)

_operation_adapter = TypeAdapter(Operation)


def parse_operation(data: Dict[str, Any]) -> Union[Delete, Insert, Invert, Duplicate, Copyback]:
    """
    Validates a mapping such as ``{"kind": "delete", "start": 3, "end": 5}``.

    Copyback requests may omit ``backstart`` or set ``snapback`` to request
    the snapback form.

    Raises:
        InvalidOperationArgument: If the kind is unknown or a field is missing or malformed.
    """
    data = dict(data)
    kind = data.get("kind")
    if kind == "copyback":
        data["end"] = GenomeEnd.parse(data.get("end", ""))
        if data.pop("snapback", False) or data.get("backstart") is None:
            data["backstart"] = data.get("breakpoint")

    try:
        operation = _operation_adapter.validate_python(data)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != kind) or None
        _logger.debug(f"Rejected operation request {data}: {e}")
        raise InvalidOperationArgument(
            first.get("msg", f"Invalid operation request: {data}"), argument=field
        ) from e

    _logger.debug(f"Parsed operation {operation!r}")
    return operation
