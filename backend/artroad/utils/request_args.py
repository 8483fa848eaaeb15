from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from flask import request

from artroad.domain.exceptions import ValidationError
from artroad.domain.validation import parse_int, parse_unbounded_int

_RESERVED_ARGS = {"id", "limit", "offset", "search", "sort", "order"}


@dataclass
class ListParams:
    """
    Raw list query as sent by the client.

    Defaults, caps and allow-lists are resource specific and applied by the
    repository, so unparseable values are kept as None here.
    """

    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    sort: Optional[str] = None
    order: Optional[str] = None
    filters: Dict[str, str] = field(default_factory=dict)


def list_params_from_request() -> ListParams:
    args = request.args

    return ListParams(
        limit=parse_int(args.get("limit", ""), clamp=True),
        offset=parse_int(args.get("offset", ""), clamp=True),
        search=args.get("search") or None,
        sort=args.get("sort") or None,
        order=args.get("order") or None,
        filters={
            name: value
            for name, value in args.items()
            if name not in _RESERVED_ARGS
        },
    )


def record_id_from_request() -> int:
    """
    Numeric ?id= value, unbounded.

    Only non-numeric ids are rejected here; ids no row can have (zero,
    negative, too large to store) are answered as not found by the repository.
    """
    record_id = parse_unbounded_int(request.args.get("id", ""))

    if record_id is None:
        raise ValidationError("Valid ID is required", "INVALID_ID")

    return record_id


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object", "INVALID_BODY")

    return data
