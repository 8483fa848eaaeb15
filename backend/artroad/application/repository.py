from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from flask import current_app
from sqlalchemy import and_, or_

from artroad.extensions import db
from artroad.domain.exceptions import NotFoundError, ValidationError
from artroad.domain.fields import BOOL, ENUM, INT, FieldSpec
from artroad.domain.validation import INT_MAX, clean_draft, parse_int
from artroad.utils.request_args import ListParams
from artroad.utils.transaction import transactional

DEFAULT_MAX_LIMIT = 100


@dataclass(frozen=True)
class FilterSpec:
    """
    Equality filter driven by a query argument.

    - bool: "true" / "false", anything else is ignored
    - int: decimal digits, anything else is ignored
    - enum: must be one of `choices`, otherwise a 400 is raised
    - text: compared verbatim
    """

    name: str
    attr: str
    kind: str = BOOL
    choices: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    invalid_code: Optional[str] = None


@dataclass(frozen=True)
class Listing:
    default_limit: int
    # wire name -> model attribute
    sortable: Dict[str, str]
    default_sort: str
    default_order: str = "asc"
    filters: Tuple[FilterSpec, ...] = ()
    search: Tuple[str, ...] = ()


@dataclass
class EntityRepository:
    """
    list / get / create / update / delete over one flat table.

    Every resource shares this contract; what differs (writable fields,
    filters, sort allow-list, error codes) is declared on the instance.
    """

    model: Type[Any]
    label: str
    not_found_code: str
    fields: Tuple[FieldSpec, ...]
    listing: Listing
    normalize: Callable[[Any], Dict[str, Any]]
    not_found_message: str = ""
    _filters_by_arg: Dict[str, FilterSpec] = field(init=False, repr=False)

    def __post_init__(self):
        self._filters_by_arg = {}
        for spec in self.listing.filters:
            for arg in (spec.name, *spec.aliases):
                self._filters_by_arg[arg] = spec

        if not self.not_found_message:
            self.not_found_message = f"{self.label.replace('_', ' ').capitalize()} not found"

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------
    def query(self):
        return db.session.query(self.model)

    def list(self, params: ListParams) -> List[Any]:
        """
        Filters (AND) -> search (OR across columns) -> sort -> limit/offset.

        Ties on the sort column fall back to id ascending so pages are stable.
        """
        conditions = self._filter_conditions(params.filters)

        if params.search and self.listing.search:
            conditions.append(
                or_(
                    *[
                        getattr(self.model, attr).contains(params.search, autoescape=True)
                        for attr in self.listing.search
                    ]
                )
            )

        query = self.query()
        if conditions:
            query = query.filter(and_(*conditions))

        sort_attr = self.listing.sortable.get(
            params.sort or "",
            self.listing.sortable[self.listing.default_sort],
        )
        column = getattr(self.model, sort_attr)
        order = params.order or self.listing.default_order
        query = query.order_by(
            column.desc() if order == "desc" else column.asc(),
            self.model.id.asc(),
        )

        limit, offset = self._page_bounds(params)
        return query.limit(limit).offset(offset).all()

    def count(self, **equals) -> int:
        return self.query().filter_by(**equals).count()

    def get(self, record_id: int):
        # Ids outside 1..INT_MAX cannot exist and are never sent to the store
        record = db.session.get(self.model, record_id) if 0 < record_id <= INT_MAX else None
        if record is None:
            raise NotFoundError(self.not_found_message, self.not_found_code)
        return record

    # -------------------------------------------------
    # Writes
    # -------------------------------------------------
    def create(self, data: Mapping[str, Any]):
        values = clean_draft(self.fields, data)
        return self._insert(values)

    def update(self, record_id: int, data: Mapping[str, Any]):
        record = self.get(record_id)
        values = clean_draft(self.fields, data, partial=True)

        with transactional():
            for attr, value in values.items():
                setattr(record, attr, value)
            # updatedAt moves even when nothing else did
            record.touch()

        current_app.logger.info(
            "%s.update id=%s fields=%s", self.label, record.id, sorted(values)
        )
        return record

    def delete(self, record_id: int) -> Dict[str, Any]:
        """
        Hard-delete a row after an existence check.

        Returns the normalized snapshot taken before deletion since the row
        can no longer be reloaded afterwards.
        """
        record = self.get(record_id)
        snapshot = self.normalize(record)

        with transactional():
            db.session.delete(record)

        current_app.logger.info("%s.delete id=%s", self.label, record_id)
        return snapshot

    # -------------------------------------------------
    # Helpers
    # -------------------------------------------------
    def _insert(self, values: Dict[str, Any]):
        record = self.model(**values)

        with transactional():
            db.session.add(record)

        current_app.logger.info("%s.create id=%s", self.label, record.id)
        return record

    def _page_bounds(self, params: ListParams) -> Tuple[int, int]:
        max_limit = current_app.config.get("MAX_LIST_LIMIT", DEFAULT_MAX_LIMIT)

        limit = params.limit if params.limit and params.limit > 0 else self.listing.default_limit
        offset = params.offset if params.offset and params.offset > 0 else 0

        return min(limit, max_limit), offset

    def _filter_conditions(self, raw_filters: Mapping[str, str]) -> List[Any]:
        conditions = []
        seen = set()

        for arg, raw in raw_filters.items():
            spec = self._filters_by_arg.get(arg)
            if spec is None or spec.attr in seen or raw == "":
                continue

            value = self._filter_value(spec, raw)
            if value is None:
                continue

            seen.add(spec.attr)
            conditions.append(getattr(self.model, spec.attr) == value)

        return conditions

    @staticmethod
    def _filter_value(spec: FilterSpec, raw: str):
        if spec.kind == BOOL:
            return {"true": True, "false": False}.get(raw)

        if spec.kind == INT:
            return parse_int(raw)

        if spec.kind == ENUM:
            if raw not in spec.choices:
                raise ValidationError(
                    f"Invalid {spec.name}. Must be one of: {', '.join(spec.choices)}",
                    spec.invalid_code or "INVALID_FILTER",
                )
            return raw

        return raw
