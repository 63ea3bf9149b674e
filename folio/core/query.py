"""
List Query Builder
==================

Every list endpoint is a ListQuery: a model, an immutable tuple of
predicates, and an ordering. Page contents and the total count are built
from the same predicate tuple, so pagination metadata always matches.

    query = (ListQuery(Skill)
             .filter_by_value(Skill.category, 'Frontend')
             .search(params.search, Skill.name)
             .order(Skill.sort_order, Skill.name))
    page = query.paginate(params)
"""

import json
import math
from dataclasses import dataclass, replace
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from sqlalchemy import Text, and_, cast, func, or_, select

from .database import db
from .errors import ValidationError
from .validation import first_error_message

MAX_LIMIT = 100

_TRUE_VALUES = ('true', '1', 'yes')
_FALSE_VALUES = ('false', '0', 'no')


class PaginationParams(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=MAX_LIMIT)
    search: Optional[str] = None
    sort: Literal['asc', 'desc'] = 'desc'

    @property
    def offset(self):
        return (self.page - 1) * self.limit

    @classmethod
    def from_args(cls, args, default_limit=10):
        """
        Parse page/limit/search/sort from request args.
        Out-of-range values are rejected, never clamped.
        """
        raw = {
            'page': args.get('page') or 1,
            'limit': args.get('limit') or default_limit,
            'search': (args.get('search') or '').strip() or None,
            'sort': (args.get('sort') or 'desc').lower(),
        }
        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            raise ValidationError(first_error_message(e)) from e


def parse_bool_arg(args, name):
    """'true'/'false' style query flag; None when absent."""
    value = args.get(name)
    if value is None or value == '':
        return None
    value = value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name}: must be 'true' or 'false'")


def parse_list_arg(args, name):
    """Comma separated query value, e.g. keys=a,b,c"""
    value = args.get(name) or ''
    return [part.strip() for part in value.split(',') if part.strip()]


def _escape_like(term):
    return term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self):
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self):
        return self.page < self.total_pages

    @property
    def has_prev(self):
        return self.page > 1

    def to_dict(self):
        return {
            'page': self.page,
            'limit': self.limit,
            'total': self.total,
            'totalPages': self.total_pages,
            'hasNext': self.has_next,
            'hasPrev': self.has_prev,
        }


@dataclass(frozen=True)
class Page:
    items: List[Any]
    pagination: Pagination

    def to_dict(self, key, serialize):
        return {
            key: [serialize(item) for item in self.items],
            'pagination': self.pagination.to_dict(),
        }


@dataclass(frozen=True)
class ListQuery:
    model: Any
    predicates: tuple = ()
    ordering: tuple = ()

    def where(self, *clauses):
        clauses = tuple(clause for clause in clauses if clause is not None)
        return replace(self, predicates=self.predicates + clauses)

    def filter_by_value(self, column, value):
        """Exact match; a missing value adds no predicate."""
        if value is None or value == '':
            return self
        return self.where(column == value)

    def search(self, term, *columns):
        """Case-insensitive substring match, OR-ed across columns."""
        if not term:
            return self
        pattern = f"%{_escape_like(term)}%"
        return self.where(or_(*(column.ilike(pattern, escape='\\') for column in columns)))

    def in_(self, column, values):
        values = [value for value in (values or []) if value]
        if not values:
            return self
        return self.where(column.in_(values))

    def has_tag(self, column, tag):
        """Membership in a JSON string array column, case-insensitive."""
        if not tag:
            return self
        # Match the element as the JSON encoder wrote it: quotes and non-ASCII escaped
        needle = '%' + _escape_like(json.dumps(tag.lower())) + '%'
        return self.where(func.lower(cast(column, Text)).like(needle, escape='\\'))

    def visibility_floor(self, flag_column, owner_column, auth):
        """
        Non-owners only ever see flagged rows. Applied on top of whatever the
        client asked for, so client filters can narrow but never widen.
        """
        if auth is None:
            return self.where(flag_column.is_(True))
        return self.where(or_(flag_column.is_(True), owner_column == auth.user.id))

    def order(self, *columns):
        return replace(self, ordering=self.ordering + columns)

    def _filtered(self, stmt):
        if self.predicates:
            stmt = stmt.where(and_(*self.predicates))
        return stmt

    def _order_terms(self, direction):
        # Primary key last keeps pages stable when sort values tie
        columns = self.ordering + (self.model.id,)
        if direction == 'asc':
            return [column.asc() for column in columns]
        return [column.desc() for column in columns]

    def statement(self, direction='desc'):
        return self._filtered(select(self.model)).order_by(*self._order_terms(direction))

    def count(self):
        return db.session.scalar(self._filtered(select(func.count()).select_from(self.model)))

    def all(self, direction='asc'):
        return db.session.scalars(self.statement(direction)).all()

    def paginate(self, params):
        stmt = self.statement(params.sort).limit(params.limit).offset(params.offset)
        items = db.session.scalars(stmt).all()
        return Page(items=items, pagination=Pagination(params.page, params.limit, self.count()))

    def count_by(self, column):
        """(value, count) pairs over the filtered rows, NULL values skipped."""
        stmt = (self._filtered(select(column, func.count()).select_from(self.model))
                .where(column.isnot(None))
                .group_by(column)
                .order_by(column))
        return db.session.execute(stmt).all()
