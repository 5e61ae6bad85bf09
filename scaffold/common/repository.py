"""SQLAlchemy adapter base shared by every generated repository implementation.

Rows are soft-deleted: ``delete`` stamps ``deleted_at`` and every read
path filters such rows out unless ``include_deleted=True`` is passed.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, inspect, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from scaffold.common.errors import InvalidSortFieldError, NotFoundError
from scaffold.common.pagination import FilterParams, PaginatedResult, PaginationParams
from scaffold.db.session import Base, utcnow

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Make LIKE wildcards in user text match literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD + listing over one mapped entity.

    Subclasses set ``model`` and, optionally, ``search_fields``: the string
    columns matched case-insensitively by ``find_with_filter``. The entity
    must expose ``id`` and ``deleted_at`` attributes.
    """

    model: Type[ModelT]
    resource_name: str = ""
    search_fields: Tuple[str, ...] = ()

    def __init__(self, session: Session):
        self.session = session

    @property
    def _resource(self) -> str:
        return self.resource_name or self.model.__name__

    def _sortable_columns(self) -> Dict[str, Any]:
        columns = {}
        for attr in inspect(self.model).column_attrs:
            column = getattr(self.model, attr.key)
            columns[attr.key] = column
            columns[attr.columns[0].name] = column
        return columns

    def _live(self, stmt: Select, include_deleted: bool = False) -> Select:
        if include_deleted:
            return stmt
        return stmt.where(self.model.deleted_at.is_(None))

    def _paginate(self, stmt: Select, params: PaginationParams) -> PaginatedResult[ModelT]:
        columns = self._sortable_columns()
        if params.sort not in columns:
            raise InvalidSortFieldError(params.sort, columns)
        sort_column = columns[params.sort]
        ordering = sort_column.asc() if params.order == "ASC" else sort_column.desc()

        total = self.session.scalar(select(func.count()).select_from(stmt.subquery())) or 0
        rows = self.session.scalars(
            stmt.order_by(ordering, self.model.id.asc())
            .offset(params.offset)
            .limit(params.limit)
        ).all()
        return PaginatedResult(
            data=list(rows),
            total=total,
            limit=params.limit,
            offset=params.offset,
        )

    def create(self, data: Mapping[str, Any]) -> ModelT:
        entity = self.model(**data)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        log.debug("Created %s %s", self._resource, entity.id)
        return entity

    def find_all(self, pagination: PaginationParams) -> PaginatedResult[ModelT]:
        return self._paginate(self._live(select(self.model)), pagination)

    def find_by_id(self, id: str, include_deleted: bool = False) -> Optional[ModelT]:
        stmt = self._live(select(self.model).where(self.model.id == id), include_deleted)
        return self.session.scalars(stmt).first()

    def find_with_filter(self, filter: FilterParams) -> PaginatedResult[ModelT]:
        stmt = self._live(select(self.model))
        if filter.search and self.search_fields:
            pattern = f"%{escape_like(filter.search)}%"
            stmt = stmt.where(
                or_(*(
                    getattr(self.model, field).ilike(pattern, escape=LIKE_ESCAPE)
                    for field in self.search_fields
                ))
            )
        return self._paginate(stmt, filter)

    def update(self, id: str, data: Mapping[str, Any]) -> ModelT:
        entity = self.find_by_id(id)
        if entity is None:
            raise NotFoundError(self._resource, id)
        columns = {attr.key for attr in inspect(self.model).column_attrs}
        for key, value in data.items():
            if key not in columns:
                raise TypeError(f"'{key}' is an invalid keyword argument for {self.model.__name__}")
            setattr(entity, key, value)
        self.session.commit()
        self.session.refresh(entity)
        log.debug("Updated %s %s", self._resource, id)
        return entity

    def delete(self, id: str) -> None:
        entity = self.find_by_id(id)
        if entity is None:
            raise NotFoundError(self._resource, id)
        entity.deleted_at = utcnow()
        self.session.commit()
        log.debug("Soft-deleted %s %s", self._resource, id)
