"""
Ad hoc query-by-example.

A template is an instance of a domain model in which only some fields
were set. The engine turns exactly those fields into an AND of equality
predicates and returns the matching rows, capped at a row limit.

Presence is decided by pydantic's fields-set tracking, never by value:
BGGGame(name="") filters on the empty name, BGGGame() filters on nothing.

Dependencies: sqlalchemy, gamesdb.boundary.db.descriptors
System role: Bounded reporting and reconciliation queries
"""

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError

from gamesdb.boundary.db.descriptors import EntityDescriptor, descriptor_for
from gamesdb.core.exceptions import MalformedTemplateError, OperationError
from gamesdb.models.common import EntityModel
from gamesdb.observability.log_utils import log_exception_with_context, log_with_context
from gamesdb.observability.logger import get_logger

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase

logger = get_logger(__name__)

UNBOUNDED = -1


class AdHocQueryEngine:
    """
    Query-by-example over any registered entity kind.

    Attributes:
        db: Connection handle queries run through
    """

    def __init__(self, db: "GamesDatabase") -> None:
        self.db = db

    def _resolve(
        self, template: Any, descriptor: EntityDescriptor | None
    ) -> EntityDescriptor:
        if not isinstance(template, EntityModel):
            raise MalformedTemplateError(
                f"Template must be an entity model, got {type(template).__name__}"
            )
        if descriptor is None:
            try:
                return descriptor_for(type(template))
            except KeyError as exc:
                raise MalformedTemplateError(
                    f"{type(template).__name__} is not a queryable entity kind"
                ) from exc
        if not isinstance(template, descriptor.entity_cls):
            raise MalformedTemplateError(
                f"Expected {descriptor.name} template, got {type(template).__name__}",
                kind=descriptor.name,
            )
        return descriptor

    def build_filter(self, template: EntityModel, descriptor: EntityDescriptor) -> dict[str, Any]:
        """
        Derive the equality filter from a template.

        Args:
            template: Partially populated entity
            descriptor: Descriptor of the template's kind

        Returns:
            dict: Field name to required value, one entry per populated field

        Raises:
            MalformedTemplateError: If a populated field cannot be filtered on
        """
        criteria = descriptor.presence(template)
        for field_name in criteria:
            if not descriptor.is_filterable(field_name):
                raise MalformedTemplateError(
                    f"{descriptor.name}.{field_name} cannot be used as a filter",
                    kind=descriptor.name,
                    field=field_name,
                )
        return criteria

    def build_statement(
        self, descriptor: EntityDescriptor, criteria: dict[str, Any], row_limit: int
    ) -> Select:
        """Build the SELECT for a filter and row limit, in key order."""
        stmt = select(descriptor.row_cls)
        for field_name, value in criteria.items():
            column = descriptor.column(field_name)
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        stmt = stmt.order_by(descriptor.key_column)
        if row_limit != UNBOUNDED:
            stmt = stmt.limit(row_limit)
        return stmt

    def query(
        self,
        template: EntityModel,
        row_limit: int = UNBOUNDED,
        descriptor: EntityDescriptor | None = None,
    ) -> list[EntityModel]:
        """
        Return every stored entity matching all populated template fields.

        Args:
            template: Entity whose explicitly set fields form the filter;
                never modified
            row_limit: Maximum rows to return, -1 for no limit
            descriptor: Restrict to this kind; inferred from the template
                class when omitted

        Returns:
            list: Matching entities in key order, at most row_limit of them

        Raises:
            MalformedTemplateError: Bad template type, unfilterable field
                or row_limit below -1
            OperationError: If the store fails
        """
        self.db.require_open()
        descriptor = self._resolve(template, descriptor)
        if isinstance(row_limit, bool) or not isinstance(row_limit, int) or row_limit < UNBOUNDED:
            raise MalformedTemplateError(
                f"row_limit must be -1 or a non-negative integer, got {row_limit!r}",
                kind=descriptor.name,
            )
        criteria = self.build_filter(template, descriptor)
        if row_limit == 0:
            return []

        stmt = self.build_statement(descriptor, criteria, row_limit)
        try:
            with self.db.session() as session:
                rows = session.scalars(stmt).all()
                results = [descriptor.to_entity(row) for row in rows]
        except SQLAlchemyError as exc:
            log_exception_with_context(
                logger, "Ad hoc query failed", exc,
                kind=descriptor.name, criteria=list(criteria),
            )
            raise OperationError(
                f"query on {descriptor.name} failed: {exc}", descriptor.name, "query"
            ) from exc

        log_with_context(
            logger, logging.DEBUG, "Ad hoc query",
            kind=descriptor.name, fields=sorted(criteria), row_limit=row_limit, matched=len(results),
        )
        return results
