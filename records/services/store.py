"""
Collection-level persistence helpers.

A :class:`DocumentStore` wraps one model and exposes the handful of
operations the services need: insert, filtered/sorted reads, lookup by
id, projected lookups for reference resolution and soft deletes.  Stores
are constructed explicitly and passed to the service functions; Django
owns the underlying connection (opened lazily, closed at request end).
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Model, QuerySet, UniqueConstraint
from django.utils import timezone

from records.exceptions import DuplicateKey, NotFound, StorageUnavailable

logger = logging.getLogger(__name__)

DEFAULT_ORDER = ('-created_at', '-id')


def _has_unique_constraint(model: type[Model]) -> bool:
    opts = model._meta
    return (
        any(f.unique and not f.primary_key for f in opts.fields)
        or bool(opts.unique_together)
        or any(isinstance(c, UniqueConstraint) for c in opts.constraints)
    )


class DocumentStore:
    def __init__(self, model: type[Model], *, label: str, using: str = 'default'):
        self.model = model
        self.label = label
        self.using = using
        self.has_unique = _has_unique_constraint(model)

    def __repr__(self) -> str:
        return f"DocumentStore({self.model.__name__}, using={self.using!r})"

    def _live(self) -> QuerySet:
        return self.model.objects.using(self.using).filter(is_deleted=False)

    def insert_one(self, *, duplicate_message: Optional[str] = None, **fields) -> Model:
        """Create a record.

        Uniqueness is left to the database; a violation surfaces as
        :class:`DuplicateKey` rather than being pre-checked.  On a model
        with no unique columns an integrity error (NOT NULL, foreign key)
        is a storage failure instead.
        """
        try:
            with transaction.atomic(using=self.using):
                return self.model.objects.using(self.using).create(**fields)
        except IntegrityError as e:
            if not self.has_unique:
                logger.error('%s insert violated an integrity constraint: %s', self.label, e)
                raise StorageUnavailable(f'Failed to create {self.label.lower()}')
            logger.info('%s insert rejected: %s', self.label, e)
            raise DuplicateKey(duplicate_message or f'{self.label} already exists')
        except DatabaseError as e:
            logger.error('%s insert failed: %s', self.label, e)
            raise StorageUnavailable(f'Failed to create {self.label.lower()}')

    def find_many(self, filters: Optional[dict] = None, order_by: Sequence[str] = DEFAULT_ORDER) -> list[Model]:
        try:
            return list(self._live().filter(**(filters or {})).order_by(*order_by))
        except DatabaseError as e:
            logger.error('%s find_many(%s) failed: %s', self.label, filters, e)
            raise StorageUnavailable(f'Failed to fetch {self.model._meta.verbose_name_plural}')

    def find_by_id(self, pk) -> Optional[Model]:
        """Return the undeleted record with ``pk`` or ``None``."""
        try:
            return self._live().filter(pk=str(pk)).first()
        except DatabaseError as e:
            logger.error('%s find_by_id(%s) failed: %s', self.label, pk, e)
            raise StorageUnavailable(f'Failed to fetch {self.label.lower()}')

    def find_by_ids(self, ids: Iterable, fields: Sequence[str]) -> dict[str, dict]:
        """Projected lookup keyed by id.

        Soft-deleted rows are included so that references held by older
        records still display.
        """
        wanted = {str(i) for i in ids if i}
        if not wanted:
            return {}
        try:
            rows = self.model.objects.using(self.using).filter(pk__in=wanted).values('id', *fields)
            return {row['id']: row for row in rows}
        except DatabaseError as e:
            logger.error('%s find_by_ids failed: %s', self.label, e)
            raise StorageUnavailable(f'Failed to fetch {self.model._meta.verbose_name_plural}')

    def delete_by_id(self, pk, *, not_found_message: Optional[str] = None) -> Model:
        """Soft delete; raises :class:`NotFound` when nothing live matches."""
        obj = self.find_by_id(pk)
        if obj is None:
            raise NotFound(not_found_message or f'{self.label} not found')
        try:
            obj.is_deleted = True
            obj.save(update_fields=['is_deleted', 'updated_at'], using=self.using)
        except DatabaseError as e:
            logger.error('%s delete_by_id(%s) failed: %s', self.label, pk, e)
            raise StorageUnavailable(f'Failed to delete {self.label.lower()}')
        return obj

    def delete_many(self, filters: dict) -> int:
        try:
            return self._live().filter(**filters).update(is_deleted=True, updated_at=timezone.now())
        except DatabaseError as e:
            logger.error('%s delete_many(%s) failed: %s', self.label, filters, e)
            raise StorageUnavailable(f'Failed to delete {self.model._meta.verbose_name_plural}')

    def count(self, filters: Optional[dict] = None) -> int:
        try:
            return self._live().filter(**(filters or {})).count()
        except DatabaseError as e:
            logger.error('%s count failed: %s', self.label, e)
            raise StorageUnavailable('Failed to fetch stats')
