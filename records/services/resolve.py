"""
Reference resolution.

Medicaments and consultations hold ids of other records.  Before they
are returned, each referenced id is replaced with a small projection of
the referenced record (names, email) looked up in one batch per
collection.
"""
from __future__ import annotations

from typing import Iterable, Optional

from records.services.store import DocumentStore

# model field -> response key
PATIENT_DISPLAY = {'first_name': 'firstName', 'last_name': 'lastName', 'email': 'email'}
MALADY_DISPLAY = {'malady_name': 'maladyName'}
MEDICAMENT_DISPLAY = {'medicament_name': 'medicamentName'}


def resolve(store: DocumentStore, ids: Iterable, projection: dict[str, str]) -> dict[str, dict]:
    rows = store.find_by_ids(ids, tuple(projection))
    return {
        pk: {'_id': pk, **{key: row[field] for field, key in projection.items()}}
        for pk, row in rows.items()
    }


def pick(resolved: dict[str, dict], pk) -> Optional[dict]:
    return resolved.get(str(pk)) if pk else None


def iso(value) -> Optional[str]:
    return value.isoformat() if value else None
