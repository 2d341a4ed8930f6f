import logging

from django.db import transaction

from records.exceptions import NotFound
from records.models import Malady
from records.services import Stores
from records.services.resolve import iso

logger = logging.getLogger(__name__)


def format_malady(m: Malady) -> dict:
    return {
        '_id': m.id,
        'maladyName': m.malady_name,
        'isDeleted': m.is_deleted,
        'createdAt': iso(m.created_at),
        'updatedAt': iso(m.updated_at),
    }


def list_maladies(stores: Stores) -> list[dict]:
    return [format_malady(m) for m in stores.maladies.find_many()]


def get_malady(stores: Stores, pk) -> dict:
    m = stores.maladies.find_by_id(pk)
    if m is None:
        raise NotFound('Malady not found')
    return format_malady(m)


def create_malady(stores: Stores, *, malady_name: str) -> dict:
    m = stores.maladies.insert_one(duplicate_message='Malady already exists', malady_name=malady_name)
    logger.info('Malady %s created', m.id)
    return format_malady(m)


def delete_malady(stores: Stores, pk) -> int:
    """Soft delete a malady and every medicament prescribed for it.

    Both updates run in one transaction.  Returns the number of
    medicaments removed alongside the malady.
    """
    with transaction.atomic(using=stores.maladies.using):
        m = stores.maladies.delete_by_id(pk, not_found_message='Malady not found')
        removed = stores.medicaments.delete_many({'malady_id': m.id})
    logger.info('Malady %s deleted with %d medicament(s)', m.id, removed)
    return removed
