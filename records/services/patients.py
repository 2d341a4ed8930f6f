import logging

from records.exceptions import NotFound
from records.models import Patient
from records.services import Stores
from records.services.resolve import iso

logger = logging.getLogger(__name__)


def format_patient(p: Patient) -> dict:
    return {
        '_id': p.id,
        'firstName': p.first_name,
        'lastName': p.last_name,
        'email': p.email,
        'isDeleted': p.is_deleted,
        'createdAt': iso(p.created_at),
        'updatedAt': iso(p.updated_at),
    }


def list_patients(stores: Stores) -> list[dict]:
    return [format_patient(p) for p in stores.patients.find_many()]


def get_patient(stores: Stores, pk) -> dict:
    p = stores.patients.find_by_id(pk)
    if p is None:
        raise NotFound('Patient not found')
    return format_patient(p)


def create_patient(stores: Stores, *, first_name: str, last_name: str, email: str) -> dict:
    p = stores.patients.insert_one(
        duplicate_message='Email already exists',
        first_name=first_name, last_name=last_name, email=email,
    )
    logger.info('Patient %s created', p.id)
    return format_patient(p)


def delete_patient(stores: Stores, pk) -> None:
    stores.patients.delete_by_id(pk, not_found_message='Patient not found')
    logger.info('Patient %s deleted', pk)
