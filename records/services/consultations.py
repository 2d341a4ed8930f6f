import logging
from datetime import datetime
from typing import Optional

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from records.exceptions import NotFound
from records.models import Consultation
from records.services import Stores
from records.services.resolve import (
    MALADY_DISPLAY, MEDICAMENT_DISPLAY, PATIENT_DISPLAY, iso, pick, resolve,
)

logger = logging.getLogger(__name__)


def format_consultation(c: Consultation, refs: dict[str, dict[str, dict]]) -> dict:
    return {
        '_id': c.id,
        'patient_id': pick(refs['patients'], c.patient_id),
        'malady_id': pick(refs['maladies'], c.malady_id),
        'medicament_id': pick(refs['medicaments'], c.medicament_id),
        'date': iso(c.date),
        'notes': c.notes,
        'isDeleted': c.is_deleted,
        'createdAt': iso(c.created_at),
        'updatedAt': iso(c.updated_at),
    }


def _format_all(stores: Stores, items: list[Consultation]) -> list[dict]:
    refs = {
        'patients': resolve(stores.patients, (c.patient_id for c in items), PATIENT_DISPLAY),
        'maladies': resolve(stores.maladies, (c.malady_id for c in items), MALADY_DISPLAY),
        'medicaments': resolve(stores.medicaments, (c.medicament_id for c in items), MEDICAMENT_DISPLAY),
    }
    return [format_consultation(c, refs) for c in items]


def list_consultations(stores: Stores, patient_id: Optional[str] = None) -> list[dict]:
    filters = {'patient_id': patient_id} if patient_id is not None else None
    return _format_all(stores, stores.consultations.find_many(filters))


def get_consultation(stores: Stores, pk) -> dict:
    c = stores.consultations.find_by_id(pk)
    if c is None:
        raise NotFound('Consultation not found')
    return _format_all(stores, [c])[0]


def create_consultation(
    stores: Stores, *, patient_id: str, malady_id: str, medicament_id: str,
    date: Optional[datetime] = None, notes: str = '',
) -> dict:
    for store, pk, field in (
        (stores.patients, patient_id, 'patientId'),
        (stores.maladies, malady_id, 'maladyId'),
        (stores.medicaments, medicament_id, 'medicamentId'),
    ):
        if store.find_by_id(pk) is None:
            raise ValidationError({field: f'{store.label} not found'})
    c = stores.consultations.insert_one(
        patient_id=patient_id, malady_id=malady_id, medicament_id=medicament_id,
        date=date or timezone.now(), notes=notes or '',
    )
    logger.info('Consultation %s created for patient %s', c.id, patient_id)
    return _format_all(stores, [c])[0]


def delete_consultation(stores: Stores, pk) -> dict:
    c = stores.consultations.delete_by_id(pk, not_found_message='Consultation not found')
    logger.info('Consultation %s deleted', c.id)
    return _format_all(stores, [c])[0]
