import logging
from typing import Optional

from rest_framework.exceptions import ValidationError

from records.exceptions import NotFound
from records.models import Medicament
from records.services import Stores
from records.services.resolve import MALADY_DISPLAY, iso, pick, resolve

logger = logging.getLogger(__name__)


def format_medicament(m: Medicament, maladies: dict[str, dict]) -> dict:
    return {
        '_id': m.id,
        'medicamentName': m.medicament_name,
        'malady_id': pick(maladies, m.malady_id),
        'isDeleted': m.is_deleted,
        'createdAt': iso(m.created_at),
        'updatedAt': iso(m.updated_at),
    }


def _format_all(stores: Stores, items: list[Medicament]) -> list[dict]:
    maladies = resolve(stores.maladies, (m.malady_id for m in items), MALADY_DISPLAY)
    return [format_medicament(m, maladies) for m in items]


def list_medicaments(stores: Stores, malady_id: Optional[str] = None) -> list[dict]:
    filters = {'malady_id': malady_id} if malady_id is not None else None
    return _format_all(stores, stores.medicaments.find_many(filters))


def get_medicament(stores: Stores, pk) -> dict:
    m = stores.medicaments.find_by_id(pk)
    if m is None:
        raise NotFound('Medicament not found')
    return _format_all(stores, [m])[0]


def create_medicament(stores: Stores, *, medicament_name: str, malady_id: str) -> dict:
    if stores.maladies.find_by_id(malady_id) is None:
        raise ValidationError({'maladyId': 'Malady not found'})
    m = stores.medicaments.insert_one(medicament_name=medicament_name, malady_id=malady_id)
    logger.info('Medicament %s created for malady %s', m.id, malady_id)
    return _format_all(stores, [m])[0]


def delete_medicament(stores: Stores, pk) -> None:
    stores.medicaments.delete_by_id(pk, not_found_message='Medicament not found')
    logger.info('Medicament %s deleted', pk)
