import pytest

from records.exceptions import DuplicateKey, NotFound, StorageUnavailable
from records.models import Malady, Medicament
from records.services import build_stores
from records.services.maladies import delete_malady
from records.services.resolve import MALADY_DISPLAY, resolve

pytestmark = pytest.mark.django_db


@pytest.fixture
def stores():
    return build_stores()


def test_insert_returns_record_with_generated_id(stores):
    m = stores.maladies.insert_one(malady_name='Asthma')
    assert len(m.id) == 32
    assert m.created_at is not None and m.updated_at is not None
    assert m.is_deleted is False


def test_insert_duplicate_raises_duplicate_key(stores):
    stores.maladies.insert_one(malady_name='Asthma')
    with pytest.raises(DuplicateKey) as exc:
        stores.maladies.insert_one(duplicate_message='Malady already exists', malady_name='Asthma')
    assert str(exc.value.detail) == 'Malady already exists'
    assert Malady.objects.count() == 1


def test_integrity_error_without_unique_column_is_a_storage_failure(stores):
    malady = stores.maladies.insert_one(malady_name='Asthma')
    assert stores.maladies.has_unique and not stores.medicaments.has_unique
    with pytest.raises(StorageUnavailable) as exc:
        stores.medicaments.insert_one(medicament_name=None, malady_id=malady.id)
    assert str(exc.value.detail) == 'Failed to create medicament'
    assert Medicament.objects.count() == 0


def test_find_by_id_returns_none_for_missing_or_deleted(stores):
    m = stores.maladies.insert_one(malady_name='Asthma')
    assert stores.maladies.find_by_id(m.id) == m
    assert stores.maladies.find_by_id('missing') is None
    stores.maladies.delete_by_id(m.id)
    assert stores.maladies.find_by_id(m.id) is None


def test_delete_by_id_raises_not_found(stores):
    with pytest.raises(NotFound):
        stores.maladies.delete_by_id('missing')
    m = stores.maladies.insert_one(malady_name='Asthma')
    stores.maladies.delete_by_id(m.id)
    with pytest.raises(NotFound):
        stores.maladies.delete_by_id(m.id)


def test_find_many_filters_and_excludes_deleted(stores):
    a = stores.maladies.insert_one(malady_name='Asthma')
    b = stores.maladies.insert_one(malady_name='Migraine')
    stores.medicaments.insert_one(medicament_name='Salbutamol', malady_id=a.id)
    gone = stores.medicaments.insert_one(medicament_name='Budesonide', malady_id=a.id)
    stores.medicaments.insert_one(medicament_name='Sumatriptan', malady_id=b.id)
    stores.medicaments.delete_by_id(gone.id)

    names = [m.medicament_name for m in stores.medicaments.find_many({'malady_id': a.id})]
    assert names == ['Salbutamol']
    assert stores.medicaments.count() == 2


def test_find_many_honours_sort_order(stores):
    for name in ('Migraine', 'Asthma', 'Hypertension'):
        stores.maladies.insert_one(malady_name=name)
    names = [m.malady_name for m in stores.maladies.find_many(order_by=('malady_name',))]
    assert names == ['Asthma', 'Hypertension', 'Migraine']


def test_resolve_projects_fields_and_keeps_deleted_targets(stores):
    m = stores.maladies.insert_one(malady_name='Asthma')
    stores.maladies.delete_by_id(m.id)
    resolved = resolve(stores.maladies, [m.id, None, 'missing'], MALADY_DISPLAY)
    assert resolved == {m.id: {'_id': m.id, 'maladyName': 'Asthma'}}


def test_malady_delete_cascade_is_atomic(stores, monkeypatch):
    m = stores.maladies.insert_one(malady_name='Asthma')
    stores.medicaments.insert_one(medicament_name='Salbutamol', malady_id=m.id)

    def boom(filters):
        raise RuntimeError('medicament update failed')

    monkeypatch.setattr(stores.medicaments, 'delete_many', boom)
    with pytest.raises(RuntimeError):
        delete_malady(stores, m.id)
    # the malady soft delete was rolled back with the failed cascade
    assert stores.maladies.find_by_id(m.id) is not None
    assert Medicament.objects.filter(is_deleted=False).count() == 1
