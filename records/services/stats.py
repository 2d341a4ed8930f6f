from records.services import Stores


def collection_counts(stores: Stores) -> dict:
    return {
        'patients': stores.patients.count(),
        'maladies': stores.maladies.count(),
        'medicaments': stores.medicaments.count(),
        'consultations': stores.consultations.count(),
    }
