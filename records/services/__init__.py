"""Service layer: validated input in, plain dicts out.

Every service function receives a :class:`Stores` bundle rather than
reaching for models directly, so the persistence client is explicit.
"""
from __future__ import annotations

from dataclasses import dataclass

from records.services.store import DocumentStore


@dataclass(frozen=True)
class Stores:
    patients: DocumentStore
    maladies: DocumentStore
    medicaments: DocumentStore
    consultations: DocumentStore


def build_stores(using: str = 'default') -> Stores:
    from records.models import Consultation, Malady, Medicament, Patient

    return Stores(
        patients=DocumentStore(Patient, label='Patient', using=using),
        maladies=DocumentStore(Malady, label='Malady', using=using),
        medicaments=DocumentStore(Medicament, label='Medicament', using=using),
        consultations=DocumentStore(Consultation, label='Consultation', using=using),
    )


def get_stores() -> Stores:
    """The process-wide bundle built when the records app is ready."""
    from django.apps import apps

    return apps.get_app_config('records').stores
