"""
Database models for the PharmaX backend.

Four collections: patients, maladies (medical conditions), medicaments
(drugs, each tied to one malady) and consultations (a visit linking a
patient, a malady and a medicament).  Every record carries a string
identifier, creation/update timestamps and a soft-delete flag; deleted
records stay in the table and are hidden from default reads.
"""
from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone


def new_id() -> str:
    return uuid.uuid4().hex


class Record(models.Model):
    """Fields shared by every collection."""
    id = models.CharField(max_length=32, primary_key=True, default=new_id, editable=False)
    # Soft delete flag, used by every list/lookup query
    is_deleted = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Patient(Record):
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    # Unique across all patients, deleted ones included
    email = models.EmailField(max_length=254, unique=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"


class Malady(Record):
    malady_name = models.CharField(max_length=255, unique=True)

    class Meta:
        verbose_name_plural = "maladies"

    def __str__(self) -> str:
        return self.malady_name


class Medicament(Record):
    medicament_name = models.CharField(max_length=255)
    # DO_NOTHING: rows are never physically removed, the cascade is soft
    malady = models.ForeignKey(
        Malady, on_delete=models.DO_NOTHING, related_name='medicaments', db_index=True
    )

    def __str__(self) -> str:
        return self.medicament_name


class Consultation(Record):
    patient = models.ForeignKey(Patient, on_delete=models.DO_NOTHING, related_name='consultations')
    malady = models.ForeignKey(Malady, on_delete=models.DO_NOTHING, related_name='consultations')
    medicament = models.ForeignKey(Medicament, on_delete=models.DO_NOTHING, related_name='consultations')
    date = models.DateTimeField(default=timezone.now)
    notes = models.TextField(blank=True, default='')

    class Meta:
        indexes = [
            models.Index(fields=['patient', 'created_at'], name='consult_patient_created_idx'),
        ]

    def __str__(self) -> str:
        return f"consultation p={self.patient_id} m={self.malady_id} at {self.date:%Y-%m-%d}"
