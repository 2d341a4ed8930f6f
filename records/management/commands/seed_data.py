"""
Management command to populate the database with demo records.

Running it twice does not duplicate anything: maladies and patients are
matched on their unique name/email, medicaments on (name, malady).
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from records.models import Consultation, Malady, Medicament, Patient

MALADIES = {
    'Hypertension': ['Amlodipine', 'Lisinopril'],
    'Type 2 Diabetes': ['Metformin', 'Gliclazide'],
    'Asthma': ['Salbutamol', 'Budesonide'],
    'Migraine': ['Sumatriptan'],
}

PATIENTS = [
    ('Alice', 'Martin', 'alice.martin@example.com'),
    ('Bruno', 'Lefevre', 'bruno.lefevre@example.com'),
    ('Chloe', 'Dubois', 'chloe.dubois@example.com'),
]


class Command(BaseCommand):
    help = 'Populate database with demo patients, maladies, medicaments and consultations'

    def add_arguments(self, parser):
        parser.add_argument(
            '--with-consultations', action='store_true',
            help='Also create one consultation per patient',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Creating demo data...')

        medicaments = []
        for malady_name, drug_names in MALADIES.items():
            malady, _ = Malady.objects.get_or_create(malady_name=malady_name)
            for drug_name in drug_names:
                med, _ = Medicament.objects.get_or_create(
                    medicament_name=drug_name, malady=malady, is_deleted=False,
                )
                medicaments.append(med)

        patients = []
        for first_name, last_name, email in PATIENTS:
            patient, _ = Patient.objects.get_or_create(
                email=email, defaults={'first_name': first_name, 'last_name': last_name},
            )
            patients.append(patient)

        created = 0
        if options['with_consultations']:
            for patient, med in zip(patients, medicaments):
                _, was_created = Consultation.objects.get_or_create(
                    patient=patient, malady_id=med.malady_id, medicament=med,
                    defaults={'notes': 'Demo consultation'},
                )
                created += int(was_created)

        self.stdout.write(self.style.SUCCESS(
            f'{Malady.objects.count()} maladies, {Medicament.objects.count()} medicaments, '
            f'{Patient.objects.count()} patients, {created} new consultation(s)'
        ))
