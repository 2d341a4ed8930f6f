"""
URL mappings for the PharmaX API.

Paths carry no trailing slash.  The relation lookups
(``medicaments/malady/<id>``, ``consultations/patient/<id>``) are
registered before the generic ``<pk>`` routes.
"""
from django.urls import path, include

from .views import consultations, health, maladies, medicaments, patients, stats


urlpatterns = [
    # exposes /metrics
    path('', include('django_prometheus.urls')),
    path('health', health.health, name='health'),
    path('api/stats', stats.stats, name='stats'),
    # Patients
    path('api/patients', patients.patients, name='patients'),
    path('api/patients/<str:pk>', patients.patient_detail, name='patient-detail'),
    # Maladies
    path('api/maladies', maladies.maladies, name='maladies'),
    path('api/maladies/<str:pk>', maladies.malady_detail, name='malady-detail'),
    # Medicaments
    path('api/medicaments', medicaments.medicaments, name='medicaments'),
    path('api/medicaments/malady/<str:malady_id>', medicaments.medicaments_for_malady, name='medicaments-for-malady'),
    path('api/medicaments/<str:pk>', medicaments.medicament_detail, name='medicament-detail'),
    # Consultations
    path('api/consultations', consultations.consultations, name='consultations'),
    path('api/consultations/patient/<str:patient_id>', consultations.consultations_for_patient, name='consultations-for-patient'),
    path('api/consultations/<str:pk>', consultations.consultation_detail, name='consultation-detail'),
]
