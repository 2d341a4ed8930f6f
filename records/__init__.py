"""Records application for the PharmaX backend.

This package contains models, serializers, services, views and route
registrations for patients, maladies, medicaments and consultations.
"""
