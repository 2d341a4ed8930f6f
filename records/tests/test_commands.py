from io import StringIO

import pytest
from django.core.management import call_command

from records.models import Consultation, Malady, Medicament, Patient

pytestmark = pytest.mark.django_db


def test_seed_data_is_idempotent():
    out = StringIO()
    call_command('seed_data', '--with-consultations', stdout=out)
    call_command('seed_data', '--with-consultations', stdout=out)
    assert Malady.objects.count() == 4
    assert Medicament.objects.count() == 7
    assert Patient.objects.count() == 3
    assert Consultation.objects.count() == 3
    assert '0 new consultation(s)' in out.getvalue()


def test_runserver_defaults_to_configured_port(settings):
    from records.management.commands.runserver import Command

    assert Command.default_addr == '0.0.0.0'
    assert Command.default_port == str(settings.PORT)
