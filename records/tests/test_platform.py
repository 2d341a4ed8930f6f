import pytest
from django.db import OperationalError
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient

from records.exceptions import api_exception_handler
from records.models import Malady, Patient
from records.services.store import DocumentStore
from records.views import health as health_view

pytestmark = pytest.mark.django_db

FRONTEND = 'http://localhost:3000'


def test_health_reports_database():
    client = APIClient()
    r = client.get('/health')
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'OK'
    assert body['timestamp']
    assert body['database'] == 'connected'


def test_health_stays_up_when_database_is_down(monkeypatch):
    class BrokenConnection:
        def cursor(self):
            raise OperationalError('could not connect to server')

    monkeypatch.setattr(health_view, 'connections', {'default': BrokenConnection()})
    r = APIClient().get('/health')
    assert r.status_code == 200
    assert r.json()['status'] == 'OK'
    assert r.json()['database'] == 'disconnected'


def test_health_rejects_other_methods_with_error_body():
    r = APIClient().post('/health', {}, format='json')
    assert r.status_code == 405
    assert r.json() == {'error': 'Method "POST" not allowed.'}
    assert 'GET' in r['Allow']


def test_field_errors_are_reported_before_non_field_errors():
    exc = ValidationError({'non_field_errors': ['Invalid data'], 'email': ['Please enter a valid email']})
    r = api_exception_handler(exc, {})
    assert r.status_code == 400
    assert r.data == {'error': 'Please enter a valid email'}
    r = api_exception_handler(ValidationError({'non_field_errors': ['Invalid data']}), {})
    assert r.data == {'error': 'Invalid data'}


def test_stats_counts_live_records():
    Patient.objects.create(first_name='Ada', last_name='Byron', email='ada@example.com')
    Malady.objects.create(malady_name='Asthma')
    Malady.objects.create(malady_name='Gout', is_deleted=True)
    r = APIClient().get('/api/stats')
    assert r.status_code == 200
    assert r.data == {'patients': 1, 'maladies': 1, 'medicaments': 0, 'consultations': 0}


def test_storage_failure_returns_generic_500(monkeypatch):
    def down(self):
        raise OperationalError('connection refused on 10.0.0.7')

    monkeypatch.setattr(DocumentStore, '_live', down)
    client = APIClient()
    r = client.get('/api/patients')
    assert r.status_code == 500
    assert r.data == {'error': 'Failed to fetch patients'}
    r = client.get('/api/stats')
    assert r.status_code == 500
    assert '10.0.0.7' not in r.data['error']


def test_preflight_is_answered_without_running_views():
    malady = Malady.objects.create(malady_name='Asthma')
    client = APIClient()
    r = client.options(
        f'/api/maladies/{malady.id}',
        HTTP_ORIGIN=FRONTEND,
        HTTP_ACCESS_CONTROL_REQUEST_METHOD='DELETE',
        HTTP_ACCESS_CONTROL_REQUEST_HEADERS='content-type',
    )
    assert r.status_code == 200
    assert r['Access-Control-Allow-Origin'] == FRONTEND
    assert 'DELETE' in r['Access-Control-Allow-Methods']
    assert 'content-type' in r['Access-Control-Allow-Headers']
    malady.refresh_from_db()
    assert malady.is_deleted is False


def test_cors_headers_only_for_configured_origins():
    client = APIClient()
    allowed = client.get('/api/patients', HTTP_ORIGIN=FRONTEND)
    assert allowed['Access-Control-Allow-Origin'] == FRONTEND
    denied = client.get('/api/patients', HTTP_ORIGIN='http://evil.example.com')
    assert denied.status_code == 200
    assert 'Access-Control-Allow-Origin' not in denied


def test_unknown_route_returns_json_404():
    r = APIClient().get('/api/unknown')
    assert r.status_code == 404
    assert r.json() == {'error': 'Route not found'}


def test_metrics_endpoint():
    r = APIClient().get('/metrics')
    assert r.status_code == 200
    assert b'django_http_requests' in r.content
