"""
Tests for the health check endpoint.
"""
import pytest


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get('/api/v1/health/')

    assert response.status_code == 200
    assert response.json() == {
        'status': 'healthy',
        'checks': {'database': 'ok', 'cache': 'ok'},
    }


@pytest.mark.django_db
def test_health_check_ignores_bad_admin_token(api_client):
    response = api_client.get('/api/v1/health/', HTTP_AUTHORIZATION='Bearer expired')
    assert response.status_code == 200
