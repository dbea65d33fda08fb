"""
Tests for the JSON API.
"""

import pytest

from app import app, create_app
from utils.sanitizer import sanitize_ingredient_text, sanitize_recipe_name


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_format_metric(client):
    response = client.post('/api/measurements/format', json={
        'lines': ['2.5 oz Gin', '2-3 dashes Bitters'],
        'servings': 2,
        'unit_system': 'metric',
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['servings'] == 2
    assert data['unit_system'] == 'metric'
    assert [m['line'] for m in data['measurements']] == ['150 ml Gin', '2-3 dashes Bitters']
    assert data['measurements'][0]['unit'] == 'ml'


def test_format_defaults_to_one_us_serving(client):
    response = client.post('/api/measurements/format', json={'lines': ['0.75 oz Lime juice']})
    data = response.get_json()
    assert data['servings'] == 1
    assert data['unit_system'] == 'us'
    assert data['measurements'][0]['line'] == '¾ oz Lime juice'


def test_format_clamps_servings(client):
    response = client.post('/api/measurements/format', json={'lines': ['1 oz Gin'], 'servings': 99})
    data = response.get_json()
    assert data['servings'] == 6
    assert data['measurements'][0]['amount'] == '6'

    response = client.post('/api/measurements/format', json={'lines': ['1 oz Gin'], 'servings': 'lots'})
    assert response.get_json()['servings'] == 1


def test_format_with_domain(client):
    response = client.post('/api/measurements/format', json={
        'lines': ['Splash dark rum'],
        'domain': 'rum',
    })
    measurement = response.get_json()['measurements'][0]
    assert measurement['unit'] == 'item'
    assert measurement['item'] == 'dark rum'


def test_parse(client):
    response = client.post('/api/measurements/parse', json={
        'lines': ['2-3 dashes Bitters', 'Ice', '1 Orange peel (optional)'],
    })
    assert response.status_code == 200
    parsed = response.get_json()['measurements']
    assert parsed[0]['amount'] == '2-3'
    assert parsed[1] == {'amount': 1.0, 'unit': 'item', 'item': 'Ice', 'note': None}
    assert parsed[2]['note'] == 'optional'


def test_copy_text(client):
    response = client.post('/api/recipes/copy-text', json={
        'name': 'Sidecar',
        'lines': ['2 oz Cognac', '0.75 oz Lemon juice'],
        'servings': 2,
    })
    data = response.get_json()
    assert data['text'] == 'Sidecar (serves 2)\n- 4 oz Cognac\n- 1 ½ oz Lemon juice'
    assert data['preview'] == 'Sidecar\n4 oz Cognac • 1 ½ oz Lemon juice'


def test_unknown_unit_system_is_rejected(client):
    response = client.post('/api/measurements/format', json={'lines': ['1 oz Gin'], 'unit_system': 'kelvin'})
    assert response.status_code == 400
    assert 'kelvin' in response.get_json()['error']


def test_bad_bodies_are_rejected(client):
    response = client.post('/api/measurements/format', data='nope', content_type='text/plain')
    assert response.status_code == 400

    response = client.post('/api/measurements/parse', json={'lines': '2 oz Gin'})
    assert response.status_code == 400

    response = client.post('/api/measurements/parse', json=['2 oz Gin'])
    assert response.status_code == 400

    response = client.post('/api/measurements/parse', json={'lines': ['1 oz Gin'] * 101})
    assert response.status_code == 400


def test_sanitizers():
    assert sanitize_ingredient_text("1 oz Gin\x00") == "1 oz Gin"
    assert sanitize_ingredient_text("½ oz Rum & Coke (optional)") == "½ oz Rum & Coke (optional)"
    assert sanitize_ingredient_text(None) == ""
    assert len(sanitize_ingredient_text("x" * 600)) == 500
    assert sanitize_recipe_name("") == "Recipe"
    assert sanitize_recipe_name("  Rum   &  Coke ") == "Rum & Coke"


def test_copy_text_keeps_ampersands(client):
    response = client.post('/api/recipes/copy-text', json={
        'name': 'Rum & Coke',
        'lines': ['2 oz Rum & Coke'],
    })
    assert response.get_json()['text'] == 'Rum & Coke (serves 1)\n- 2 oz Rum & Coke'


def test_infinite_servings_fall_back_to_default(client):
    response = client.post(
        '/api/measurements/format',
        data='{"lines": ["1 oz Gin"], "servings": Infinity}',
        content_type='application/json',
    )
    assert response.status_code == 200
    data = response.get_json()
    assert data['servings'] == 1
    assert data['measurements'][0]['line'] == '1 oz Gin'


def test_overflowing_amount_is_not_a_server_error(client):
    huge = "9" * 320
    for unit_system in ('us', 'metric'):
        response = client.post('/api/measurements/format', json={
            'lines': [huge + ' oz Gin'],
            'unit_system': unit_system,
        })
        assert response.status_code == 200
        assert response.get_json()['measurements'][0]['line'] == huge + ' oz Gin'


def test_create_app_config_reaches_the_engine():
    custom = create_app('testing')
    custom.config.update(SERVINGS_MAX=12, DASH_TO_ML=0.5, DEFAULT_DESCRIPTOR_SET='rum')
    with custom.test_client() as client:
        response = client.post('/api/measurements/format', json={
            'lines': ['1 oz Gin', '3 dashes Bitters', 'Splash dark rum'],
            'servings': 10,
            'unit_system': 'metric',
        })
        data = response.get_json()
        assert data['servings'] == 10
        lines = [m['line'] for m in data['measurements']]
        assert lines == ['300 ml Gin', '15 ml Bitters', 'Splash item dark rum']

        response = client.post('/api/recipes/copy-text', json={
            'name': 'Gin',
            'lines': ['1 oz Gin'],
            'servings': 10,
        })
        assert response.get_json()['text'] == 'Gin (serves 10)\n- 10 oz Gin'


def test_create_app_uses_named_config():
    assert create_app('testing').config['TESTING'] is True
    assert create_app('production').config['DEBUG'] is False
