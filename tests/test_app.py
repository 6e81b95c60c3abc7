"""Tests for the Flask endpoints."""

from __future__ import annotations

import pytest

from app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c


def test_index_get(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'<form' in response.data


def test_index_post_renders_svg(client):
    response = client.post('/', data={'text': 'hello', 'data': 'circle', 'finder_border': 'bagel-border'})
    assert response.status_code == 200
    assert b'<svg' in response.data
    assert b'stroke-width' in response.data
    assert b'data:image/png;base64,' in response.data


def test_index_post_without_text(client):
    response = client.post('/', data={'text': ''})
    assert response.status_code == 200
    assert b'Enter the text to encode.' in response.data


def test_export_svg(client):
    response = client.get('/export/svg?text=hello&data=rounded-square&margin=2')
    assert response.status_code == 200
    assert response.mimetype == 'image/svg+xml'
    body = response.data.decode('utf-8')
    assert body.startswith('<svg')
    assert 'viewBox="0 0 25 25"' in body


def test_export_svg_missing_text(client):
    response = client.get('/export/svg')
    assert response.status_code == 400


def test_export_svg_invalid_style_pairing(client):
    response = client.get('/export/svg?text=hello&finder_border=triangle')
    assert response.status_code == 400
    assert b'TRIANGLE' in response.data


def test_export_regions_png(client):
    response = client.get('/export/regions.png?text=hello')
    assert response.status_code == 200
    assert response.mimetype == 'image/png'
    assert response.data.startswith(b'\x89PNG')


def test_styles_listing(client):
    data = client.get('/styles').get_json()
    assert 'triangle' in data['data']
    assert 'triangle' not in data['finder_border']
    assert 'bagel-border' in data['finder_border']
    assert 'squircle-inside' in data['finder_interior']
