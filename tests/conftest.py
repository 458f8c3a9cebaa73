import io

import pytest

from legalassist.app import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'JWT_SECRET': 'test-secret',
        'AGENT_LATENCY_SCALE': 0,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Register a user and return (auth headers, response body)"""
    def _register(email='alice@example.com', password='s3cret!', name='Alice'):
        response = client.post('/api/register', json={
            'email': email, 'password': password, 'name': name
        })
        assert response.status_code == 200, response.get_json()
        body = response.get_json()
        return {'Authorization': f"Bearer {body['token']}"}, body
    return _register


@pytest.fixture
def auth_headers(register):
    headers, _ = register()
    return headers


@pytest.fixture
def upload(client):
    """Upload bytes as a multipart file"""
    def _upload(headers, data=b'Plain contract text.', filename='contract.txt',
                mimetype='text/plain', title=None):
        form = {'file': (io.BytesIO(data), filename, mimetype)}
        if title is not None:
            form['title'] = title
        return client.post('/api/files', data=form, headers=headers,
                           content_type='multipart/form-data')
    return _upload
