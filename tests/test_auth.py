from datetime import datetime, timedelta, timezone

from jose import jwt

from legalassist.models.user import User


def test_register_returns_token_and_public_user(client):
    response = client.post('/api/register', json={
        'email': 'bob@example.com', 'password': 'hunter2', 'name': 'Bob'
    })

    assert response.status_code == 200
    body = response.get_json()
    assert body['token']
    assert body['user']['email'] == 'bob@example.com'
    assert body['user']['name'] == 'Bob'
    assert body['user']['id']
    assert 'password' not in body['user']
    assert 'password_hash' not in body['user']


def test_register_hashes_password(app, register):
    register(password='plain-password')

    with app.app_context():
        user = User.find_by_email('alice@example.com')
    assert user.password_hash != 'plain-password'
    assert user.check_password('plain-password')


def test_duplicate_registration_conflicts(client, register):
    _, first = register(password='original')

    response = client.post('/api/register', json={
        'email': 'alice@example.com', 'password': 'other', 'name': 'Imposter'
    })
    assert response.status_code == 409
    assert response.get_json()['message'] == 'User already exists'

    # First account still logs in with its own password
    login = client.post('/api/login', json={
        'email': 'alice@example.com', 'password': 'original'
    })
    assert login.status_code == 200
    assert login.get_json()['user'] == first['user']


def test_login_with_wrong_password_is_unauthorized(client, register):
    register(password='correct')

    response = client.post('/api/login', json={
        'email': 'alice@example.com', 'password': 'wrong'
    })
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Invalid credentials'


def test_login_with_unknown_email_is_unauthorized(client):
    response = client.post('/api/login', json={
        'email': 'nobody@example.com', 'password': 'whatever'
    })
    assert response.status_code == 401


def test_login_token_authenticates(client, register):
    register(password='correct')

    login = client.post('/api/login', json={
        'email': 'alice@example.com', 'password': 'correct'
    })
    token = login.get_json()['token']

    response = client.get('/api/files', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200
    assert response.get_json() == []


def test_auth_prefixed_aliases(client):
    response = client.post('/api/auth/register', json={
        'email': 'carol@example.com', 'password': 'pw', 'name': 'Carol'
    })
    assert response.status_code == 200

    response = client.post('/api/auth/login', json={
        'email': 'carol@example.com', 'password': 'pw'
    })
    assert response.status_code == 200
    assert response.get_json()['user']['name'] == 'Carol'


def test_missing_fields_rejected(client):
    response = client.post('/api/register', json={'email': 'dan@example.com'})
    assert response.status_code == 400
    assert 'password' in response.get_json()['message']

    response = client.post('/api/login', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_missing_token_is_unauthorized(client):
    response = client.get('/api/files')
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Access token required'


def test_non_bearer_header_is_unauthorized(client):
    response = client.get('/api/files', headers={'Authorization': 'Basic abc'})
    assert response.status_code == 401


def test_invalid_token_is_forbidden(client):
    response = client.get('/api/files', headers={'Authorization': 'Bearer not-a-token'})
    assert response.status_code == 403
    assert response.get_json()['message'] == 'Invalid or expired token'


def test_token_signed_with_other_secret_is_forbidden(client):
    token = jwt.encode({'userId': 'x', 'email': 'x@example.com'}, 'other-secret',
                       algorithm='HS256')
    response = client.get('/api/files', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 403


def test_expired_token_is_forbidden(client):
    expired = datetime.now(timezone.utc) - timedelta(minutes=5)
    token = jwt.encode({'userId': 'x', 'email': 'x@example.com', 'exp': expired},
                       'test-secret', algorithm='HS256')
    response = client.get('/api/files', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 403


def test_configured_expiry_adds_exp_claim(app, client):
    app.config['JWT_EXPIRE_MINUTES'] = 30
    response = client.post('/api/register', json={
        'email': 'erin@example.com', 'password': 'pw', 'name': 'Erin'
    })
    token = response.get_json()['token']

    claims = jwt.get_unverified_claims(token)
    assert claims['email'] == 'erin@example.com'
    assert claims['userId'] == response.get_json()['user']['id']
    assert 'exp' in claims


def test_token_has_no_expiry_by_default(register):
    _, body = register()
    claims = jwt.get_unverified_claims(body['token'])
    assert set(claims) == {'userId', 'email'}
