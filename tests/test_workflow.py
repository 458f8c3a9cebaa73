import io


CONTRACT = (
    b'MASTER SERVICES AGREEMENT\n\n'
    b'1. TERM. Either party may terminate this agreement with 30 days written notice.\n'
    b'2. INDEMNITY. The Provider shall indemnify the Client.\n'
)


def test_register_login_upload_analyze(client):
    register = client.post('/api/register', json={
        'email': 'paula@example.com', 'password': 'Str0ng-pass', 'name': 'Paula'
    })
    assert register.status_code == 200

    login = client.post('/api/login', json={
        'email': 'paula@example.com', 'password': 'Str0ng-pass'
    })
    assert login.status_code == 200
    headers = {'Authorization': f"Bearer {login.get_json()['token']}"}

    uploaded = client.post(
        '/api/files',
        data={'file': (io.BytesIO(CONTRACT), 'msa.txt', 'text/plain'), 'title': 'MSA'},
        headers=headers,
        content_type='multipart/form-data'
    )
    assert uploaded.status_code == 200
    document_id = uploaded.get_json()['id']

    fetched = client.get(f'/api/files/{document_id}', headers=headers)
    assert fetched.status_code == 200
    document = fetched.get_json()
    assert document['extractedText'] == CONTRACT.decode('utf-8')
    assert document['userId'] == login.get_json()['user']['id']

    clauses = client.post('/api/extract-clauses', headers=headers,
                          json={'text': document['extractedText']})
    assert clauses.status_code == 200
    assert len(clauses.get_json()) == 4

    analysis = client.post('/api/analyze-text', headers=headers,
                           json={'text': 'Either party may terminate', 'analysisType': 'ambiguity'})
    assert analysis.get_json()['confidence'] == 92

    deleted = client.delete(f'/api/files/{document_id}', headers=headers)
    assert deleted.status_code == 200
    assert client.get('/api/files', headers=headers).get_json() == []
