def test_register_returns_account_with_id(client):
    r = client.post('/register', json={'username': 'bob', 'password': 'pass1'})
    assert r.status_code == 200
    body = r.json()
    assert body['accountId'] == 1
    assert body['username'] == 'bob'
    assert body['password'] == 'pass1'


def test_register_duplicate_username_conflicts(client):
    assert client.post('/register', json={'username': 'bob', 'password': 'pass1'}).status_code == 200
    r = client.post('/register', json={'username': 'bob', 'password': 'other'})
    assert r.status_code == 409


def test_register_rejects_invalid_payloads(client):
    bad = [
        {'username': '', 'password': 'pass1'},
        {'username': '   ', 'password': 'pass1'},
        {'password': 'pass1'},
        {'username': 'bob', 'password': 'abc'},
        {'username': 'bob'},
    ]
    for payload in bad:
        r = client.post('/register', json=payload)
        assert r.status_code == 400, payload


def test_register_accepts_four_character_password(client):
    r = client.post('/register', json={'username': 'amy', 'password': 'abcd'})
    assert r.status_code == 200


def test_login_returns_matching_account(client):
    created = client.post('/register', json={'username': 'bob', 'password': 'pass1'}).json()
    r = client.post('/login', json={'username': 'bob', 'password': 'pass1'})
    assert r.status_code == 200
    assert r.json() == created


def test_login_mismatch_is_unauthorized(client):
    client.post('/register', json={'username': 'bob', 'password': 'pass1'})
    assert client.post('/login', json={'username': 'bob', 'password': 'pass2'}).status_code == 401
    assert client.post('/login', json={'username': 'bobby', 'password': 'pass1'}).status_code == 401
    # comparison is exact
    assert client.post('/login', json={'username': 'Bob', 'password': 'pass1'}).status_code == 401


def test_login_blank_fields_are_invalid(client):
    assert client.post('/login', json={'username': '', 'password': 'pass1'}).status_code == 400
    assert client.post('/login', json={'username': 'bob', 'password': ' '}).status_code == 400
    assert client.post('/login', json={}).status_code == 400


def test_malformed_body_is_bad_request(client):
    r = client.post('/register', content=b'not json', headers={'Content-Type': 'application/json'})
    assert r.status_code == 400
