def new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def press(client, game_id, key):
    return client.post(f'/api/game/{game_id}/key', json={'key': key})


def type_word(client, game_id, word):
    for char in word:
        press(client, game_id, char)


def test_new_game(client):
    data = new_game(client)

    assert data['success'] is True
    assert data['game_id']
    state = data['state']
    assert state['status'] == 'EDITING'
    assert state['answer'] is None
    assert state['num_submitted_tries'] == 0
    assert len(state['board']) == 6
    assert all(len(row) == 5 for row in state['board'])
    assert data['keyboard_rows'][2][0] == 'Enter'


def test_get_state(client):
    game_id = new_game(client)['game_id']
    response = client.get(f'/api/game/{game_id}/state')

    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_key_press_updates_board(client):
    game_id = new_game(client)['game_id']

    data = press(client, game_id, 'C').get_json()
    assert data['changed'] is True
    assert data['state']['board'][0][0] == {'text': 'c', 'state': 'PENDING'}
    assert data['state']['cursor'] == 1

    data = press(client, game_id, 'Backspace').get_json()
    assert data['changed'] is True
    assert data['state']['cursor'] == 0

    data = press(client, game_id, 'Tab').get_json()
    assert data['changed'] is False


def test_key_is_required(client):
    game_id = new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/key', json={})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_submit_incomplete_guess(client):
    game_id = new_game(client)['game_id']
    type_word(client, game_id, 'cra')

    data = client.post(f'/api/game/{game_id}/submit').get_json()

    assert data['success'] is True
    assert data['outcome']['kind'] == 'INCOMPLETE_GUESS'
    assert data['outcome']['message'] == 'Not enough letters'
    assert data['state']['num_submitted_tries'] == 0
    assert data['state']['cursor'] == 3


def test_submit_not_in_dictionary(client):
    game_id = new_game(client)['game_id']
    type_word(client, game_id, 'zzzzz')

    data = client.post(f'/api/game/{game_id}/submit').get_json()

    assert data['outcome']['kind'] == 'NOT_IN_DICTIONARY'
    assert data['state']['num_submitted_tries'] == 0


def test_submit_evaluates_guess(client):
    game_id = new_game(client)['game_id']
    type_word(client, game_id, 'candy')

    data = client.post(f'/api/game/{game_id}/submit').get_json()

    assert data['outcome']['kind'] == 'NONE'
    state = data['state']
    assert [cell['state'] for cell in state['board'][0]] == [
        'FULL', 'PARTIAL', 'PARTIAL', 'WRONG', 'WRONG'
    ]
    assert state['keyboard']['c'] == 'FULL'
    assert state['num_submitted_tries'] == 1
    assert state['answer'] is None


def test_enter_key_submits_and_wins(client):
    game_id = new_game(client)['game_id']
    type_word(client, game_id, 'crane')

    data = press(client, game_id, 'Enter').get_json()

    assert data['changed'] is True
    assert data['state']['status'] == 'WON'
    assert data['state']['answer'] == 'crane'
    assert data['state']['last_outcome']['message'] == 'NICE!'


def test_loss_reveals_answer(client):
    game_id = new_game(client)['game_id']
    for word in ['candy', 'happy', 'apply', 'stare', 'trace', 'raise']:
        type_word(client, game_id, word)
        data = client.post(f'/api/game/{game_id}/submit').get_json()

    assert data['outcome'] == {'kind': 'LOST', 'revealed_word': 'crane', 'message': 'CRANE'}
    assert data['state']['status'] == 'LOST'
    assert data['state']['answer'] == 'crane'


def test_share(client):
    game_id = new_game(client)['game_id']
    type_word(client, game_id, 'candy')
    client.post(f'/api/game/{game_id}/submit')
    type_word(client, game_id, 'crane')
    client.post(f'/api/game/{game_id}/submit')

    data = client.get(f'/api/game/{game_id}/share').get_json()

    rows = data['result'].split('\n')
    assert len(rows) == 2
    assert all(len(row) == 5 for row in rows)
    assert len(set(rows[1])) == 1


def test_unknown_game_returns_404(client):
    assert client.get('/api/game/missing/state').status_code == 404
    assert client.post('/api/game/missing/key', json={'key': 'a'}).status_code == 404
    assert client.post('/api/game/missing/submit').status_code == 404
    assert client.get('/api/game/missing/share').status_code == 404


def test_delete_game(client):
    game_id = new_game(client)['game_id']

    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': False}


def test_health(client):
    new_game(client)
    new_game(client)

    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 2
    assert data['dictionary_size'] == 14
