def _new_game(client, **settings):
    response = client.post('/api/new_game', json=settings)
    assert response.status_code == 200
    return response.get_json()


def test_new_game_defaults(client):
    data = _new_game(client)

    assert data['success']
    assert data['state']['pattern'] == '-----'
    assert data['state']['difficulty'] == 'HARD'
    assert data['state']['answer'] is None


def test_new_game_rejects_bad_settings(client):
    for settings in ({'word_length': 7}, {'word_length': '3'}, {'wrong_guesses': 0},
                     {'difficulty': 'brutal'}):
        response = client.post('/api/new_game', json=settings)
        assert response.status_code == 400
        assert not response.get_json()['success']


def test_guess_flow_until_loss(client):
    data = _new_game(client, word_length=3, wrong_guesses=1, difficulty='hard')
    game_id = data['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'Z'})
    body = response.get_json()

    assert response.status_code == 200
    assert body['partitions'] == {'---': 8}
    assert body['state']['status'] == 'LOST'
    assert body['state']['game_over']
    assert body['state']['answer'] is not None

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'a'})
    assert response.status_code == 409
    assert 'already over' in response.get_json()['error']


def test_guess_errors(client):
    game_id = _new_game(client, word_length=4)['game_id']

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400
    assert client.post(f'/api/game/{game_id}/guess', json={'guess': 'ab'}).status_code == 400
    assert client.post('/api/game/nope/guess', json={'guess': 'a'}).status_code == 404

    assert client.post(f'/api/game/{game_id}/guess', json={'guess': 'e'}).status_code == 200
    repeat = client.post(f'/api/game/{game_id}/guess', json={'guess': 'e'})
    assert repeat.status_code == 409
    assert 'already been guessed' in repeat.get_json()['error']


def test_state_and_delete(client):
    game_id = _new_game(client, word_length=4, difficulty='easy')['game_id']

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['live_word_count'] == 9
    assert state['difficulty'] == 'EASY'

    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.delete(f'/api/game/{game_id}').status_code == 404
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_count_words(client):
    body = client.get('/api/dictionary/4/count').get_json()

    assert body == {'success': True, 'word_length': 4, 'count': 9}
    assert client.get('/api/dictionary/8/count').get_json()['count'] == 0


def test_health(client):
    _new_game(client)
    body = client.get('/api/health').get_json()

    assert body['status'] == 'healthy'
    assert body['active_games'] == 1
    assert body['word_lengths'] == [3, 4, 5]


def test_non_object_bodies_are_rejected(client):
    for body in ([1, 2], 'hard', 7):
        response = client.post('/api/new_game', json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Request body must be a JSON object'

    game_id = _new_game(client, word_length=4)['game_id']
    for body in ('guess', ['guess'], 3):
        response = client.post(f'/api/game/{game_id}/guess', json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'
