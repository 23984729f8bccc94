from jotto.services.engine import score


def _new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def _secret(app, game_id):
    return app.game_service.get_session(game_id).secret


def _losing_guess(app, game_id):
    secret = _secret(app, game_id)
    return next(w for w in sorted(app.game_service.dictionary) if score(w, secret) != 5)


def test_new_game_hides_the_answer(client):
    body = _new_game(client)

    assert body['success'] is True
    assert body['state']['answer'] is None
    assert body['state']['turn'] == 'awaiting_human_guess'
    assert body['state']['candidates_remaining'] == len(client.application.game_service.dictionary)


def test_get_state_for_unknown_game_is_404(client):
    response = client.get('/api/game/nope/state')

    assert response.status_code == 404
    assert response.get_json()['error_type'] == 'not_found'


def test_invalid_guess_reports_a_reason(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})

    assert response.status_code == 400
    body = response.get_json()
    assert body['success'] is False
    assert body['reason'] == 'duplicate_letters'


def test_guess_requires_a_body(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_full_turn_over_http(app, client):
    game_id = _new_game(client)['game_id']
    guess = _losing_guess(app, game_id)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': guess.lower()})
    body = response.get_json()
    assert response.status_code == 200
    assert body['word'] == guess
    assert body['score'] == score(guess, _secret(app, game_id))
    assert body['state']['turn'] == 'awaiting_opponent_score'

    response = client.post(f'/api/game/{game_id}/opponent_guess')
    body = response.get_json()
    assert response.status_code == 200
    opponent_guess = body['guess']
    assert body['think_seconds'] == 0
    assert body['state']['pending_guess'] == opponent_guess

    human_secret = next(w for w in sorted(app.game_service.dictionary) if score(opponent_guess, w) != 5)
    response = client.post(
        f'/api/game/{game_id}/opponent_score',
        json={'guess': opponent_guess, 'score': score(opponent_guess, human_secret)}
    )
    body = response.get_json()
    assert response.status_code == 200
    assert body['state']['turn'] == 'awaiting_human_guess'
    assert body['state']['opponent_guesses'][-1]['word'] == opponent_guess
    assert body['state']['candidates_remaining'] < len(app.game_service.dictionary)


def test_out_of_turn_call_is_409(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/opponent_guess')

    assert response.status_code == 409
    assert response.get_json()['error_type'] == 'turn_order'


def test_score_requires_guess_and_score(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/opponent_score', json={'score': 2})

    assert response.status_code == 400


def test_inconsistent_score_is_reported_as_an_anomaly(small_app, small_client):
    game_id = _new_game(small_client)['game_id']
    guess = _losing_guess(small_app, game_id)
    small_client.post(f'/api/game/{game_id}/guess', json={'guess': guess})
    opponent_guess = small_client.post(f'/api/game/{game_id}/opponent_guess').get_json()['guess']

    possible = {score(opponent_guess, w) for w in small_app.game_service.dictionary}
    impossible = next(s for s in range(6) if s not in possible)
    response = small_client.post(
        f'/api/game/{game_id}/opponent_score', json={'guess': opponent_guess, 'score': impossible}
    )

    assert response.status_code == 409
    assert response.get_json()['error_type'] == 'inconsistent_score'

    state = small_client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['inconsistent'] is True
    assert state['game_over'] is True


def test_winning_guess_reveals_the_answer(app, client):
    game_id = _new_game(client)['game_id']
    secret = _secret(app, game_id)

    body = client.post(f'/api/game/{game_id}/guess', json={'guess': secret}).get_json()

    assert body['score'] == 5
    assert body['state']['winner'] == 'human'
    assert body['state']['answer'] == secret


def test_delete_game(client):
    game_id = _new_game(client)['game_id']

    assert client.delete(f'/api/game/{game_id}').get_json()['success'] is True
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_word_stats(client):
    body = client.get('/api/words/stats').get_json()

    assert body['success'] is True
    assert body['stats']['total_words'] == len(client.application.game_service.dictionary)


def test_health_check(client):
    _new_game(client)
    body = client.get('/api/health').get_json()

    assert body['status'] == 'healthy'
    assert body['active_games'] == 1


def test_guess_body_must_be_an_object(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json=['guess'])

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_score_body_must_be_an_object(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/opponent_score', json=['guess', 'score'])

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess and score are required'


def test_health_check_reports_log_counts(client):
    log_stats = client.get('/api/health').get_json()['log_stats']

    assert set(log_stats) == {'log_file', 'entries', 'errors'}
    assert log_stats['entries'] >= 1
