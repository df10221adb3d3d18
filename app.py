"""
app.py - Flask application for Bulls & Cows (word edition)
"""

import os
import random
import uuid
from flask import Blueprint, Flask, current_app, jsonify, render_template, request, session

from config import Config, get_config
from game_logger import game_logger
from game_logic import GameStatus, GuessError, new_game, reset_game, submit_guess
from word_source import WordSource
from words import WORDS

bp = Blueprint('game', __name__)

# A finished round is not a malformed request, so it gets its own status.
ERROR_STATUS = {
    GuessError.INVALID_LENGTH: 400,
    GuessError.UNKNOWN_WORD: 400,
    GuessError.GAME_ALREADY_OVER: 409,
}


# ─────────────────────────────────────────────
# HELPER UTILITIES
# ─────────────────────────────────────────────

def error_response(message, status=400, code=None):
    body = {'success': False, 'error': message}
    if code:
        body['code'] = code
    return jsonify(body), status


class GameStore:
    """
    Rounds kept server-side by game id. The session cookie only carries the
    id, so the secret never leaves the server while a round is running.
    """

    def __init__(self):
        self.games = {}

    def create(self, state):
        game_id = str(uuid.uuid4())
        self.games[game_id] = state
        return game_id

    def get(self, game_id):
        return self.games.get(game_id)

    def update(self, game_id, state):
        self.games[game_id] = state

    def discard(self, game_id):
        self.games.pop(game_id, None)

    def __len__(self):
        return len(self.games)


def load_state():
    """Look up the current round for this session, or None if there isn't one."""
    game_id = session.get('game_id')
    if not game_id:
        return None
    return current_app.game_store.get(game_id)


def save_state(state):
    current_app.game_store.update(session['game_id'], state)


def public_state(state):
    """What the browser is allowed to see: the answer only once it's over."""
    return state.to_dict(reveal_secret=state.is_over)


def start_round(event, start=new_game):
    """Replace this session's round (if any) with a fresh one."""
    store = current_app.game_store
    old_id = session.pop('game_id', None)
    if old_id:
        store.discard(old_id)
    state = start(current_app.word_source)
    session['game_id'] = store.create(state)
    game_logger.log_game_event(event, request)
    return state


# ─────────────────────────────────────────────
# ROUTES
# ─────────────────────────────────────────────

@bp.route('/')
def index():
    """The game page. Opening it starts a round if none is running."""
    if load_state() is None:
        start_round('game_started')
    return render_template('index.html')


@bp.route('/state', methods=['GET'])
def state():
    """Return the current round (secret hidden until it's over)."""
    game_logger.log_user_action(request, 'get_state')

    current = load_state()
    if current is None:
        return error_response('No active game. Please start a new game.', 403)

    return jsonify({'success': True, 'state': public_state(current)})


@bp.route('/guess', methods=['POST'])
def guess():
    """
    Player submits a guess against the secret word.
    Expects JSON: { "guess": "GOLD" }
    Returns bulls, cows, and whether the round is over.
    """
    current = load_state()
    if current is None:
        return error_response('No active game. Please start a new game.', 403)

    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return error_response('No data provided.')

    raw = data.get('guess', '')
    game_logger.log_user_action(request, 'guess', guess=raw)

    updated, result = submit_guess(current, raw, current_app.word_source)

    if isinstance(result, GuessError):
        status = ERROR_STATUS[result]
        game_logger.log_server_response(
            request, 'guess', False,
            {'error': result.message, 'state': public_state(current)},
            code=result.name,
        )
        return error_response(result.message, status, code=result.name)

    save_state(updated)

    if updated.status is GameStatus.WON:
        game_logger.log_game_event('game_won', request, answer=updated.secret, guesses=len(updated.history))
    elif updated.status is GameStatus.LOST:
        game_logger.log_game_event('game_lost', request, answer=updated.secret, guesses=len(updated.history))

    response = {
        'success': True,
        'guess': result.to_dict(),
        'won': updated.status is GameStatus.WON,
        'game_over': updated.is_over,
        'state': public_state(updated),
    }
    game_logger.log_server_response(request, 'guess', True, response, bulls=result.bulls, cows=result.cows)
    return jsonify(response)


@bp.route('/reset', methods=['POST'])
def reset():
    """Drop the current round and start a new one with a fresh secret."""
    game_logger.log_user_action(request, 'reset')
    fresh = start_round('game_reset', reset_game)
    return jsonify({'success': True, 'state': public_state(fresh)})


@bp.route('/favicon.ico')
def favicon():
    return '', 204


# ─────────────────────────────────────────────
# APP FACTORY
# ─────────────────────────────────────────────

def create_app(config_class=Config, word_source=None, **flask_kwargs):
    """
    Build the Flask app.

    `word_source` defaults to the built-in word list with an RNG seeded from
    SECRET_SEED (unseeded when that's unset). Extra keyword arguments go
    straight to Flask(), which is how the serverless entry point points at
    the template folder.
    """
    app = Flask(__name__, **flask_kwargs)
    app.config.from_object(config_class)

    game_logger.configure(app.config['LOG_LEVEL'], app.config['LOG_DIR'])

    if word_source is None:
        word_source = WordSource(WORDS, random.Random(app.config['SECRET_SEED']))
    app.word_source = word_source
    app.game_store = GameStore()

    app.register_blueprint(bp)
    return app


app = create_app(get_config(os.environ.get('APP_ENV')))


# ─────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'], host=app.config['HOST'], port=app.config['PORT'])
