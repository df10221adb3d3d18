"""
game_logic.py - Core game logic for Bulls & Cows (word edition)

Bull  = correct letter in correct position
Cow   = correct letter in wrong position

Nothing in here knows about Flask. State is immutable: every transition
returns a new GameState and leaves the old one untouched.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union


WORD_LENGTH = 4
MAX_GUESSES = 7

# Consumed positions are overwritten with these. They must differ from each
# other and from every letter so a consumed char can never match again.
SECRET_SENTINEL = '*'
GUESS_SENTINEL = '#'


class GameStatus(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


class GuessError(Enum):
    """Reasons a guess is rejected. The value is the message shown to the player."""
    INVALID_LENGTH = 'Guess must be exactly 4 letters.'
    UNKNOWN_WORD = 'Not a valid word!'
    GAME_ALREADY_OVER = 'Game is already over.'

    @property
    def message(self):
        return self.value


@dataclass(frozen=True)
class Guess:
    word: str
    bulls: int
    cows: int

    def to_dict(self):
        return {'word': self.word, 'bulls': self.bulls, 'cows': self.cows}


@dataclass(frozen=True)
class GameState:
    secret: str
    history: Tuple[Guess, ...] = field(default_factory=tuple)
    status: GameStatus = GameStatus.IN_PROGRESS

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def guesses_remaining(self):
        return MAX_GUESSES - len(self.history)

    def to_dict(self, reveal_secret=False):
        """JSON form. The secret is only included when asked for."""
        return {
            'secret': self.secret if reveal_secret else None,
            'history': [g.to_dict() for g in self.history],
            'status': self.status.value,
            'guesses_remaining': self.guesses_remaining,
            'max_guesses': MAX_GUESSES,
        }


def score(secret, guess):
    """
    Calculate Bulls and Cows for a guess against the secret word.

    Two passes. Bulls are found first and both sides of each match are
    overwritten with a sentinel. Then every unmatched guess letter takes the
    first still-unconsumed equal letter of the secret, left to right. Each
    secret position is used at most once and each guess letter counts at
    most once, so bulls + cows never exceeds the word length.

    Returns (bulls: int, cows: int)
    """
    if len(secret) != len(guess):
        raise ValueError('Secret and guess must be the same length.')

    secret_chars = list(secret)
    guess_chars = list(guess)
    bulls = 0
    cows = 0

    for i in range(len(guess_chars)):
        if guess_chars[i] == secret_chars[i]:
            bulls += 1
            secret_chars[i] = SECRET_SENTINEL
            guess_chars[i] = GUESS_SENTINEL

    for i in range(len(guess_chars)):
        letter = guess_chars[i]
        if letter == GUESS_SENTINEL:
            continue
        if letter in secret_chars:
            cows += 1
            secret_chars[secret_chars.index(letter)] = SECRET_SENTINEL

    return bulls, cows


def is_winner(bulls):
    """Check if the player has won (4 bulls = all letters correct)."""
    return bulls == WORD_LENGTH


def normalize_guess(raw):
    if not isinstance(raw, str):
        return ''
    return raw.upper()


def new_game(word_source):
    """Start a round with a freshly sampled secret and an empty history."""
    return GameState(secret=word_source.sample())


def reset_game(word_source):
    """Throw away whatever round was running and start a new one."""
    return new_game(word_source)


def validate_guess(state, normalized, word_source) -> Optional[GuessError]:
    """Return the first reason `normalized` can't be played, or None."""
    if state.is_over:
        return GuessError.GAME_ALREADY_OVER

    if len(normalized) != WORD_LENGTH:
        return GuessError.INVALID_LENGTH

    if not word_source.is_valid(normalized):
        return GuessError.UNKNOWN_WORD

    return None


def submit_guess(state, raw, word_source) -> Tuple[GameState, Union[Guess, GuessError]]:
    """
    Play one turn.

    Returns (new_state, Guess) on success. On rejection returns
    (state, GuessError) where `state` is the very object passed in.
    """
    normalized = normalize_guess(raw)
    error = validate_guess(state, normalized, word_source)
    if error is not None:
        return state, error

    bulls, cows = score(state.secret, normalized)
    guess = Guess(normalized, bulls, cows)
    history = state.history + (guess,)

    if is_winner(bulls):
        status = GameStatus.WON
    elif len(history) >= MAX_GUESSES:
        status = GameStatus.LOST
    else:
        status = GameStatus.IN_PROGRESS

    return replace(state, history=history, status=status), guess
