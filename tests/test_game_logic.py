from collections import Counter
from itertools import product

import pytest

from game_logic import (
    MAX_GUESSES, GameState, GameStatus, Guess, GuessError,
    new_game, reset_game, score, submit_guess,
)
from word_source import WordSource
from words import WORDS


class FixedChoice:
    """Stands in for random.Random: hands out the given secrets in turn."""

    def __init__(self, *secrets):
        self.secrets = list(secrets)
        self.calls = 0

    def choice(self, seq):
        secret = self.secrets[self.calls % len(self.secrets)]
        self.calls += 1
        assert secret in seq
        return secret


SCENARIO_WORDS = ['WXYZ', 'ABCD', 'EFGH', 'IJKL', 'MNOP', 'QRST', 'UVAB', 'CDEF', 'GHIJ', 'GOLD']


def source(*secrets, words=SCENARIO_WORDS):
    return WordSource(words, FixedChoice(*secrets))


def _residue_formula(secret, guess):
    """Counter-based definition: bulls by position, cows by multiset overlap of the rest."""
    bulls = sum(s == g for s, g in zip(secret, guess))
    rest_s = Counter(s for s, g in zip(secret, guess) if s != g)
    rest_g = Counter(g for s, g in zip(secret, guess) if s != g)
    return bulls, sum((rest_s & rest_g).values())


# --- scoring ---

@pytest.mark.parametrize("secret,guess,expected", [
    ("GOLD", "GOLD", (4, 0)),
    ("GOLD", "DOLG", (2, 2)),
    ("GOLD", "DLOG", (0, 4)),
    ("GOLD", "FISH", (0, 0)),
    ("AABB", "ABBA", (2, 2)),
    ("BOOK", "OBOE", (1, 2)),
    ("DEED", "EDGE", (0, 3)),
    ("AAAA", "ABCD", (1, 0)),
    ("ABCD", "AAAA", (1, 0)),
])
def test_score_golden(secret, guess, expected):
    assert score(secret, guess) == expected


def test_score_all_displaced():
    # every letter present, none in place
    assert score("GOLD", "OLDG") == (0, 4)


def test_score_repeated_letters_regression():
    # pass 1: A@0 and B@2 are bulls; pass 2: B@1 takes secret B@3, A@3 takes secret A@1
    assert score("AABB", "ABBA") == (2, 2)


def test_cows_for_uneven_multiplicities_both_orders():
    # The left-to-right consumption equals a multiset overlap of the leftovers,
    # so even with different letter counts the two directions agree here.
    assert score("AABB", "ABCD") == (1, 1)
    assert score("ABCD", "AABB") == (1, 1)


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("GOLD", "GO")


def test_score_properties_over_word_list():
    sample = WORDS[:60] + ("AABB", "ABBA", "ABCD", "AAAA")
    for secret, guess in product(sample, repeat=2):
        bulls, cows = score(secret, guess)
        assert 0 <= bulls <= 4 and 0 <= cows <= 4
        assert bulls + cows <= 4
        assert (bulls == 4) == (secret == guess)
        assert bulls == score(guess, secret)[0]
        assert (bulls, cows) == _residue_formula(secret, guess)


# --- transitions ---

def test_new_game_starts_in_progress():
    state = new_game(source("GOLD"))
    assert state == GameState(secret="GOLD", history=(), status=GameStatus.IN_PROGRESS)
    assert state.guesses_remaining == MAX_GUESSES


def test_winning_guess_ends_round():
    state = new_game(source("GOLD"))
    state, result = submit_guess(state, "gold", source("GOLD"))
    assert result == Guess("GOLD", 4, 0)
    assert state.status is GameStatus.WON
    assert state.is_over


def test_win_on_last_guess_is_a_win():
    words = source("GOLD")
    state = new_game(words)
    for _ in range(MAX_GUESSES - 1):
        state, _ = submit_guess(state, "ABCD", words)
    state, result = submit_guess(state, "GOLD", words)
    assert result.bulls == 4
    assert state.status is GameStatus.WON


def test_seven_misses_lose_and_eighth_is_rejected():
    words = source("WXYZ")
    state = new_game(words)
    misses = ['ABCD', 'EFGH', 'IJKL', 'MNOP', 'QRST', 'UVAB', 'CDEF']

    for i, word in enumerate(misses, start=1):
        assert state.status is GameStatus.IN_PROGRESS
        state, result = submit_guess(state, word, words)
        assert isinstance(result, Guess)
        assert len(state.history) == i

    assert state.status is GameStatus.LOST
    assert state.guesses_remaining == 0

    after, error = submit_guess(state, "GHIJ", words)
    assert error is GuessError.GAME_ALREADY_OVER
    assert after is state


def test_guess_after_win_is_rejected():
    words = source("GOLD")
    state, _ = submit_guess(new_game(words), "GOLD", words)
    after, error = submit_guess(state, "ABCD", words)
    assert error is GuessError.GAME_ALREADY_OVER
    assert after is state


@pytest.mark.parametrize("raw", ["AB", "", "GOLDS", None, 1234])
def test_wrong_length_is_rejected_without_change(raw):
    words = source("GOLD")
    state = new_game(words)
    after, error = submit_guess(state, raw, words)
    assert error is GuessError.INVALID_LENGTH
    assert after is state
    assert after.history == ()


def test_unknown_word_is_rejected_without_change():
    words = source("GOLD")
    state, _ = submit_guess(new_game(words), "ABCD", words)
    after, error = submit_guess(state, "ZZZZ", words)
    assert error is GuessError.UNKNOWN_WORD
    assert after is state
    assert len(after.history) == 1


def test_guess_is_normalized():
    words = source("GOLD")
    _, result = submit_guess(new_game(words), "abcd", words)
    assert result == Guess("ABCD", 1, 0)


@pytest.mark.parametrize("raw", [" ABCD", "ABCD ", "abcd   ", " abcd "])
def test_padded_guess_is_rejected_without_change(raw):
    words = source("GOLD")
    state = new_game(words)
    after, error = submit_guess(state, raw, words)
    assert error is GuessError.INVALID_LENGTH
    assert after is state
    assert after.history == ()


def test_submit_does_not_mutate_previous_state():
    words = source("GOLD")
    first = new_game(words)
    second, _ = submit_guess(first, "ABCD", words)
    assert first.history == ()
    assert second.history == (Guess("ABCD", 1, 0),)


def test_reset_from_any_state():
    words = source("GOLD", "WXYZ", "ABCD", "EFGH")
    in_progress, _ = submit_guess(new_game(words), "ABCD", words)
    won, _ = submit_guess(GameState("ABCD"), "ABCD", words)
    lost = GameState("GOLD", (Guess("ABCD", 1, 0),) * MAX_GUESSES, GameStatus.LOST)

    fresh_secrets = []
    for state in (in_progress, won, lost):
        assert state.history
        fresh = reset_game(words)
        assert fresh.history == ()
        assert fresh.status is GameStatus.IN_PROGRESS
        fresh_secrets.append(fresh.secret)

    assert fresh_secrets == ["WXYZ", "ABCD", "EFGH"]


def test_state_dict_hides_secret_unless_asked():
    state = GameState("GOLD", (Guess("ABCD", 1, 0),))
    public = state.to_dict()
    assert public["secret"] is None
    assert public["history"] == [{"word": "ABCD", "bulls": 1, "cows": 0}]
    assert public["guesses_remaining"] == MAX_GUESSES - 1
    assert state.to_dict(reveal_secret=True)["secret"] == "GOLD"
