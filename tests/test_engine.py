import itertools

import pytest
from wordlekit.engine import (
    ConfigurationError, GuessResult, InputStatus, InvalidInputError, LetterFlag,
    check_word, evaluate, filter_candidates, is_wordle_word, sanitize,
)

A, P, C = LetterFlag.ABSENT, LetterFlag.PRESENT, LetterFlag.CORRECT


# --- feedback golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("AAAAA", "BBBBB", "-----"),
    ("AAAAA", "AAAAA", "GGGGG"),
    ("WEEDS", "SPEED", "-YGYY"),
    ("SPEED", "WEEDS", "Y-GYY"),
    ("WEEDS", "HELLO", "-G---"),
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("SETTLE", "LETTER", "-GGGYY"),
    ("LITTLE", "LETTER", "G-GG-Y"),
    ("PLANET", "PALATE", "GYY-YY"),
    ("KITTEN", "TINKET", "YGYYGY"),
])
def test_evaluate_golden(guess, secret, expected):
    assert evaluate(guess, secret).pattern == expected


def test_evaluate_flags_for_repeated_letters():
    result = evaluate("WEEDS", "SPEED")
    assert result.flags == (A, P, C, P, P)
    assert result.word == "WEEDS"
    assert result.letters == ("W", "E", "E", "D", "S")


def test_evaluate_length_mismatch_is_invalid_input():
    with pytest.raises(InvalidInputError):
        evaluate("ABC", "ABCD")
    # still a ValueError for callers that don't know our hierarchy
    with pytest.raises(ValueError):
        evaluate("ABCDE", "")


WORDS = ["SPEED", "WEEDS", "ERROR", "LEVEL", "EERIE", "ABBEY", "TUTUT", "AAAAA"]


@pytest.mark.parametrize("guess,secret", list(itertools.product(WORDS, WORDS)))
def test_evaluate_never_overcounts_letters(guess, secret):
    result = evaluate(guess, secret)
    assert len(result.flags) == len(guess)

    exact = sum(g == s for g, s in zip(guess, secret))
    assert sum(f is C for f in result.flags) == exact

    for letter in set(guess):
        credited = sum(1 for ch, f in zip(guess, result.flags) if ch == letter and f in (P, C))
        assert credited <= secret.count(letter)


def test_guess_result_equality_and_win():
    assert evaluate("TUTUT", "TUTUT") == GuessResult("TUTUT", (C,) * 5)
    assert evaluate("TUTUT", "TUTUT").is_win
    assert not evaluate("TOTOT", "TUTUT").is_win
    # same flags, different words
    assert evaluate("TOTOT", "TUTUT").flags == evaluate("TITIT", "TUTUT").flags
    assert evaluate("TOTOT", "TUTUT") != evaluate("TITIT", "TUTUT")


def test_guess_result_requires_parallel_sequences():
    with pytest.raises(InvalidInputError):
        GuessResult("ABC", (C, C))


def test_guess_result_empty_row():
    row = GuessResult.empty(5)
    assert row.pattern == "_____"
    assert not row.is_win


# --- sanitize ---
@pytest.mark.parametrize("raw,expected", [
    ("a", "A"),
    ("  A  ", "A"),
    ("à", "A"),
    ("Ã", "A"),
    ("  tûtüt ", "TUTUT"),
    ("animé", "ANIME"),
    ("", ""),
])
def test_sanitize(raw, expected):
    assert sanitize(raw) == expected


@pytest.mark.parametrize("raw", [
    "hello", " Crème brûlée ", "ǰ", "ß", "İstanbul", "会会会", "\t\n", "ÅÉÎÕÜ", "naïve",
])
def test_sanitize_is_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once


# --- validation ---
def test_check_word_statuses():
    dictionary = {"TOTOT", "TUTUT"}
    assert check_word("TOTO", dictionary, 5) is InputStatus.TOO_SHORT
    assert check_word("TOTOTOT", dictionary, 5) is InputStatus.TOO_LONG
    assert check_word("TITIT", dictionary, 5) is InputStatus.NOT_IN_DICTIONARY
    assert check_word("TOTOT", dictionary, 5) is InputStatus.VALID
    assert check_word("  tûtüt ", dictionary, 5) is InputStatus.VALID


def test_check_word_length_wins_over_dictionary():
    # neither word is in the dictionary; length is reported first
    assert check_word("ZZ", {"TOTOT"}, 5) is InputStatus.TOO_SHORT
    assert check_word("ZZZZZZ", {"TOTOT"}, 5) is InputStatus.TOO_LONG


def test_input_status_cause():
    assert InputStatus.VALID.cause == ""
    assert InputStatus.TOO_SHORT.cause == "too short"
    assert InputStatus.NOT_IN_DICTIONARY.cause == "not in dictionary"
    assert InputStatus.NOT_PLAYING.cause == "not playing"


def test_is_wordle_word():
    assert is_wordle_word("CRANE", 5)
    assert not is_wordle_word("crane", 5)
    assert not is_wordle_word("CRANES", 5)
    assert not is_wordle_word("$$$$$", 5)
    assert not is_wordle_word("会会会会会", 5)


def test_error_hierarchy():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(InvalidInputError, ValueError)


# --- constraints ---
def test_filter_candidates_history():
    words = ["CRANE", "RAISE", "STARE", "TRACE", "CARED", "RACER", "SCOOP"]
    history = [evaluate("RAISE", "CRANE")]
    cand = filter_candidates(words, history)
    assert "CRANE" in cand and "STARE" not in cand and "SCOOP" not in cand
    assert "RAISE" not in cand


def test_filter_candidates_six_letters():
    words = ["LETTER", "SETTLE", "LITTLE", "TATTLE", "BETTER"]
    cand = filter_candidates(words, [evaluate("SETTLE", "LETTER")])
    assert "LETTER" in cand and "BETTER" not in cand


def test_filter_candidates_skips_other_lengths():
    assert filter_candidates(["CRANE", "CRANES"], [evaluate("CRANE", "CRANE")]) == ["CRANE"]
