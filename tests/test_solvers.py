import pytest

from hangman.engine import HangmanGame, GameStatus, GuessLetter, GuessWord, play
from hangman.harness import TEST_WORD, run_case
from hangman.solvers import (
    create_solver, get_solver_ids, IncrementalStrategy, BaselineStrategy, FIRST_GUESS,
)
from hangman.solvers.incremental import StrategyState
from conftest import FIXTURE_WORDS


@pytest.fixture(params=["incremental", "baseline"])
def strategy(request, index):
    return create_solver(request.param, index)


def _step(strategy, game):
    guess = strategy.next_guess(game)
    guess.make_guess(game)
    return guess


def test_cattle(strategy):
    """Step-by-step confirmation of a full game."""
    game = HangmanGame(TEST_WORD, 25)

    # Confirm starting state
    assert game.game_status() == GameStatus.KEEP_GUESSING
    assert game.secret_word_length == len(TEST_WORD)
    assert game.current_score() == 0

    _step(strategy, game)
    assert game.guessed_so_far() == "-----E"

    _step(strategy, game)
    assert game.guessed_so_far() == "-----E"
    assert "I" in game.incorrectly_guessed_letters()

    _step(strategy, game)
    assert game.guessed_so_far() == "-A---E"

    _step(strategy, game)
    assert game.guessed_so_far() == "-A--LE"

    _step(strategy, game)
    assert game.guessed_so_far() == "-A--LE"
    assert "D" in game.incorrectly_guessed_letters()

    _step(strategy, game)
    assert game.guessed_so_far() == "-A--LE"
    assert "R" in game.incorrectly_guessed_letters()

    _step(strategy, game)
    assert game.guessed_so_far() == "-ATTLE"

    _step(strategy, game)
    assert game.guessed_so_far() == "-ATTLE"
    assert "W" in game.incorrectly_guessed_letters()

    last = _step(strategy, game)
    assert last == GuessWord("CATTLE")
    assert game.game_status() == GameStatus.GAME_WON
    assert game.current_score() == 8


def test_first_guess_is_index_letter(index):
    strategy = IncrementalStrategy(index)
    assert strategy.next_guess(HangmanGame("TOXICS", 5)) == GuessLetter(FIRST_GUESS)
    assert strategy.state == StrategyState.AFTER_FIRST
    assert strategy.candidate_count is None


def test_single_candidate_short_circuit():
    strategy = IncrementalStrategy(["cattle", "settle"])
    game = HangmanGame("CATTLE", 5)
    _step(strategy, game)
    guess = strategy.next_guess(game)
    assert guess == GuessWord("CATTLE")
    assert strategy.candidate_count == 1


def test_single_index_letter_rules_out_repeats():
    # SETTLED shares BETTING's bucket (first 'E' at 1) but has a second 'E'
    strategy = IncrementalStrategy(["betting", "letting", "settled"])
    game = HangmanGame("BETTING", 5)
    _step(strategy, game)
    assert game.guessed_so_far() == "-E-----"
    strategy.next_guess(game)
    assert strategy.candidates == frozenset({"BETTING", "LETTING"})


def test_repeated_index_letter_rechecks_positions():
    strategy = IncrementalStrategy(["settle", "mettle", "beetle", "helmet"])
    game = HangmanGame("SETTLE", 5)
    _step(strategy, game)
    assert game.guessed_so_far() == "-E---E"
    guess = strategy.next_guess(game)
    assert strategy.candidates == frozenset({"SETTLE", "METTLE"})
    # 'T' and 'L' both cover two words; the later letter wins
    assert guess == GuessLetter("T")


def test_monotonic_narrowing_keeps_secret(index):
    strategy = IncrementalStrategy(index)
    for word in FIXTURE_WORDS:
        game = HangmanGame(word, 25)
        sizes = []
        while game.game_status() == GameStatus.KEEP_GUESSING:
            _step(strategy, game)
            if strategy.candidates is not None:
                sizes.append(len(strategy.candidates))
                assert word in strategy.candidates
        assert game.game_status() == GameStatus.GAME_WON
        assert sizes == sorted(sizes, reverse=True)


def test_new_game_resets_state(index):
    strategy = IncrementalStrategy(index)
    first = HangmanGame("CATTLE", 25)
    _step(strategy, first)
    _step(strategy, first)
    assert strategy.state == StrategyState.NARROWING

    # a different game starts over with the index letter
    second = HangmanGame("CATTLE", 25)
    assert strategy.next_guess(second) == GuessLetter("E")

    strategy.reset()
    assert strategy.state == StrategyState.FRESH
    assert strategy.candidate_count is None


def test_equivalent_to_baseline(index):
    incremental = create_solver("incremental", index)
    baseline = create_solver("baseline", index)

    compared = 0
    for word in sorted(index.words()):
        base = run_case(baseline, word, max_wrong_guesses=25)
        if base["history"][0][0] != FIRST_GUESS:
            continue
        inc = run_case(incremental, word, max_wrong_guesses=25)
        assert (inc["wrong_guesses"], inc["score"]) == (base["wrong_guesses"], base["score"]), word
        assert inc["history"] == base["history"], word
        compared += 1
    assert compared >= len(FIXTURE_WORDS) // 2


def test_secret_missing_from_dictionary_still_terminates(index):
    # not in the dictionary: the lone candidate guess fails and play goes on
    for strategy in (IncrementalStrategy(index), BaselineStrategy(index)):
        game = HangmanGame("BATTLE", 25)
        play(game, strategy)
        assert game.game_status() in (GameStatus.GAME_WON, GameStatus.GAME_LOST)
        assert "CATTLE" in game.incorrectly_guessed_words() or game.game_status() == GameStatus.GAME_WON


def test_strategies_accept_word_files(words_file):
    for cls in (IncrementalStrategy, BaselineStrategy):
        game = HangmanGame(TEST_WORD, 25)
        assert play(game, cls(str(words_file))) == 8


@pytest.mark.parametrize("cls", [IncrementalStrategy, BaselineStrategy])
def test_strategies_reject_invalid_words_at_load(tmp_path, cls):
    p = tmp_path / "words.txt"
    p.write_text("donut\ndon't\n", encoding="utf-8")
    with pytest.raises(ValueError, match="line 2"):
        cls(str(p))
    with pytest.raises(ValueError):
        cls(["donut", "don't"])


def test_play_returns_score_of_finished_game(index):
    game = HangmanGame("CAT", 5)
    game.guess_word("CAT")
    assert play(game, IncrementalStrategy(index)) == 0


def test_registry():
    assert get_solver_ids() == ["baseline", "incremental"]
    with pytest.raises(ValueError):
        create_solver("nope", ["cattle"])
    with pytest.raises(ValueError):
        BaselineStrategy(None)
    with pytest.raises(ValueError):
        IncrementalStrategy(None)
