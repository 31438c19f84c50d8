import pytest
from packages.engine import Accepted, GameState, Rejected, RejectionKind, submit_word
from packages.lexicon import BaseChecker, CheckerError, WordListChecker

WORDS = ["silk", "milk", "worm", "worms", "wok", "work", "silkworm", "ilk", "sk", "words", "silkk"]


@pytest.fixture
def state():
    st = GameState()
    st.reset("silkworm")
    return st


@pytest.fixture
def checker():
    return WordListChecker.from_words(WORDS)


class BrokenChecker(BaseChecker):
    id = "broken"  # not registered

    def is_known_word(self, word, language="en"):
        raise CheckerError("dictionary unavailable")


class RecordingChecker(BaseChecker):
    def __init__(self, answer=True):
        self.answer = answer
        self.calls = []

    def is_known_word(self, word, language="en"):
        self.calls.append((word, language))
        return self.answer


@pytest.mark.parametrize("raw", ["", "a", "ok", "sk", "  ik  ", "silkworm", "SILKWORM", " SilkWorm\n"])
def test_too_short_or_same_as_root(state, checker, raw):
    out = submit_word(state, raw, checker)
    assert isinstance(out, Rejected)
    assert out.kind is RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT
    assert out.accepted is False
    assert state.used_words == [] and state.score == 0


def test_accept_then_already_used(state, checker):
    first = submit_word(state, "wok", checker)
    assert first == Accepted(word="wok", score=1)
    assert first.accepted is True

    again = submit_word(state, "  WOK ", checker)
    assert again == Rejected(word="wok", kind=RejectionKind.ALREADY_USED)
    assert state.used_words == ["wok"] and state.score == 1


@pytest.mark.parametrize("raw", ["silkk", "words", "swims", "dog"])
def test_not_spellable(state, checker, raw):
    assert submit_word(state, raw, checker).kind is RejectionKind.NOT_SPELLABLE_FROM_ROOT


def test_not_a_real_word(state, checker):
    out = submit_word(state, "mirk", checker)  # spellable but not in the list
    assert out == Rejected(word="mirk", kind=RejectionKind.NOT_A_REAL_WORD)


def test_checker_failure_fails_closed(state):
    out = submit_word(state, "silk", BrokenChecker())
    assert out.kind is RejectionKind.NOT_A_REAL_WORD
    assert state.used_words == []


def test_check_order_short_before_dictionary(state):
    rec = RecordingChecker(answer=False)
    # too short AND unknown: the length check wins and the checker is never asked
    assert submit_word(state, "zz", rec).kind is RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT
    # unspellable AND unknown: spellability wins
    assert submit_word(state, "zzz", rec).kind is RejectionKind.NOT_SPELLABLE_FROM_ROOT
    assert rec.calls == []


def test_check_order_used_before_spellable(checker):
    st = GameState()
    st.reset("silkworm")
    st.used_words = ["dogs"]  # pretend an earlier root allowed it
    assert submit_word(st, "dogs", checker).kind is RejectionKind.ALREADY_USED


def test_language_passed_to_checker(state):
    rec = RecordingChecker(answer=True)
    submit_word(state, "Silk", rec, language="en")
    assert rec.calls == [("silk", "en")]


def test_score_sequence(state, checker):
    assert submit_word(state, "silk", checker).score == 2
    assert submit_word(state, "worms", checker).score == 7
    assert state.used_words == ["worms", "silk"]
