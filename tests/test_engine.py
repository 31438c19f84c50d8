import pytest
from packages.engine import GameState, is_spellable, next_score, normalize


# --- spellability is multiset containment ---
@pytest.mark.parametrize("candidate,root,expected", [
    ("silk", "silkworm", True),
    ("worm", "silkworm", True),
    ("worms", "silkworm", True),      # 's' is the root's first letter
    ("milk", "silkworm", True),
    ("silkk", "silkworm", False),     # only one 'k'
    ("words", "silkworm", False),     # no 'd'
    ("swims", "silkworm", False),     # only one 's'
    ("", "silkworm", True),
    ("abc", "", False),
    ("dab", "keyboard", True),
    ("kebab", "keyboard", False),     # only one 'b'
])
def test_is_spellable(candidate, root, expected):
    assert is_spellable(candidate, root) is expected


@pytest.mark.parametrize("raw,expected", [
    ("  Silk\n", "silk"),
    ("WORM", "worm"),
    ("wok", "wok"),
    ("\tMi Lk ", "mi lk"),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected
    # normalizing twice changes nothing
    assert normalize(normalize(raw)) == normalize(raw)


def test_next_score_recurrence():
    assert next_score(0, "silk") == 2          # (0+1)*4//2
    assert next_score(2, "worms") == 7         # (2+1)*5//2
    assert next_score(0, "wok") == 1           # (0+1)*3//2 truncates


def test_record_accepted_word_prepends_and_scores():
    st = GameState()
    st.reset("silkworm")
    assert st.record_accepted_word("silk") == 2
    assert st.record_accepted_word("worms") == 7
    assert st.used_words == ["worms", "silk"]
    assert st.score == 7
    assert not st.is_original("silk") and st.is_original("milk")


def test_reset_clears_and_is_repeatable():
    st = GameState()
    st.reset("SilkWorm ")
    st.record_accepted_word("silk")
    st.reset("keyboard")
    assert (st.root_word, st.used_words, st.score) == ("keyboard", [], 0)
    st.reset("painters")
    assert (st.root_word, st.used_words, st.score) == ("painters", [], 0)
