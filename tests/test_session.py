import io
import random

import pytest
from apps.cli.play import play
from packages.datasets import RootWordSource
from packages.engine import RejectionKind
from packages.game import GameSession, describe
from packages.lexicon import WordListChecker


@pytest.fixture
def session():
    src = RootWordSource(["silkworm"], rng=random.Random(0))
    checker = WordListChecker.from_words(["silk", "wok", "worms", "milk"])
    return GameSession(src, checker)


def test_end_to_end_silkworm(session):
    assert session.restart() == "silkworm"
    first = session.submit("wok")
    assert first.accepted and first.score == 1
    again = session.submit("wok")
    assert again.kind is RejectionKind.ALREADY_USED
    assert session.used_words == ["wok"] and session.score == 1


def test_restart_clears_progress(session):
    session.restart()
    session.submit("silk")
    session.submit("worms")
    assert session.score == 7
    session.restart()
    assert session.used_words == [] and session.score == 0
    # words from the previous game are fresh again
    assert session.submit("silk").accepted


def test_used_words_is_a_copy(session):
    session.restart()
    session.submit("silk")
    session.used_words.append("junk")
    assert session.used_words == ["silk"]


def test_describe_distinct_titles(session):
    session.restart()
    outcomes = [
        session.submit("ok"),
        session.submit("silk"),
        session.submit("silk"),
        session.submit("words"),
        session.submit("mirk"),
    ]
    titles = [describe(o, session.root_word)[0] for o in outcomes]
    assert titles == ["Not a valid word", "Nice!", "Word used already",
                      "Word not possible", "Word is not real"]
    assert describe(outcomes[0], "silkworm")[1].endswith("SILKWORM")
    assert describe(outcomes[4], "silkworm")[1] == "mirk is not a real word in english!"


def test_play_loop(session):
    inp = io.StringIO("silk\n\nSILK\n:restart\nworms\n:quit\nmilk\n")
    out = io.StringIO()
    score = play(session, inp=inp, out=out)
    text = out.getvalue()
    assert "== SILKWORM ==" in text
    assert "Word used already: Be more original!" in text
    assert "(5) worms" in text
    assert score == 2  # restart wiped 'silk'; 'worms' scores (0+1)*5//2; 'milk' after quit is ignored
    assert text.rstrip().endswith("Final score: 2")
