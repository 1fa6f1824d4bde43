import asyncio
from unittest.mock import patch

import pytest
from packages.datasets import load_word_pool
from packages.engine import Accepted, Rejected, RejectionReason
from packages.oracle import WordListOracle, OracleError
from packages.session import GameSession, EmptyPoolError

WORDS = ["silent", "listen", "tinsel", "enlist", "tin", "ten", "net", "lit", "crane", "care"]


def _session(root: str = "listen") -> GameSession:
    s = GameSession(WordListOracle(WORDS), seed=42)
    s.start_new_round([root])
    return s


def test_accept_then_repeat_is_not_original():
    s = _session()
    r = s.submit("silent")
    assert r == Accepted("silent", ("silent",))
    assert s.used_words[0] == "silent"
    assert s.submit("silent") == Rejected(RejectionReason.NOT_ORIGINAL)


def test_accepted_words_are_most_recent_first():
    s = _session()
    s.submit("tin")
    r = s.submit("net")
    assert r.used_words == ("net", "tin")
    assert s.used_words == ("net", "tin")


@pytest.mark.parametrize("raw,reason", [
    ("", RejectionReason.INVALID),
    ("   \n", RejectionReason.INVALID),
    ("ti", RejectionReason.TOO_SHORT),
    ("zzz", RejectionReason.NOT_POSSIBLE),
    ("lll", RejectionReason.NOT_POSSIBLE),
    ("sile", RejectionReason.NOT_REAL),
])
def test_rejection_never_mutates_used_words(raw, reason):
    s = _session()
    s.submit("tin")
    before = s.used_words
    assert s.submit(raw) == Rejected(reason)
    assert s.used_words == before


@pytest.mark.parametrize("variant", [" Silent ", "SILENT", "silent\n"])
def test_normalized_variants_are_the_same_word(variant):
    s = _session()
    assert s.submit("silent").ok
    assert s.submit(variant) == Rejected(RejectionReason.NOT_ORIGINAL)


def test_normalized_word_is_recorded():
    s = _session()
    assert s.submit("  TINSEL ") == Accepted("tinsel", ("tinsel",))


def test_root_word_itself_is_accepted():
    s = _session("listen")
    assert s.submit("listen") == Accepted("listen", ("listen",))


def test_start_new_round_clears_used_words():
    s = _session()
    s.submit("silent")
    root = s.start_new_round(["crane", "listen"])
    assert root in ("crane", "listen")
    assert s.root_word == root
    assert s.used_words == ()
    assert s.pending is None


def test_start_new_round_draws_from_pool():
    s = GameSession(WordListOracle(WORDS), seed=1)
    pool = ["crane", "listen", "tinsel"]
    seen = {s.start_new_round(pool) for _ in range(50)}
    assert seen <= set(pool)
    assert len(seen) > 1


def test_start_new_round_lowercases_root():
    s = GameSession(WordListOracle(WORDS))
    assert s.start_new_round(["Listen\n"]) == "listen"


@pytest.mark.parametrize("pool", [[], ["", "  "]])
def test_empty_pool_raises(pool):
    s = GameSession(WordListOracle(WORDS))
    with pytest.raises(EmptyPoolError):
        s.start_new_round(pool)


def test_empty_pool_keeps_previous_round():
    s = _session()
    s.submit("tin")
    with pytest.raises(EmptyPoolError):
        s.start_new_round([])
    assert s.root_word == "listen" and s.used_words == ("tin",)


def test_submit_before_round_is_an_error():
    s = GameSession(WordListOracle(WORDS))
    with pytest.raises(RuntimeError):
        s.submit("silent")


class BrokenOracle:
    def is_real_word(self, word, language):
        raise OracleError("dictionary offline")


def test_oracle_failure_maps_to_unknown():
    s = GameSession(BrokenOracle())
    s.start_new_round(["listen"])
    r = s.submit("silent")
    assert r == Rejected(RejectionReason.UNKNOWN)
    assert r.alert(s.root_word) == ("Sorry", "Something went wrong!")
    assert s.used_words == ()
    assert s.pending is None


def test_oracle_not_called_for_cheap_rejections():
    s = GameSession(BrokenOracle())
    s.start_new_round(["listen"])
    assert s.submit("zzz") == Rejected(RejectionReason.NOT_POSSIBLE)


# --- async submissions ---

def test_submit_async_accepts_and_rejects():
    s = _session()
    assert asyncio.run(s.submit_async("silent")) == Accepted("silent", ("silent",))
    assert asyncio.run(s.submit_async("Silent")) == Rejected(RejectionReason.NOT_ORIGINAL)
    assert asyncio.run(s.submit_async("sile")) == Rejected(RejectionReason.NOT_REAL)


def test_submit_async_maps_oracle_failure():
    s = GameSession(BrokenOracle())
    s.start_new_round(["listen"])
    assert asyncio.run(s.submit_async("silent")) == Rejected(RejectionReason.UNKNOWN)


class SlowOracle:
    def __init__(self):
        self.started = None

    def is_real_word(self, word, language):
        return True

    async def is_real_word_async(self, word, language):
        self.started.set()
        await asyncio.sleep(3600)
        return True


def test_cancelled_submission_leaves_state_untouched():
    oracle = SlowOracle()
    s = GameSession(oracle)
    s.start_new_round(["listen"])

    async def scenario():
        oracle.started = asyncio.Event()
        task = asyncio.create_task(s.submit_async("silent"))
        await oracle.started.wait()
        assert s.pending == "silent"
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert s.used_words == ()
    assert s.pending is None


# --- errors outside the dictionary are not masked ---

def test_local_check_error_propagates():
    s = _session()
    s.submit("tin")
    with patch("packages.session.game.precheck", side_effect=ValueError("bad letter table")):
        with pytest.raises(ValueError, match="bad letter table"):
            s.submit("silent")
    assert s.used_words == ("tin",)
    assert s.pending is None


def test_local_check_error_propagates_async():
    s = _session()
    with patch("packages.session.game.precheck", side_effect=TypeError("bad argument")):
        with pytest.raises(TypeError):
            asyncio.run(s.submit_async("silent"))
    assert s.used_words == ()
    assert s.pending is None


# --- bundled data ---

@pytest.mark.parametrize("root,words", [
    ("absolute", ["slot", "tube", "bolt", "lust", "table", "salute"]),
    ("airplane", ["plain", "lair", "plane", "pearl", "alpine"]),
    ("listen", ["silent", "tin", "tie", "lens"]),
])
def test_bundled_dictionary_accepts_sub_words(root, words):
    if root != "listen":
        assert root in load_word_pool()
    s = GameSession(WordListOracle())
    s.start_new_round([root])
    for w in words:
        assert s.submit(w).ok, w
    assert s.used_words == tuple(reversed(words))
