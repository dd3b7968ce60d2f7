import json
import threading

import pytest
from packages.engine import is_ladder
from packages.game import (
    DifficultyLevel,
    GameSession,
    JsonFileStorage,
    MemoryStorage,
    SessionState,
)
from packages.game.session import (
    MSG_FINISHED,
    MSG_IN_CHAIN,
    MSG_NO_WORDS,
    MSG_NOT_A_WORD,
    MSG_ONE_LETTER,
)
from packages.game.storage import DIFFICULTY_KEY


@pytest.fixture
def session(golf_words):
    s = GameSession(words=golf_words, storage=MemoryStorage(), seed=7)
    s.play("cold", "warm")
    return s


def test_play_sets_up_pair(session):
    assert session.chain == ["cold", "warm"]
    assert session.current_word == "cold" and session.target_word == "warm"
    assert session.optimal_steps == 3
    assert session.user_steps == 0
    assert session.can_flip and not session.can_undo
    assert session.state is SessionState.IN_PROGRESS


def test_play_rejects_unknown_word(session):
    session.play("cold", "xyzw")
    assert "not in the dictionary" in session.status_message
    assert session.chain == ["cold", "warm"]


def test_unknown_guess_leaves_chain(session):
    session.submit_word("xyzw")
    assert session.chain == ["cold", "warm"]
    assert session.status_message == MSG_NOT_A_WORD


def test_illegal_change_rejected(session):
    session.current_input = "card"
    session.submit_word()
    assert session.chain == ["cold", "warm"]
    assert session.status_message == MSG_ONE_LETTER
    assert session.current_input == ""


def test_duplicate_rejected(session):
    session.submit_word("cold")
    assert session.status_message == MSG_IN_CHAIN
    session.submit_word("cord")
    session.submit_word("CORD ")
    assert session.status_message == MSG_IN_CHAIN
    assert session.chain == ["cold", "cord", "warm"]


def test_target_jump_needs_one_letter(session):
    session.submit_word("warm")
    assert not session.won
    assert session.status_message == MSG_ONE_LETTER


def test_target_after_progress_rejected(session):
    session.submit_word("cord")
    session.submit_word("warm")
    assert not session.won
    assert session.status_message == MSG_IN_CHAIN
    assert session.chain == ["cold", "cord", "warm"]


def test_direct_target_wins_on_adjacent_pair(golf_words):
    s = GameSession(words=golf_words, seed=1)
    s.play("cold", "bold")
    s.submit_word("bold")
    assert s.won and not s.gave_up
    assert s.chain == ["cold", "bold"]


def test_full_game_wins(session):
    for w in ["cord", "word", "worm"]:
        session.submit_word(w)
    assert session.won
    assert session.chain == ["cold", "cord", "word", "worm", "warm"]
    assert session.user_steps == 3
    assert session.status_message == ""
    assert session.state is SessionState.WON
    assert not session.can_undo and not session.can_hint

    session.submit_word("ward")
    assert session.status_message == MSG_FINISHED
    assert len(session.chain) == 5


def test_undo(session):
    session.undo()
    assert session.chain == ["cold", "warm"]
    session.submit_word("cord")
    session.submit_word("card")
    session.undo()
    assert session.chain == ["cold", "cord", "warm"]
    session.undo()
    assert session.chain == ["cold", "warm"]


def test_flip_before_progress(session):
    session.flip_direction()
    assert session.chain == ["warm", "cold"]
    assert session.current_word == "warm" and session.target_word == "cold"
    assert session.optimal_path[0] == "warm" and session.optimal_path[-1] == "cold"
    assert session.optimal_steps == 3


def test_flip_after_progress_is_noop(session):
    session.submit_word("cord")
    before = (list(session.chain), session.current_word, session.target_word)
    session.flip_direction()
    assert (session.chain, session.current_word, session.target_word) == before


def test_two_distinct_hints(session):
    h1 = session.get_hint()
    h2 = session.get_hint()
    assert h1 and h2 and h1 != h2
    for h in (h1, h2):
        assert h not in ("cold", "warm")
        assert h in session.optimal_path[1:-1]
    assert session.hints == [h1, h2]
    assert session.hints_used == 2
    assert not session.can_hint
    assert session.get_hint() is None


def test_hints_skip_words_in_chain(session):
    interior = session.optimal_path[1:-1]
    session.submit_word(interior[0])
    for _ in range(2):
        h = session.get_hint()
        assert h is None or h not in session.chain


def test_give_up(session):
    session.give_up()
    assert session.won and session.gave_up
    assert session.state is SessionState.GAVE_UP
    session.new_challenge()
    assert not session.won and not session.gave_up
    assert len(session.chain) == 2


def test_new_challenge_resets_state(session):
    session.submit_word("cord")
    session.get_hint()
    session.submit_word("nope")
    session.new_challenge(DifficultyLevel.THREE)
    assert len(session.chain) == 2
    assert session.hints == [] and session.hints_used == 0
    assert session.status_message == ""
    assert session.difficulty is DifficultyLevel.THREE


@pytest.mark.parametrize("seed", range(5))
def test_new_challenge_respects_difficulty(line_words, seed):
    s = GameSession(words=line_words, seed=seed)
    s.new_challenge(4)
    assert s.optimal_steps <= 4
    assert s.chain == [s.current_word, s.target_word]


def test_set_difficulty_persists(golf_words):
    store = MemoryStorage()
    s = GameSession(words=golf_words, storage=store, seed=0)
    s.set_difficulty(DifficultyLevel.SIX)
    assert store.level is DifficultyLevel.SIX and store.saves == 1

    s2 = GameSession(words=golf_words, storage=store, seed=0)
    assert s2.difficulty is DifficultyLevel.SIX


def test_set_difficulty_unknown_value(session):
    session.set_difficulty(9)
    assert "Unknown difficulty" in session.status_message
    assert session.chain == ["cold", "warm"]


def test_observers_notified_once_per_operation(session):
    calls = []
    unsubscribe = session.subscribe(lambda s: calls.append(list(s.chain)))
    session.submit_word("cord")
    session.set_difficulty(DifficultyLevel.UNLIMITED)
    assert len(calls) == 2
    assert calls[0] == ["cold", "cord", "warm"]
    unsubscribe()
    session.undo()
    assert len(calls) == 2


def test_missing_wordlist_gives_empty_session(tmp_path):
    s = GameSession(source=tmp_path / "missing.txt", seed=0)
    assert s.chain == []
    assert s.status_message == MSG_NO_WORDS
    s.submit_word("cold")
    assert s.status_message == MSG_NOT_A_WORD
    assert s.get_hint() is None
    s.flip_direction()
    s.undo()
    assert s.chain == []


def test_load_dictionary_replaces_words(session, tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("bold\ncold\n", encoding="utf-8")
    session.load_dictionary(p)
    assert sorted(session.chain) == ["bold", "cold"]
    assert session.optimal_steps == 0


def test_isolated_dictionary_is_playable_but_trivial():
    s = GameSession(words=["abcd", "wxyz"], seed=0)
    assert s.chain == ["abcd", "abcd"]
    assert s.optimal_path == ["abcd"]


def test_snapshot(session):
    snap = session.snapshot()
    assert snap["chain"] == ["cold", "warm"]
    assert snap["state"] == "InProgress"
    assert snap["can_flip"] is True
    assert snap["difficulty"] == 4


# --- difficulty + storage ---

def test_difficulty_levels():
    assert DifficultyLevel.FOUR.max_steps == 4
    assert DifficultyLevel.UNLIMITED.max_steps == float("inf")
    assert DifficultyLevel.UNLIMITED.display_name == "Unlimited"
    assert DifficultyLevel.THREE.display_name == "3 Steps"
    assert DifficultyLevel.from_value(100) is DifficultyLevel.UNLIMITED
    assert DifficultyLevel.from_value("unlimited") is DifficultyLevel.UNLIMITED
    assert DifficultyLevel.from_value("5") is DifficultyLevel.FIVE
    assert DifficultyLevel.from_value(0) is None
    assert DifficultyLevel.from_value("hard") is None
    assert DifficultyLevel.from_value(4.0) is DifficultyLevel.FOUR
    assert DifficultyLevel.from_value(4.7) is None
    assert DifficultyLevel.from_value(True) is None


def test_json_storage_roundtrip(tmp_path):
    p = tmp_path / "cfg" / "settings.json"
    store = JsonFileStorage(p)
    assert store.load_difficulty() is None
    store.save_difficulty(DifficultyLevel.UNLIMITED)
    assert json.loads(p.read_text(encoding="utf-8")) == {DIFFICULTY_KEY: 100}
    assert JsonFileStorage(p).load_difficulty() is DifficultyLevel.UNLIMITED


def test_json_storage_ignores_corrupt_file(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text("{not json", encoding="utf-8")
    assert JsonFileStorage(p).load_difficulty() is None


def test_json_storage_env_override(tmp_path, monkeypatch):
    p = tmp_path / "env.json"
    monkeypatch.setenv("WORDGOLF_SETTINGS", str(p))
    JsonFileStorage().save_difficulty(DifficultyLevel.TWO)
    assert json.loads(p.read_text(encoding="utf-8"))[DIFFICULTY_KEY] == 2


def test_failing_observer_does_not_break_operation(session):
    later = []

    def broken(s):
        raise RuntimeError("render failed")

    session.subscribe(broken)
    session.subscribe(lambda s: later.append(list(s.chain)))
    session.submit_word("cord")
    assert session.chain == ["cold", "cord", "warm"]
    assert later == [["cold", "cord", "warm"]]


def test_concurrent_operations_keep_chain_consistent(session):
    moves = ["cord", "bold", "card", "word", "corn", "ward", "worm", "nope"]
    barrier = threading.Barrier(6)

    def worker(i):
        barrier.wait()
        for k in range(40):
            op = (i + k) % 4
            if op == 0:
                session.submit_word(moves[(i * 3 + k) % len(moves)])
            elif op == 1:
                session.undo()
            elif op == 2:
                session.get_hint()
            else:
                session.submit_word(moves[k % len(moves)])

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    chain = session.chain
    assert chain[0] == "cold" and chain[-1] == "warm"
    assert len(chain) == len(set(chain))
    assert is_ladder(chain[:-1])
    assert session.hints_used <= 2
    assert len(session.hints) == len(set(session.hints)) == session.hints_used
