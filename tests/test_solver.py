import threading

from packages.engine import build_neighbors
from packages.solver import LadderSolver, model, solve


def test_solve_finds_ladder(ladder_words):
    r = solve("HEAD", " tail", build_neighbors(frozenset(ladder_words)))
    assert r.ok and r.error is None
    assert r.path[0] == "head" and r.path[-1] == "tail"
    assert r.steps == 5


def test_solve_reports_errors(ladder_words):
    nb = build_neighbors(frozenset(ladder_words))
    r = solve("head", "xxxx", nb)
    assert not r.ok and r.error == "'xxxx' is not in the dictionary"
    r = solve("head", "zinc", nb)
    assert r.error == "No path exists between 'head' and 'zinc'"


def test_solve_same_word(ladder_words):
    r = solve("head", "head", build_neighbors(frozenset(ladder_words)))
    assert r.path == ["head"] and r.steps == 0


def test_solve_depth_cap(ladder_words):
    r = solve("head", "tail", build_neighbors(frozenset(ladder_words)), max_depth=3)
    assert not r.ok


def test_ladder_solver_publishes_result(golf_words):
    with LadderSolver(words=golf_words) as s:
        res = s.find_path("cold", "warm").result(timeout=10)
        assert res.ok
        assert s.found_path == res.path
        assert s.error_message is None
        assert s.is_searching is False


def test_ladder_solver_error(golf_words):
    with LadderSolver(words=golf_words) as s:
        res = s.find_path("cold", "nope").result(timeout=10)
        assert not res.ok
        assert s.error_message == "'nope' is not in the dictionary"
        assert s.found_path is None


def test_superseded_search_never_publishes(golf_words):
    with LadderSolver(words=golf_words) as s:
        stale_gen = s.generation + 1
        s.find_path("cold", "warm").result(timeout=10)
        newest = s.find_path("cold", "corn").result(timeout=10)
        # A late finisher from an older generation is discarded.
        assert s._run(stale_gen, "cold", "warm") is None
        assert s.found_path == newest.path == ["cold", "cord", "corn"]


def test_reset_clears_state(golf_words):
    with LadderSolver(words=golf_words) as s:
        s.find_path("cold", "warm").result(timeout=10)
        s.reset()
        assert s.found_path is None and s.error_message is None
        assert not s.is_searching


def test_ladder_solver_missing_wordlist(tmp_path):
    with LadderSolver(source=tmp_path / "missing.txt") as s:
        assert s.error_message == "Error loading dictionary"
        res = s.find_path("cold", "warm").result(timeout=10)
        assert not res.ok


def test_running_search_is_superseded(golf_words, monkeypatch):
    started = threading.Event()
    release = threading.Event()
    real_solve = model.solve

    def held_solve(start, end, neighbors, max_depth=None, should_stop=None):
        if (start, end) == ("cold", "warm"):
            started.set()
            release.wait(10)
        return real_solve(start, end, neighbors, max_depth=max_depth, should_stop=should_stop)

    monkeypatch.setattr(model, "solve", held_solve)

    with LadderSolver(words=golf_words) as s:
        first = s.find_path("cold", "warm")
        assert started.wait(10)
        second = s.find_path("cold", "corn")
        assert s.is_searching
        release.set()

        assert first.result(timeout=10) is None
        newest = second.result(timeout=10)
        assert newest.path == ["cold", "cord", "corn"]
        assert s.found_path == newest.path
        assert s.error_message is None
        assert not s.is_searching
