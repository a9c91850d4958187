import pytest
from packages.engine import InvalidArgumentError
from packages.harness import run_case, run_batch, select_secrets, summarize

RULES = dict(colors="RGBYOP", code_pegs=4, allow_duplicates=True)

def test_run_case_smoke():
    r = run_case("OPYB", **RULES)
    assert r["success"] is True
    assert r["history"][-1] == ("OPYB", 4, 0)
    assert r["guesses"] == len(r["history"])
    assert r["final_candidates"] >= 1

def test_run_case_first_guess_wins():
    r = run_case("RRRR", **RULES)
    assert r["success"] is True and r["guesses"] == 1

def test_run_case_turn_budget():
    r = run_case("OPYB", **RULES, max_turns=1)
    assert r["success"] is False
    assert r["guesses"] == 1
    assert r["history"][0][0] == "RRRR"

def test_run_case_rejects_invalid_secret():
    with pytest.raises(InvalidArgumentError):
        run_case("RRBY", colors="RGBY", code_pegs=4, allow_duplicates=False)

def test_run_batch_solves_every_code():
    results = run_batch(colors="RGB", code_pegs=2, allow_duplicates=True)
    assert [r["secret"] for r in results] == ["RR", "RG", "RB", "GR", "GG", "GB", "BR", "BG", "BB"]
    assert all(r["success"] for r in results)

    s = summarize(results)
    assert s["num_cases"] == 9
    assert s["success_rate"] == 1.0
    assert s["histogram"][1] == 1
    assert sum(s["histogram"].values()) == 9
    assert s["max_guesses"] == max(r["guesses"] for r in results)

def test_select_secrets_sample_is_seeded():
    a = select_secrets(**RULES, sample=5, seed=1)
    b = select_secrets(**RULES, sample=5, seed=1)
    assert a == b and len(a) == 5
    assert len(select_secrets(colors="RGB", code_pegs=2, allow_duplicates=False, sample=50)) == 6

def test_summarize_counts_failures():
    results = [
        {"secret": "RG", "success": True, "guesses": 2},
        {"secret": "GR", "success": False, "guesses": 3},
    ]
    s = summarize(results)
    assert s["success_rate"] == 0.5
    assert s["mean_guesses"] == 2.5
    assert s["histogram"] == {2: 1}

def test_summarize_empty():
    assert summarize([])["num_cases"] == 0
