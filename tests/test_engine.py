import pytest
from packages.engine import score, filter_candidates, generate_codes, count_codes, is_valid_code
from packages.engine.validation import parse_colors, parse_count, parse_yes_no

# --- golden scores (duplicates + placements) ---
@pytest.mark.parametrize("candidate,guess,expected", [
    ("RGBY", "RGBY", (4, 0)),
    ("RGBY", "GRYB", (0, 4)),
    ("RGBY", "OOPP", (0, 0)),
    ("RRGG", "RGRB", (1, 2)),
    ("RRRR", "RGBY", (1, 0)),
    ("RGBY", "RRRR", (1, 0)),
    ("AABB", "BBAA", (0, 4)),
    ("ABCD", "ABDC", (2, 2)),
    ("AAB", "ABA", (1, 2)),
])
def test_score_golden(candidate, guess, expected):
    assert score(candidate, guess) == expected

def test_score_fields():
    fb = score("RRGG", "RGRB")
    assert fb.black == 1 and fb.white == 2

def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("RGB", "RGBY")

def test_score_properties_over_space():
    codes = generate_codes("RGBY", 3, True)
    for c in codes:
        assert score(c, c) == (3, 0)
    for c in codes[::7]:
        for g in codes[::5]:
            black, white = score(c, g)
            assert black + white <= 3
            assert score(c, g) == score(g, c)

# --- generation ---
def test_generate_codes_order_with_duplicates():
    assert generate_codes("RGB", 2, True) == ["RR", "RG", "RB", "GR", "GG", "GB", "BR", "BG", "BB"]

def test_generate_codes_order_without_duplicates():
    assert generate_codes("RGB", 2, False) == ["RG", "RB", "GR", "GB", "BR", "BG"]

def test_generate_codes_follows_alphabet_order():
    assert generate_codes("BGR", 1, False) == ["B", "G", "R"]

@pytest.mark.parametrize("colors,pegs,dup,expected", [
    ("RGBYOP", 4, True, 1296),
    ("RGBYOP", 4, False, 360),
    ("RGBY", 4, False, 24),
    ("RGB", 4, False, 0),
    ("R", 3, True, 1),
])
def test_count_matches_generation(colors, pegs, dup, expected):
    assert count_codes(len(colors), pegs, dup) == expected
    assert len(generate_codes(colors, pegs, dup)) == expected

def test_is_valid_code():
    assert is_valid_code("RGBY", "RGBYOP", 4, False) is True
    assert is_valid_code("RRBY", "RGBYOP", 4, False) is False
    assert is_valid_code("RRBY", "RGBYOP", 4, True) is True
    assert is_valid_code("RGB", "RGBYOP", 4, True) is False
    assert is_valid_code("RGBX", "RGBYOP", 4, True) is False

# --- filtering ---
def test_filter_candidates_single_round():
    codes = generate_codes("RGB", 2, True)
    assert filter_candidates(codes, [("RG", (1, 0))]) == ["RR", "RB", "GG", "BG"]

def test_filter_candidates_history():
    codes = generate_codes("RGBY", 4, False)
    history = [("RGBY", (0, 4)), ("GRYB", (2, 2))]
    cand = filter_candidates(codes, history)
    assert "GRBY" not in cand  # (2, 2) vs RGBY, not (0, 4)
    assert "BYRG" not in cand  # all-white vs RGBY but (0, 4) vs GRYB
    assert "GYRB" in cand
    assert all(score(c, "GRYB") == (2, 2) for c in cand)
    assert cand == sorted(cand, key=codes.index)

def test_filter_candidates_empty_history_keeps_all():
    codes = generate_codes("RG", 2, True)
    assert filter_candidates(codes, []) == codes

# --- console input parsing ---
@pytest.mark.parametrize("text,expected", [
    ("rgby", "RGBY"),
    (" R G B ", "RGB"),
    ("   ", None),
    ("", None),
])
def test_parse_colors(text, expected):
    assert parse_colors(text) == expected

def test_parse_count():
    assert parse_count("3") == 3
    assert parse_count(" 0 ") == 0
    assert parse_count("-1") is None
    assert parse_count("two") is None
    assert parse_count("0", minimum=1) is None

def test_parse_yes_no():
    assert parse_yes_no("y") is True
    assert parse_yes_no("Yes") is True
    assert parse_yes_no("N") is False
    assert parse_yes_no("maybe") is None
