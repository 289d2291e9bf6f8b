from cmdscore.utils.normalization import (
    GAP_CHARACTERS,
    count_gaps,
    count_spaces,
    fold_char,
    format_input,
    is_gap,
    is_space,
)


def test_format_input_lowercases_and_unifies_spaces():
    assert format_input("Auto-Advance") == "auto advance"
    assert format_input("Go\tTo\nFile") == "go to file"


def test_format_input_keeps_length():
    samples = ["", "  double  spaces ", "no go — Windows", "İstanbul", "ß-Straße", "a b"]
    for s in samples:
        assert len(format_input(s)) == len(s)


def test_format_input_does_not_trim_or_collapse():
    assert format_input("  A  B ") == "  a  b "


def test_format_input_leaves_punctuation_alone():
    assert format_input("info@cue.org.uk") == "info@cue.org.uk"
    assert format_input("a_b/c") == "a_b/c"
    # only the ASCII hyphen counts as a space; the em dash is kept
    assert format_input("—") == "—"


def test_fold_char_single_code_point():
    assert fold_char("A") == "a"
    assert fold_char("İ") == "i"
    assert fold_char("1") == "1"


def test_gap_characters():
    for ch in '\\/_+.#"@[({&':
        assert is_gap(ch)
    assert len(GAP_CHARACTERS) == 12
    assert not is_gap("-")
    assert not is_gap(" ")
    assert not is_gap(")")


def test_space_characters():
    assert is_space(" ")
    assert is_space("\t")
    assert is_space("\u00a0")
    assert not is_space("-")


def test_counts():
    assert count_gaps("Unversity/Societies/CUE/info@cue") == 4
    assert count_spaces("hello kind world") == 2
    assert count_gaps("") == 0
    assert count_spaces("") == 0


def test_case_folding_ignores_locale():
    assert format_input("TITLE") == "title"
    assert fold_char("I") == "i"
