import pytest

from askflow import callbacks as cb


def test_is_true():
    condition = cb.is_true("ok")
    assert condition({"ok": "true"}) is True
    assert condition({"ok": "false"}) is False
    assert condition({}) is False


def test_is_false():
    condition = cb.is_false("ok")
    assert condition({"ok": "false"}) is True
    assert condition({"ok": "true"}) is False
    assert condition({}) is True


def test_is_true_rejects_non_boolean():
    with pytest.raises(ValueError, match="Expected a boolean"):
        cb.is_true("ok")({"ok": "maybe"})


def test_is_false_rejects_non_boolean():
    with pytest.raises(ValueError, match="Expected a boolean"):
        cb.is_false("ok")({"ok": "y"})


def test_is_empty():
    condition = cb.is_empty("name")
    assert condition({"name": ""}) is True
    assert condition({"name": "x"}) is False
    assert condition({}) is True


def test_is_not_empty():
    condition = cb.is_not_empty("name")
    assert condition({"name": "x"}) is True
    assert condition({"name": ""}) is False
    assert condition({}) is False


def test_is_equal():
    condition = cb.is_equal("license", "gpl")
    assert condition({"license": "gpl"}) is True
    assert condition({"license": "mit"}) is False
    assert condition({}) is False


def test_is_not_equal():
    condition = cb.is_not_equal("license", "gpl")
    assert condition({"license": "mit"}) is True
    assert condition({"license": "gpl"}) is False
    assert condition({}) is True


def test_is_one_of():
    condition = cb.is_one_of("license", ["gpl", "unlicense"])
    assert condition({"license": "gpl"}) is True
    assert condition({"license": "unlicense"}) is True
    assert condition({"license": "mit"}) is False
    assert condition({}) is False


def test_is_none_of():
    condition = cb.is_none_of("license", ["gpl", "unlicense"])
    assert condition({"license": "mit"}) is True
    assert condition({"license": "gpl"}) is False
    assert condition({}) is True


def test_is_one_of_accepts_generator_once():
    condition = cb.is_one_of("k", (v for v in ["a", "b"]))
    assert condition({"k": "b"}) is True
    assert condition({"k": "b"}) is True


@pytest.mark.parametrize(
    "positive,negative",
    [
        (cb.is_empty("k"), cb.is_not_empty("k")),
        (cb.is_equal("k", "a"), cb.is_not_equal("k", "a")),
        (cb.is_one_of("k", ["a", "b"]), cb.is_none_of("k", ["a", "b"])),
    ],
)
@pytest.mark.parametrize("answers", [{}, {"k": ""}, {"k": "a"}, {"k": "z"}])
def test_pairs_are_complements(positive, negative, answers):
    assert positive(answers) != negative(answers)
    assert positive(answers) is not negative(answers)