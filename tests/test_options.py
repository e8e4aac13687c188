import pytest

from justcore.options import UseColor, Verbosity


@pytest.mark.parametrize(
    ("occurrences", "expected"),
    [
        (0, Verbosity.TACITURN),
        (1, Verbosity.LOQUACIOUS),
        (2, Verbosity.GRANDILOQUENT),
        (10, Verbosity.GRANDILOQUENT),
    ],
)
def test_from_flag_occurrences(occurrences, expected):
    assert Verbosity.from_flag_occurrences(occurrences) is expected


def test_loud_is_not_quiet():
    assert Verbosity.QUIET.loud() is False
    assert Verbosity.TACITURN.loud() is True
    assert Verbosity.LOQUACIOUS.loud() is True
    assert Verbosity.GRANDILOQUENT.loud() is True


def test_only_quiet_is_quiet():
    assert Verbosity.QUIET.quiet() is True
    assert Verbosity.TACITURN.quiet() is False
    assert Verbosity.LOQUACIOUS.quiet() is False
    assert Verbosity.GRANDILOQUENT.quiet() is False


def test_loquacious_levels():
    assert Verbosity.QUIET.loquacious() is False
    assert Verbosity.TACITURN.loquacious() is False
    assert Verbosity.LOQUACIOUS.loquacious() is True
    assert Verbosity.GRANDILOQUENT.loquacious() is True


def test_grandiloquent_levels():
    assert Verbosity.QUIET.grandiloquent() is False
    assert Verbosity.TACITURN.grandiloquent() is False
    assert Verbosity.LOQUACIOUS.grandiloquent() is False
    assert Verbosity.GRANDILOQUENT.grandiloquent() is True


def test_default_flag_count_is_loud_but_not_loquacious():
    verbosity = Verbosity.from_flag_occurrences(0)
    assert verbosity.loud() is True
    assert verbosity.loquacious() is False


def test_many_flags_are_grandiloquent_and_loquacious():
    verbosity = Verbosity.from_flag_occurrences(3)
    assert verbosity.grandiloquent() is True
    assert verbosity.loquacious() is True


@pytest.mark.parametrize("color", list(UseColor))
def test_use_color_round_trips_through_value(color):
    assert UseColor(color.value) is color


def test_use_color_unknown_value_rejected():
    with pytest.raises(ValueError):
        UseColor("sometimes")