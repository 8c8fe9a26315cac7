import pytest

from quadsandbox.keymap import Action, Input, Key


@pytest.mark.parametrize("key", [Key.Q, Key.ESCAPE])
def test_quit_keys(key):
    assert Input().is_action_pressed(Action.QUIT, {key}) is True


def test_unrelated_key_does_not_quit():
    assert Input().is_action_pressed(Action.QUIT, {Key.A, Key.LEFT}) is False


@pytest.mark.parametrize("action", list(Action))
def test_nothing_pressed(action):
    assert Input().is_action_pressed(action, set()) is False


@pytest.mark.parametrize("action", list(Action))
def test_every_action_has_a_key(action):
    assert Input().is_action_pressed(action, set(Key)) is True


@pytest.mark.parametrize(
    ("action", "key"),
    [
        (Action.LEFT, Key.A),
        (Action.RIGHT, Key.RIGHT),
        (Action.UP, Key.W),
        (Action.DOWN, Key.DOWN),
        (Action.ZOOM_IN, Key.RIGHT_BRACKET),
        (Action.ZOOM_OUT, Key.LEFT_BRACKET),
    ],
)
def test_default_bindings(action, key):
    assert Input().is_action_pressed(action, [key]) is True


def test_zoom_keys_are_distinct():
    keys = Input()
    assert keys.is_action_pressed(Action.ZOOM_IN, {Key.LEFT_BRACKET}) is False
    assert keys.is_action_pressed(Action.ZOOM_OUT, {Key.RIGHT_BRACKET}) is False


def test_unbound_action_is_never_pressed():
    keys = Input({Action.QUIT: [Key.Q]})
    assert keys.is_action_pressed(Action.LEFT, set(Key)) is False
    assert keys.is_action_pressed(Action.QUIT, {Key.Q}) is True