import pytest

from spacefighter.input import (
    Button,
    ButtonState,
    GamePadButtons,
    GamePadDPad,
    GamePadState,
    GamePadThumbSticks,
    GamePadTriggers,
    Key,
    MouseButton,
)
from spacefighter.vector2 import Vector2


def test_new_state_has_all_buttons_up():
    state = GamePadState()
    assert all(state.is_button_up(button) for button in Button)
    assert not any(state.is_button_down(button) for button in Button)


@pytest.mark.parametrize(
    "button, group, name",
    [
        (Button.A, "buttons", "a"),
        (Button.B, "buttons", "b"),
        (Button.X, "buttons", "x"),
        (Button.Y, "buttons", "y"),
        (Button.START, "buttons", "start"),
        (Button.BACK, "buttons", "back"),
        (Button.LEFT_STICK, "buttons", "left_stick"),
        (Button.LEFT_SHOULDER, "buttons", "left_shoulder"),
        (Button.RIGHT_STICK, "buttons", "right_stick"),
        (Button.RIGHT_SHOULDER, "buttons", "right_shoulder"),
        (Button.DPAD_UP, "dpad", "up"),
        (Button.DPAD_DOWN, "dpad", "down"),
        (Button.DPAD_LEFT, "dpad", "left"),
        (Button.DPAD_RIGHT, "dpad", "right"),
    ],
)
def test_each_button_maps_to_its_field(button, group, name):
    state = GamePadState()
    setattr(getattr(state, group), name, ButtonState.PRESSED)
    assert state.is_button_down(button)
    assert not state.is_button_up(button)
    others = [other for other in Button if other is not button]
    assert all(state.is_button_up(other) for other in others)


def test_reset_releases_buttons_and_zeroes_triggers():
    state = GamePadState(
        is_connected=True,
        buttons=GamePadButtons(a=ButtonState.PRESSED, start=ButtonState.PRESSED),
        dpad=GamePadDPad(up=ButtonState.PRESSED),
        triggers=GamePadTriggers(left=0.7, right=0.3),
        thumbsticks=GamePadThumbSticks(left=Vector2(0.5, -0.5)),
    )
    state.reset()
    assert all(state.is_button_up(button) for button in Button)
    assert state.triggers == GamePadTriggers(0.0, 0.0)
    assert state.is_connected is True
    assert state.thumbsticks.left == Vector2(0.5, -0.5)


@pytest.mark.parametrize(
    "value, name",
    [
        (1, "A"),
        (47, "F1"),
        (59, "ESCAPE"),
        (76, "INSERT"),
        (86, "PAD_SLASH"),
        (92, "PRINTSCREEN"),
        (215, "LSHIFT"),
    ],
)
def test_key_values_follow_source_numbering(value, name):
    assert Key(value).name == name


def test_key_ranges_are_contiguous():
    letters = [Key(value) for value in range(1, 27)]
    assert [key.name for key in letters] == [chr(code) for code in range(ord("A"), ord("Z") + 1)]
    digits = [Key(value) for value in range(27, 37)]
    assert [key.name for key in digits] == [f"NUM_{n}" for n in range(10)]
    pads = [Key(value) for value in range(37, 47)]
    assert [key.name for key in pads] == [f"PAD_{n}" for n in range(10)]
    assert Key(int(Key.CAPSLOCK) + 1).name == "MAX"


def test_mouse_buttons_start_at_one():
    assert [MouseButton(value) for value in range(1, 6)] == list(MouseButton)
    assert MouseButton(1) is MouseButton.LEFT