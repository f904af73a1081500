import pygame
import pytest

from bindings import BindingError, Bindings, parse_button
from core.controller import ButtonController
from core.state import Button


def test_parse_button_forms():
    assert parse_button("key:space") == Button.keyboard(pygame.K_SPACE)
    assert parse_button("key:a") == Button.keyboard(pygame.K_a)
    assert parse_button("key:return") == Button.keyboard(pygame.K_RETURN)
    assert parse_button("key:1073741906") == Button.keyboard(1073741906)
    assert parse_button("mouse:1") == Button.mouse(1)
    assert parse_button("controller:3") == Button.controller(3)
    assert parse_button("controller:1.3") == Button.controller(3, device=1)


@pytest.mark.parametrize("text", ["space", "key:", "key:nosuchkey", "mouse:left", "controller:a.1", "pedal:1", None])
def test_parse_button_rejects_bad_inputs(text):
    with pytest.raises(BindingError):
        parse_button(text)


def test_load_profile(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text(
        "bindings:\n"
        "  - action: jump\n"
        "    inputs: [\"key:space\", \"controller:0.0\"]\n"
        "  - action: fire\n"
        "    input: \"mouse:1\"\n"
        "  - input: \"key:x\"\n",
        encoding="utf-8",
    )
    b = Bindings.load_profile(str(path))

    assert b.actions() == ["jump", "fire"]
    assert b.buttons_for("jump") == [Button.keyboard(pygame.K_SPACE), Button.controller(0)]
    assert b.buttons_for("fire") == [Button.mouse(1)]
    with pytest.raises(KeyError):
        b.buttons_for("missing")


def test_malformed_input_in_profile_raises():
    with pytest.raises(BindingError):
        Bindings({"bindings": [{"action": "jump", "input": "key:nosuchkey"}]})


def test_empty_profile():
    assert Bindings(None).actions() == []
    assert Bindings({"bindings": None}).actions() == []


def test_action_edges_across_bound_buttons():
    space = Button.keyboard(pygame.K_SPACE)
    pad = Button.controller(0)
    b = Bindings({"bindings": [{"action": "jump", "inputs": ["key:space", "controller:0"]}]})
    c = ButtonController()

    c.register_press(space)
    assert b.just_pressed(c, "jump")
    c.update()

    # second input while the first is held does not re-trigger
    c.register_press(pad)
    assert b.pressed(c, "jump")
    assert not b.just_pressed(c, "jump")
    c.update()

    c.register_release(space)
    assert not b.just_released(c, "jump")
    c.update()

    c.register_release(pad)
    assert b.just_released(c, "jump")
    assert not b.pressed(c, "jump")
    c.update()
    assert not b.last_pressed(c, "jump")


def test_example_profile_loads():
    import pathlib
    path = pathlib.Path(__file__).resolve().parent.parent / "profiles" / "example.yaml"
    b = Bindings.load_profile(str(path))
    assert b.actions() == ["jump", "fire", "pause"]
    assert Button.keyboard(pygame.K_ESCAPE) in b.buttons_for("pause")


def test_digit_key_name_resolves_to_digit_key():
    assert parse_button("key:1") == Button.keyboard(pygame.K_1)


@pytest.mark.parametrize("profile, fragment", [
    ({"bindings": ["key:space"]}, "'key:space'"),
    (["x"], "['x']"),
])
def test_profile_shape_errors_name_the_entry(profile, fragment):
    with pytest.raises(BindingError) as exc:
        Bindings(profile)
    assert fragment in str(exc.value)


def test_inputs_given_as_single_string():
    b = Bindings({"bindings": [{"action": "jump", "inputs": "key:space"}]})
    assert b.buttons_for("jump") == [Button.keyboard(pygame.K_SPACE)]
