"""Update-loop friendly button state tracking

`ButtonController` consumes press/release notifications from any source (most
commonly a window event loop) and keeps two generations of state: the current
one and a snapshot taken at the last `update()`. Comparing the two tells an
update loop whether a button was just pressed, just released or held.

Typical frame:

    for button, pressed in notifications:
        if pressed:
            controller.register_press(button)
        else:
            controller.register_release(button)
    if controller.just_pressed(jump):
        ...
    controller.update()
"""
import logging
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Mapping, TypeVar

LOG = logging.getLogger("buttoncontroller.core")

K = TypeVar("K", bound=Hashable)


class ButtonController(Generic[K]):
    """Tracks pressed/released state per button across update cycles.

    Buttons are any hashable value. A button that was never registered reads
    as not pressed. Entries are created on first notification and kept for the
    lifetime of the controller.
    """

    def __init__(self):
        self._current: Dict[K, bool] = {}
        self._last: Dict[K, bool] = {}

    @property
    def current_state(self) -> Mapping[K, bool]:
        return MappingProxyType(self._current)

    @property
    def last_state(self) -> Mapping[K, bool]:
        return MappingProxyType(self._last)

    def update(self) -> None:
        """Copy the current state into the last known state.

        Call once per update cycle. Keys are never removed from the snapshot.
        """
        self._last.update(self._current)

    def register_press(self, button: K) -> None:
        """Track that a button is currently pressed."""
        LOG.debug("press %s", button)
        self._current[button] = True

    def register_release(self, button: K) -> None:
        """Track that a button is currently not pressed."""
        LOG.debug("release %s", button)
        self._current[button] = False

    def current_pressed(self, button: K) -> bool:
        """Whether the button is pressed as of the current update."""
        return self._current.get(button, False)

    def last_pressed(self, button: K) -> bool:
        """Whether the button was pressed as of the last update."""
        return self._last.get(button, False)

    def pressed_state_transition(self, button: K, last_expected: bool, current_expected: bool) -> bool:
        """Check a combination of press state across the last and current update.

        `(False, True)` means the button was just pressed, `(True, False)` that
        it was just released.
        """
        return (self.last_pressed(button) == last_expected
                and self.current_pressed(button) == current_expected)

    def just_pressed(self, button: K) -> bool:
        """Released at the last update, pressed now."""
        return self.pressed_state_transition(button, False, True)

    def just_released(self, button: K) -> bool:
        """Pressed at the last update, released now."""
        return self.pressed_state_transition(button, True, False)

    def held(self, button: K) -> bool:
        """Pressed at the last update and still pressed."""
        return self.pressed_state_transition(button, True, True)

    def copy(self) -> "ButtonController[K]":
        clone = type(self)()
        clone._current = dict(self._current)
        clone._last = dict(self._last)
        return clone

    def __repr__(self):
        pressed = [str(b) for b, st in self._current.items() if st]
        return f"ButtonController(pressed=[{', '.join(pressed)}])"
