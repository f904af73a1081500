"""Button events from a pygame event queue

Translates keyboard, mouse and joystick button events into `Button`
notifications. pygame only delivers events to the thread that owns the window,
so `PygameButtonSource` is polled from the application's frame loop instead of
running its own reader thread.
"""
import logging
from typing import Iterable, List, Optional, Tuple

import pygame

from core.reader import ButtonSource
from core.state import Button

LOG = logging.getLogger("buttoncontroller.pygame")

_PRESS_TYPES = {
    pygame.KEYDOWN: True,
    pygame.KEYUP: False,
    pygame.MOUSEBUTTONDOWN: True,
    pygame.MOUSEBUTTONUP: False,
    pygame.JOYBUTTONDOWN: True,
    pygame.JOYBUTTONUP: False,
}


def translate_event(event) -> Optional[Tuple[Button, bool]]:
    """Return `(button, pressed)` for a button event, None for anything else."""
    pressed = _PRESS_TYPES.get(event.type)
    if pressed is None:
        return None
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        return Button.keyboard(event.key), pressed
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        return Button.mouse(event.button), pressed
    device = getattr(event, "instance_id", None)
    if device is None:
        device = getattr(event, "joy", 0)
    return Button.controller(event.button, device), pressed


class PygameButtonSource(ButtonSource):
    """Feeds pygame button events to subscribers.

    Usage:
        source = PygameButtonSource()
        source.attach(controller)
        source.start()
        while running:
            for event in source.poll():
                if event.type == pygame.QUIT:
                    running = False
            ...
            controller.update()
    """

    def __init__(self):
        super().__init__()
        self._joysticks = {}
        self._started = False

    def start(self):
        pygame.init()
        pygame.joystick.init()
        for i in range(pygame.joystick.get_count()):
            self._open_joystick(i)
        if not self._joysticks:
            LOG.info("no joysticks attached; keyboard and mouse only")
        self._started = True
        LOG.info("pygame button source started")

    def stop(self):
        if not self._started:
            return
        self._joysticks.clear()
        pygame.joystick.quit()
        self._started = False
        LOG.info("pygame button source stopped")

    def _open_joystick(self, index):
        js = pygame.joystick.Joystick(index)
        # pygame posts JOYDEVICEADDED at init for joysticks already opened by start()
        if js.get_instance_id() in self._joysticks:
            return
        js.init()
        self._joysticks[js.get_instance_id()] = js
        LOG.info(f"Found joystick: {js.get_name()} (index {index}, instance {js.get_instance_id()}, buttons={js.get_numbuttons()})")

    def poll(self, events: Optional[Iterable] = None) -> List:
        """Emit notifications for pending button events.

        Drains the pygame queue unless `events` is given. Returns the events
        that were not button events, in order.
        """
        if events is None:
            events = pygame.event.get()
        rest = []
        for event in events:
            translated = translate_event(event)
            if translated is None:
                if event.type == pygame.JOYDEVICEADDED and self._started:
                    self._open_joystick(event.device_index)
                elif event.type == pygame.JOYDEVICEREMOVED:
                    js = self._joysticks.pop(event.instance_id, None)
                    if js is not None:
                        js.quit()
                        LOG.warning("joystick %d removed", event.instance_id)
                rest.append(event)
                continue
            self._emit(*translated)
        return rest
