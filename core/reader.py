"""Base button event source abstraction"""
import abc
import logging

LOG = logging.getLogger("buttoncontroller.source")


class ButtonSource(abc.ABC):
    """Delivers `(button, pressed)` notifications to subscribers."""

    def __init__(self):
        self._subs = []

    @abc.abstractmethod
    def start(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop(self):
        raise NotImplementedError

    def subscribe(self, callback):
        self._subs.append(callback)

    def attach(self, controller):
        """Register every notification on a ButtonController."""
        def on_button(button, pressed):
            if pressed:
                controller.register_press(button)
            else:
                controller.register_release(button)

        self.subscribe(on_button)
        return on_button

    def _emit(self, button, pressed):
        for cb in self._subs:
            try:
                cb(button, pressed)
            except Exception:
                LOG.exception("subscriber callback failed")
