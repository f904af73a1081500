"""Action bindings: load YAML profiles and query actions against a ButtonController"""
import logging
from typing import Dict, List

import pygame
import yaml

from core.state import Button

LOG = logging.getLogger("buttoncontroller.bindings")


class BindingError(ValueError):
    pass


def _key_code(name: str) -> int:
    """Resolve 'space', 'a', 'RETURN' or a raw code like '32' to a pygame key code.

    Names are looked up before raw codes, so '1' is the digit key K_1 (49).
    """
    for attr in ("K_" + name, "K_" + name.upper(), "K_" + name.lower()):
        code = getattr(pygame, attr, None)
        if isinstance(code, int):
            return code
    try:
        return int(name)
    except ValueError:
        raise BindingError(f"unknown key name: {name!r}") from None


def parse_button(text: str) -> Button:
    """Parse an input like 'key:space', 'mouse:1', 'controller:3' or 'controller:1.3'."""
    if not isinstance(text, str) or ":" not in text:
        raise BindingError(f"malformed input: {text!r}")
    prefix, value = (part.strip() for part in text.split(":", 1))
    if not value:
        raise BindingError(f"malformed input: {text!r}")
    try:
        if prefix == "key":
            return Button.keyboard(_key_code(value))
        if prefix == "mouse":
            return Button.mouse(int(value))
        if prefix == "controller":
            if "." in value:
                device, code = value.split(".", 1)
                return Button.controller(int(code), int(device))
            return Button.controller(int(value))
    except BindingError:
        raise
    except ValueError:
        raise BindingError(f"malformed input: {text!r}") from None
    raise BindingError(f"unknown input type {prefix!r} in {text!r}")


class Bindings:
    """Maps action names to the buttons that trigger them.

    Profile format:
        bindings:
          - action: jump
            inputs: ["key:space", "controller:0.0"]
          - action: fire
            input: "mouse:1"
    """

    def __init__(self, profile: dict):
        self.profile = profile or {}
        if not isinstance(self.profile, dict):
            raise BindingError(f"profile must be a mapping, got {self.profile!r}")
        self._actions: Dict[str, List[Button]] = {}
        for b in self.profile.get("bindings", []) or []:
            if not isinstance(b, dict):
                raise BindingError(f"binding must be a mapping, got {b!r}")
            action = b.get("action")
            src = b.get("input")
            src_list = b.get("inputs", [src] if src else [])
            if isinstance(src_list, str):
                src_list = [src_list]
            if not action or not src_list:
                LOG.debug("skipping incomplete binding: %s", b)
                continue
            buttons = self._actions.setdefault(action, [])
            for item in src_list:
                button = parse_button(item)
                if button not in buttons:
                    buttons.append(button)
            LOG.debug("bound %s -> %s", action, ", ".join(str(x) for x in buttons))

    @classmethod
    def load_profile(cls, path: str):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(data)

    def actions(self) -> List[str]:
        return list(self._actions)

    def buttons_for(self, action: str) -> List[Button]:
        return list(self._actions[action])

    # An action is down while any of its buttons is down.

    def pressed(self, controller, action: str) -> bool:
        return any(controller.current_pressed(b) for b in self._actions[action])

    def last_pressed(self, controller, action: str) -> bool:
        return any(controller.last_pressed(b) for b in self._actions[action])

    def just_pressed(self, controller, action: str) -> bool:
        return not self.last_pressed(controller, action) and self.pressed(controller, action)

    def just_released(self, controller, action: str) -> bool:
        return self.last_pressed(controller, action) and not self.pressed(controller, action)
