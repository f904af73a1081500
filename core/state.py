"""Button identity value types"""
import enum
from dataclasses import dataclass


class ButtonKind(enum.Enum):
    KEYBOARD = "key"
    MOUSE = "mouse"
    CONTROLLER = "controller"


@dataclass(frozen=True)
class Button:
    """A keyboard key, mouse button or controller button.

    `code` is the backend's number for the control (a pygame key code, mouse
    button number or joystick button index). `device` tells controllers apart
    and stays 0 for keyboard and mouse buttons.
    """
    kind: ButtonKind
    code: int
    device: int = 0

    @classmethod
    def keyboard(cls, code: int) -> "Button":
        return cls(ButtonKind.KEYBOARD, int(code))

    @classmethod
    def mouse(cls, code: int) -> "Button":
        return cls(ButtonKind.MOUSE, int(code))

    @classmethod
    def controller(cls, code: int, device: int = 0) -> "Button":
        return cls(ButtonKind.CONTROLLER, int(code), int(device))

    def __str__(self):
        if self.kind is ButtonKind.CONTROLLER:
            return f"controller:{self.device}.{self.code}"
        return f"{self.kind.value}:{self.code}"
