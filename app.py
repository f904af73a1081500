"""Entry point for the buttoncontroller demo

Opens a pygame window, feeds its button events into a ButtonController and logs
per-frame transitions, either for every button or for the actions of a profile.
"""
import argparse
import logging

import pygame

from bindings import Bindings
from core.controller import ButtonController
from devices.pygame_events import PygameButtonSource

LOG = logging.getLogger("buttoncontroller")


def report_frame(controller, bindings, seen):
    """Log this frame's transitions. Returns the names that changed."""
    changed = []
    if bindings is not None:
        for action in bindings.actions():
            if bindings.just_pressed(controller, action):
                LOG.info("action %s pressed", action)
                changed.append(action)
            elif bindings.just_released(controller, action):
                LOG.info("action %s released", action)
                changed.append(action)
        return changed
    for button in seen:
        if controller.just_pressed(button):
            LOG.info("%s pressed", button)
            changed.append(str(button))
        elif controller.just_released(button):
            LOG.info("%s released", button)
            changed.append(str(button))
    return changed


def run(controller, source, bindings=None, hz=60, frames=None):
    """Frame loop: poll events, report transitions, advance the snapshot."""
    clock = pygame.time.Clock()
    seen = set()
    source.subscribe(lambda button, pressed: seen.add(button))
    count = 0
    while frames is None or count < frames:
        for event in source.poll():
            if event.type == pygame.QUIT:
                LOG.info("window closed")
                return count
        report_frame(controller, bindings, seen)
        controller.update()
        clock.tick(hz)
        count += 1
    return count


def main():
    parser = argparse.ArgumentParser(description="buttoncontroller: log button transitions per frame")
    parser.add_argument("--profile", help="YAML action profile (logs raw buttons when omitted)")
    parser.add_argument("--hz", type=int, default=60, help="frame rate")
    parser.add_argument("--size", type=int, nargs=2, default=[320, 240], metavar=("W", "H"),
                        help="window size (default: 320 240)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'core', 'pygame', 'bindings')")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    for module in args.debug_modules:
        logging.getLogger(f"buttoncontroller.{module}").setLevel(logging.DEBUG)

    bindings = Bindings.load_profile(args.profile) if args.profile else None
    controller = ButtonController()
    source = PygameButtonSource()
    source.attach(controller)

    try:
        source.start()
        pygame.display.set_mode(tuple(args.size))
        pygame.display.set_caption("buttoncontroller")
        LOG.info("buttoncontroller running, close the window or press Ctrl+C to stop")
        run(controller, source, bindings, hz=args.hz)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        source.stop()
        pygame.quit()


if __name__ == "__main__":
    main()
