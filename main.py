import sys
import random
import logging
import argparse
import pygame
from config import W, H, FPS
from core import reset_round, step
from aim import begin_aim, update_aim, release_aim, cancel_aim
from ui import RESTART_RECT, draw_scene

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"


def configure_logging(level="INFO"):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="penalty-kick", description="Drag from the ball to shoot a penalty.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the keeper's randomness for repeatable rounds")
    parser.add_argument("--fps", type=int, default=FPS, help=f"Frame cap (default {FPS}, 0 = unlimited)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def finger_pos(e):
    # finger events carry coordinates normalised to the window
    return e.x * W, e.y * H


def press(state, pos, restart):
    if state.restart_visible and RESTART_RECT.collidepoint(pos):
        restart()
    else:
        begin_aim(state, pos)


def handle_event(state, e, restart):
    """Route one pointer or key event into the round.

    Mouse events that SDL synthesises from touches are skipped; the finger
    events for the same gesture are handled instead.
    """
    if e.type == pygame.KEYDOWN:
        if e.key in (pygame.K_r, pygame.K_SPACE) and state.restart_visible:
            restart()

    elif e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
        if getattr(e, "touch", False):
            return
        if e.type == pygame.MOUSEMOTION:
            update_aim(state, e.pos)
        elif e.button != 1:
            return
        elif e.type == pygame.MOUSEBUTTONDOWN:
            press(state, e.pos, restart)
        else:
            release_aim(state)

    elif e.type == pygame.FINGERDOWN:
        press(state, finger_pos(e), restart)

    elif e.type == pygame.FINGERMOTION:
        update_aim(state, finger_pos(e))

    elif e.type == pygame.FINGERUP:
        release_aim(state)

    elif e.type == pygame.WINDOWLEAVE:
        cancel_aim(state)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Penalty Kick")

    clock = pygame.time.Clock()
    font = pygame.font.SysFont("segoeui,arial", 25, bold=True)
    small = pygame.font.SysFont("consolas", 13)

    rng = random.Random(args.seed)
    state = reset_round(rng=rng)
    log.info("starting, seed=%s fps=%d", args.seed, args.fps)

    show_debug = False
    hover_restart = False

    def restart():
        reset_round(state, rng)

    running = True
    while running:
        clock.tick(max(0, args.fps))

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F3:
                show_debug = not show_debug
            else:
                if e.type == pygame.MOUSEMOTION:
                    hover_restart = RESTART_RECT.collidepoint(e.pos)
                handle_event(state, e, restart)

        step(state, pygame.time.get_ticks())

        draw_scene(screen, (font, small), state, clock.get_fps(), show_debug, hover_restart)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
