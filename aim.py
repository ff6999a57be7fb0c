import math
import logging
from config import AIM_CAPTURE_MARGIN, AIM_MIN_DIST, AIM_MAX_DIST, POWER_DIV, GAIN_X, GAIN_Y
from core import Drag, Shot, RoundState, clamp

log = logging.getLogger(__name__)


def drag_distance(state: RoundState):
    d = state.drag
    if d is None:
        return 0.0
    return math.hypot(d.x - state.ball.x, d.y - state.ball.y)


def shot_power(distance):
    return clamp(distance, AIM_MIN_DIST, AIM_MAX_DIST) / POWER_DIV


def power_fraction(state: RoundState):
    return min(AIM_MAX_DIST, drag_distance(state)) / AIM_MAX_DIST


def begin_aim(state: RoundState, pos) -> bool:
    if state.kicking or state.resolved:
        return False
    x, y = pos
    ball = state.ball
    if math.hypot(x - ball.x, y - ball.y) >= ball.r + AIM_CAPTURE_MARGIN:
        return False
    state.drag = Drag(x, y)
    return True


def update_aim(state: RoundState, pos):
    if state.drag is None:
        return
    state.drag.x, state.drag.y = pos


def release_aim(state: RoundState):
    d = state.drag
    if d is None:
        return None
    dx = d.x - state.ball.x
    dy = d.y - state.ball.y
    angle = math.atan2(dy, dx)
    power = shot_power(math.hypot(dx, dy))
    # pulling down sends the ball up the pitch; horizontal aim is not mirrored
    shot = Shot(
        vx=math.cos(angle) * power * GAIN_X,
        vy=-math.sin(angle) * power * GAIN_Y,
    )
    state.shot = shot
    state.kicking = True
    state.drag = None
    log.debug("round %d: shot vx=%.2f vy=%.2f power=%.2f",
              state.rounds, shot.vx, shot.vy, power)
    return shot


def cancel_aim(state: RoundState):
    state.drag = None
