import math
import random
import logging
from dataclasses import dataclass
from typing import Optional

from config import (
    W, H, GOAL, KICK_SPOT, BALL_R, KEEPER_Y_OFFSET, KEEPER_W, KEEPER_H, KEEPER_SPAN,
    DECAY, STALL_SPEED, EXIT_MARGIN, BLOCK_MARGIN_X, BLOCK_MARGIN_Y, RESTART_DELAY_MS,
)
import keeper as keeper_ai

log = logging.getLogger(__name__)

GOAL_RESULT = "GOAL"
SAVED = "SAVED"
MISSED = "MISSED"

MESSAGES = {
    GOAL_RESULT: "GOAL!!",
    SAVED: "Saved!",
    MISSED: "Missed!",
}


@dataclass
class Ball:
    x: float
    y: float
    r: float = BALL_R


@dataclass
class Keeper:
    x: float
    y: float
    w: float = KEEPER_W
    h: float = KEEPER_H
    dir: str = "center"
    speed: float = 1.2


@dataclass
class Shot:
    vx: float
    vy: float
    resolved: bool = False

    def speed(self):
        return math.hypot(self.vx, self.vy)


@dataclass
class Drag:
    x: float
    y: float


@dataclass
class RoundState:
    ball: Ball
    keeper: Keeper
    drag: Optional[Drag] = None
    shot: Optional[Shot] = None
    kicking: bool = False
    scored: bool = False
    outcome: Optional[str] = None
    message: str = ""
    restart_visible: bool = False
    restart_at: Optional[int] = None
    rounds: int = 0

    @property
    def resolved(self):
        return self.outcome is not None

    @property
    def phase(self):
        if self.outcome is not None:
            return "resolved"
        if self.kicking:
            return "flight"
        return "idle"


def clamp(v, a, b):
    return max(a, min(b, v))


def new_keeper(rng=None, goal=GOAL):
    rng = rng or random
    gx, gy, gw, _ = goal
    return Keeper(
        x=gx + rng.random() * gw * KEEPER_SPAN,
        y=gy + KEEPER_Y_OFFSET,
        dir=keeper_ai.pick_dive(rng),
        speed=keeper_ai.pick_speed(rng),
    )


def reset_round(state: Optional[RoundState] = None, rng=None) -> RoundState:
    rng = rng or random
    ball = Ball(*KICK_SPOT)
    goalie = new_keeper(rng)
    if state is None:
        state = RoundState(ball=ball, keeper=goalie)
    else:
        state.ball = ball
        state.keeper = goalie
        state.drag = None
        state.shot = None
        state.kicking = False
        state.scored = False
        state.outcome = None
        state.message = ""
        state.restart_visible = False
        # a deadline left over from the previous round must not fire in this one
        state.restart_at = None
    state.rounds += 1
    log.debug("round %d: keeper x=%.1f dir=%s speed=%.2f",
              state.rounds, goalie.x, goalie.dir, goalie.speed)
    return state


def in_posts(ball: Ball, goal=GOAL):
    gx, _, gw, _ = goal
    return gx + ball.r < ball.x < gx + gw - ball.r


def is_blocked(ball: Ball, goalie: Keeper):
    half = goalie.w / 2
    return (goalie.x - half - BLOCK_MARGIN_X <= ball.x <= goalie.x + half + BLOCK_MARGIN_X
            and ball.y <= goalie.y + goalie.h + BLOCK_MARGIN_Y)


def resolve_outcome(ball: Ball, goal, goalie: Keeper) -> str:
    blocked = is_blocked(ball, goalie)
    if in_posts(ball, goal) and not blocked:
        return GOAL_RESULT
    if blocked:
        return SAVED
    return MISSED


def apply_outcome(state: RoundState, outcome: str, now_ms: int):
    state.outcome = outcome
    state.scored = outcome == GOAL_RESULT
    state.message = MESSAGES[outcome]
    state.restart_at = now_ms + RESTART_DELAY_MS
    if state.shot is not None:
        state.shot.resolved = True
    log.info("round %d: %s at x=%.1f y=%.1f (keeper x=%.1f)",
             state.rounds, outcome, state.ball.x, state.ball.y, state.keeper.x)


def crossed_goal_line(ball: Ball, goal=GOAL):
    _, gy, _, gh = goal
    return ball.y < gy + gh


def left_field(ball: Ball, goal=GOAL):
    _, gy, _, _ = goal
    return ball.y < gy - EXIT_MARGIN or ball.x < 0 or ball.x > W or ball.y > H


def rest_y(ball: Ball, shot: Shot):
    # geometric sum of the remaining per-tick displacements
    return ball.y + shot.vy / (1 - DECAY)


def can_reach_line(ball: Ball, shot: Shot, goal=GOAL):
    _, gy, _, gh = goal
    return shot.vy < 0 and rest_y(ball, shot) < gy + gh


def is_dead_ball(ball: Ball, shot: Shot, goal=GOAL):
    return shot.speed() < STALL_SPEED and not can_reach_line(ball, shot, goal)


def tick_restart(state: RoundState, now_ms: int):
    if state.restart_at is not None and now_ms >= state.restart_at:
        state.restart_visible = True
        state.restart_at = None


def step(state: RoundState, now_ms: int):
    tick_restart(state, now_ms)
    shot = state.shot
    if not state.kicking or shot is None:
        return

    ball = state.ball
    ball.x += shot.vx
    ball.y += shot.vy
    shot.vx *= DECAY
    shot.vy *= DECAY

    if not shot.resolved:
        keeper_ai.react(state.keeper, ball, shot)

    if not shot.resolved and crossed_goal_line(ball):
        apply_outcome(state, resolve_outcome(ball, GOAL, state.keeper), now_ms)

    if left_field(ball):
        if not shot.resolved:
            apply_outcome(state, MISSED, now_ms)
        state.kicking = False
        state.drag = None
        state.shot = None
    elif not shot.resolved and is_dead_ball(ball, shot):
        log.debug("round %d: ball stalled short of the goal line", state.rounds)
        apply_outcome(state, MISSED, now_ms)
        state.kicking = False
        state.shot = None
