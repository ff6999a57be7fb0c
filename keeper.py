import random
from config import (
    GOAL, KEEPER_SPEED, KEEPER_DIVE_LEFT_P, KEEPER_DIVE_CENTER_P,
    KEEPER_LOOKAHEAD, KEEPER_EASE, KEEPER_DEADZONE,
)

DIVES = ("left", "center", "right")


def pick_dive(rng=None):
    # 40% left, then an even split of the rest: 30% center, 30% right
    rng = rng or random
    if rng.random() < KEEPER_DIVE_LEFT_P:
        return "left"
    if rng.random() < KEEPER_DIVE_CENTER_P:
        return "center"
    return "right"


def pick_speed(rng=None):
    rng = rng or random
    return rng.uniform(*KEEPER_SPEED)


def dive_limits(keeper, goal=GOAL):
    gx, _, gw, _ = goal
    half = keeper.w / 2
    return gx + half, gx + gw - half


def predict_landing_x(ball, shot):
    return ball.x + shot.vx * KEEPER_LOOKAHEAD


def react(keeper, ball, shot, goal=GOAL):
    """Move the keeper one tick toward where it has committed to dive.

    Left and right dives run at constant speed and stop at the post; a keeper
    that stayed central eases toward a short look-ahead of the ball instead.
    """
    left, right = dive_limits(keeper, goal)
    if keeper.dir == "left":
        if keeper.x > left:
            keeper.x = max(left, keeper.x - keeper.speed)
    elif keeper.dir == "right":
        if keeper.x < right:
            keeper.x = min(right, keeper.x + keeper.speed)
    else:
        target_x = predict_landing_x(ball, shot)
        gap = target_x - keeper.x
        if abs(gap) > KEEPER_DEADZONE:
            keeper.x += gap * KEEPER_EASE
