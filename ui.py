import math
import pygame
from config import (
    W, H, BG, TURF_STRIPE, WHITE, NET, POST, GRAY, YELLOW, METER, METER_EDGE,
    KEEPER_KIT, KEEPER_SKIN, KEEPER_ARM, BALL_PATCH, GOAL, POST_W, PROMPT,
)
from aim import power_fraction

RESTART_RECT = pygame.Rect(W // 2 - 70, H // 2 - 22, 140, 44)


def draw_pitch(surf):
    surf.fill(BG)
    for i in range(0, H, 60):
        if (i // 60) % 2:
            pygame.draw.rect(surf, TURF_STRIPE, (0, i, W, 60))


def draw_goal(surf):
    gx, gy, gw, gh = GOAL
    pygame.draw.rect(surf, NET, (gx, gy, gw, gh))
    for x in range(gx + 10, gx + gw, 10):
        pygame.draw.line(surf, POST, (x, gy), (x, gy + gh), 1)
    pygame.draw.rect(surf, POST, (gx - POST_W, gy - 2, POST_W, gh + 18))
    pygame.draw.rect(surf, POST, (gx + gw, gy - 2, POST_W, gh + 18))
    pygame.draw.rect(surf, POST, (gx - 10, gy - 8, gw + 20, 8))


def draw_keeper(surf, keeper):
    x, y, w, h = keeper.x, keeper.y, keeper.w, keeper.h
    body = pygame.Rect(0, 0, int(w), int(h))
    body.center = (int(x), int(y + h / 2))
    pygame.draw.ellipse(surf, KEEPER_KIT, body)
    pygame.draw.circle(surf, KEEPER_SKIN, (int(x), int(y + 2)), 8)
    if keeper.dir == "left":
        pygame.draw.line(surf, KEEPER_ARM, (x - 15, y + h / 2), (x - w / 2 - 10, y - 14), 7)
    elif keeper.dir == "right":
        pygame.draw.line(surf, KEEPER_ARM, (x + 15, y + h / 2), (x + w / 2 + 10, y - 14), 7)


def draw_ball(surf, ball):
    shadow = pygame.Surface((int(ball.r * 2), int(ball.r * 2)), pygame.SRCALPHA)
    pygame.draw.circle(shadow, (50, 45, 34, 40), (int(ball.r), int(ball.r)), int(ball.r * 0.7))
    surf.blit(shadow, (ball.x - ball.r, ball.y))
    pygame.draw.circle(surf, WHITE, (int(ball.x), int(ball.y)), int(ball.r))
    pygame.draw.circle(surf, BALL_PATCH, (int(ball.x - 8), int(ball.y + 2)), 3)
    pygame.draw.circle(surf, BALL_PATCH, (int(ball.x + 4), int(ball.y - 7)), 3)


def draw_dashed_line(surf, color, start, end, width=3, dash=4, gap=5):
    x1, y1 = start
    x2, y2 = end
    length = math.hypot(x2 - x1, y2 - y1)
    if length < 1:
        return
    ux, uy = (x2 - x1) / length, (y2 - y1) / length
    d = 0.0
    while d < length:
        e = min(length, d + dash)
        pygame.draw.line(surf, color, (x1 + ux * d, y1 + uy * d), (x1 + ux * e, y1 + uy * e), width)
        d = e + gap


def draw_aim(surf, state):
    drag = state.drag
    if drag is None:
        return
    ball = state.ball
    draw_dashed_line(surf, YELLOW, (ball.x, ball.y), (drag.x, drag.y))
    dx, dy = drag.x - ball.x, drag.y - ball.y
    ang = math.atan2(dy, dx)
    tip_len = 16
    tx, ty = ball.x + dx * 0.6, ball.y + dy * 0.6
    for a in (ang - math.pi / 8, ang + math.pi / 8):
        pygame.draw.line(surf, YELLOW, (tx, ty), (tx - math.cos(a) * tip_len, ty - math.sin(a) * tip_len), 3)


def draw_power(surf, state):
    if state.drag is None:
        return
    pct = power_fraction(state)
    bx, by = state.ball.x - 45, state.ball.y + 32
    pygame.draw.line(surf, GRAY, (bx, by), (bx + 90, by), 7)
    if pct > 0:
        pygame.draw.line(surf, METER, (bx, by), (bx + 90 * pct, by), 11)
    pygame.draw.line(surf, METER_EDGE, (bx, by), (bx + 90, by), 2)


def draw_text(surf, font, state):
    if not state.kicking and not state.resolved:
        t = font.render(PROMPT, True, WHITE)
        surf.blit(t, t.get_rect(center=(W // 2, H - 22)))
    elif state.resolved and state.message:
        t = font.render(state.message, True, WHITE)
        rect = t.get_rect(center=(W // 2, 100))
        panel = pygame.Surface((rect.w + 24, rect.h + 8), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 150))
        surf.blit(panel, panel.get_rect(center=rect.center))
        surf.blit(t, rect)


def draw_button(screen, font, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    screen.blit(bg, rect.topleft)
    pygame.draw.rect(screen, WHITE if active else GRAY, rect, 2, border_radius=12)
    surf = font.render(text, True, WHITE if active else (210, 210, 210))
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_hud(screen, small, fps, state):
    ball, keeper = state.ball, state.keeper
    lines = [
        f"FPS: {fps:5.1f}   round:{state.rounds}   {state.phase}",
        f"BALL   x={ball.x:6.1f} y={ball.y:6.1f}",
        f"KEEPER x={keeper.x:6.1f} dir={keeper.dir} v={keeper.speed:.2f}",
    ]
    if state.shot is not None:
        lines.append(f"SHOT   vx={state.shot.vx:5.2f} vy={state.shot.vy:5.2f}")
    y = H - 110
    for text in lines:
        surf = small.render(text, True, GRAY)
        screen.blit(surf, (8, y))
        y += 16


def draw_scene(screen, fonts, state, fps=0.0, show_debug=False, hover_restart=False):
    font, small = fonts
    draw_pitch(screen)
    draw_goal(screen)
    draw_keeper(screen, state.keeper)
    draw_ball(screen, state.ball)
    draw_aim(screen, state)
    draw_power(screen, state)
    draw_text(screen, font, state)
    if state.restart_visible:
        draw_button(screen, font, RESTART_RECT, "Restart", hover_restart)
    if show_debug:
        draw_hud(screen, small, fps, state)
