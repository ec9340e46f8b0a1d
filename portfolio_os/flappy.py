import math
import random
import time

import pygame

from .apps import BaseApp
from .ui import draw_text_centered, font

GRAVITY = 0.35
JUMP = -6.5
MAX_FALL_SPEED = 8
PIPE_WIDTH = 52
PIPE_GAP = 130
PIPE_SPEED = 2.2
PIPE_EVERY = 95
BIRD_W, BIRD_H = 34, 24
BIRD_X = 70
GROUND_H = 80
GROUND_SPEED = 2.2
RESTART_FRAMES = 15

IDLE, PLAYING, DEAD = "idle", "playing", "dead"


class Pipe:
    def __init__(self, x, top_h):
        self.x = x
        self.top_h = top_h
        self.scored = False


# ---------- Simulation ----------
class FlappyGame:
    def __init__(self, width=420, height=560, rng=None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.state = IDLE
        self.high_score = 0
        self.ground_x = 0.0
        self.reset()

    @property
    def ground_y(self):
        return self.height - GROUND_H

    def reset(self):
        self.bird_y = self.ground_y * 0.4
        self.velocity = 0.0
        self.pipes = []
        self.score = 0
        self.frame = 0
        self.flap_frame = 0
        self.dead_timer = 0

    def resize(self, width, height):
        self.width, self.height = width, height
        if self.state == IDLE:
            self.bird_y = self.ground_y * 0.4

    def flap(self):
        if self.state == DEAD and self.dead_timer < RESTART_FRAMES:
            return
        if self.state != PLAYING:
            self.high_score = max(self.high_score, self.score)
            self.reset()
            self.state = PLAYING
        self.velocity = JUMP
        self.flap_frame = 0

    def _fall(self):
        self.velocity = min(self.velocity + GRAVITY, MAX_FALL_SPEED)
        self.bird_y += self.velocity

    def _die(self):
        self.state = DEAD
        self.high_score = max(self.high_score, self.score)

    def step(self):
        if self.state == PLAYING:
            self._fall()
            self.frame += 1
            self.flap_frame = (self.flap_frame + 1) % 10
            self.ground_x = (self.ground_x + GROUND_SPEED) % 24

            if self.frame % PIPE_EVERY == 0:
                min_top = 60
                max_top = max(min_top, self.ground_y - PIPE_GAP - 60)
                self.pipes.append(Pipe(self.width, min_top + self.rng.random() * (max_top - min_top)))

            for pipe in self.pipes:
                pipe.x -= PIPE_SPEED
                if not pipe.scored and pipe.x + PIPE_WIDTH < BIRD_X:
                    pipe.scored = True
                    self.score += 1
            self.pipes = [p for p in self.pipes if p.x > -PIPE_WIDTH - 10]
            self._collide()
        elif self.state == DEAD:
            self.dead_timer += 1
            rest = self.ground_y - BIRD_H / 2
            if self.bird_y < rest:
                self._fall()
                self.bird_y = min(self.bird_y, rest)

    def _collide(self):
        top = self.bird_y - BIRD_H / 2
        bottom = self.bird_y + BIRD_H / 2
        left = BIRD_X - BIRD_W / 2
        right = BIRD_X + BIRD_W / 2
        if bottom > self.ground_y:
            self.bird_y = self.ground_y - BIRD_H / 2
            self._die()
        if top < 0:
            self.bird_y = BIRD_H / 2
            self.velocity = 0.0
        for pipe in self.pipes:
            if right > pipe.x and left < pipe.x + PIPE_WIDTH:
                if top < pipe.top_h or bottom > pipe.top_h + PIPE_GAP:
                    self._die()


# ---------- Flappy App ----------
class FlappyApp(BaseApp):
    name = "Flappy Bird"
    wants_keys = True

    def __init__(self):
        self.game = FlappyGame()

    def handle_event(self, e, rect):
        if e.type == pygame.KEYDOWN and e.key in (pygame.K_SPACE, pygame.K_UP):
            self.game.flap()
        elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and rect.collidepoint(e.pos):
            self.game.flap()

    def update(self, dt):
        self.game.step()

    def draw(self, surf, rect):
        g = self.game
        if (g.width, g.height) != (rect.w, rect.h):
            g.resize(rect.w, rect.h)
        prev_clip = surf.get_clip()
        surf.set_clip(rect)
        surf.fill((78, 192, 202), pygame.Rect(rect.x, rect.y, rect.w, g.ground_y))
        for pipe in g.pipes:
            x = rect.x + int(pipe.x)
            pygame.draw.rect(surf, (115, 191, 46), (x, rect.y, PIPE_WIDTH, int(pipe.top_h)))
            bottom = int(pipe.top_h + PIPE_GAP)
            pygame.draw.rect(surf, (115, 191, 46), (x, rect.y + bottom, PIPE_WIDTH, g.ground_y - bottom))
        ground = pygame.Rect(rect.x, rect.y + g.ground_y, rect.w, GROUND_H)
        surf.fill((222, 216, 149), ground)
        surf.fill((84, 184, 71), (ground.x, ground.y, ground.w, 12))

        bird_y = g.bird_y
        if g.state == IDLE:
            bird_y = g.ground_y * 0.4 + math.sin(time.time() * 1000 / 300) * 8
        bird = pygame.Rect(0, 0, BIRD_W, BIRD_H)
        bird.center = (rect.x + BIRD_X, rect.y + int(bird_y))
        pygame.draw.ellipse(surf, (247, 211, 61), bird)
        pygame.draw.circle(surf, (255, 255, 255), (bird.right - 9, bird.y + 8), 5)
        pygame.draw.circle(surf, (0, 0, 0), (bird.right - 8, bird.y + 8), 2)

        big = font("xl")
        if g.state == PLAYING:
            draw_text_centered(surf, g.score, (rect.centerx, rect.y + 50), big, (255, 255, 255))
        elif g.state == IDLE:
            draw_text_centered(surf, "Click or Space to flap", (rect.centerx, rect.y + rect.h // 3), "lg", (255, 255, 255))
        else:
            draw_text_centered(surf, "Game Over", (rect.centerx, rect.y + rect.h // 3), big, (255, 255, 255))
            draw_text_centered(surf, "Score %d   Best %d" % (g.score, g.high_score),
                               (rect.centerx, rect.y + rect.h // 3 + 48), "lg", (255, 255, 255))
        surf.set_clip(prev_clip)
