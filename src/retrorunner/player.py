from .collision import Box
from .settings import (
    PLAYER_X, PLAYER_WIDTH, PLAYER_HEIGHT, GROUND_Y, GRAVITY,
    TERMINAL_VELOCITY, JUMP_VELOCITY, DOUBLE_JUMP_VELOCITY,
)


class Player:
    def __init__(self, x=PLAYER_X, y=None, width=PLAYER_WIDTH, height=PLAYER_HEIGHT, ground_y=GROUND_Y):
        self.x = x
        self.width = width
        self.height = height
        self.ground_y = ground_y
        self.y = ground_y - height if y is None else y
        self.vy = 0
        self.on_ground = True
        self.jumps_remaining = 2

    @property
    def box(self):
        return Box(self.x, self.y, self.width, self.height)

    def jump(self):
        """Apply a jump intent.

        Returns "jump" for a ground jump, "double" for the one mid-air jump,
        or None when no jump is left.
        """
        if self.on_ground:
            self.vy = JUMP_VELOCITY
            self.on_ground = False
            self.jumps_remaining = 1
            return "jump"
        if self.jumps_remaining > 0:
            self.vy = DOUBLE_JUMP_VELOCITY
            self.jumps_remaining = 0
            return "double"
        return None

    def update(self):
        self.vy += GRAVITY
        # terminal velocity
        if self.vy > TERMINAL_VELOCITY:
            self.vy = TERMINAL_VELOCITY
        self.y += self.vy
        if self.y + self.height >= self.ground_y:
            self.y = self.ground_y - self.height
            self.vy = 0
            self.on_ground = True
            self.jumps_remaining = 2
