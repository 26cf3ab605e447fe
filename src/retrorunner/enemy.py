from .settings import ENEMY_WIDTH, ENEMY_HEIGHT, GROUND_Y


class Enemy:
    """Ground-level obstacle that scrolls left with the world."""
    def __init__(self, x, y=None, width=ENEMY_WIDTH, height=ENEMY_HEIGHT):
        self.x = x
        self.y = GROUND_Y - height if y is None else y
        self.width = width
        self.height = height

    def update(self, speed):
        self.x -= speed

    def is_offscreen(self):
        return self.x + self.width <= 0

    def __repr__(self):
        return f"Enemy(x={self.x:.1f}, y={self.y:.1f})"
