from .settings import COIN_SIZE


class Coin:
    def __init__(self, x, y, size=COIN_SIZE, high_value=False):
        self.x = x
        self.y = y
        self.size = size
        self.high_value = high_value

    @property
    def width(self):
        return self.size

    @property
    def height(self):
        return self.size

    def update(self, speed):
        self.x -= speed

    def is_offscreen(self):
        return self.x + self.size <= 0

    def __repr__(self):
        return f"Coin(x={self.x:.1f}, y={self.y:.1f}, size={self.size}, high_value={self.high_value})"
