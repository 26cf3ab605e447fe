import math

from .settings import POWERUP_COLORS, JUMP_PARTICLE_COLORS


class ParticleSystem:
    """Cosmetic sparkles. Purely visual; the simulation never reads them."""

    def __init__(self, rng):
        self.rng = rng
        self.particles = []

    def clear(self):
        self.particles = []

    def burst(self, x, y, count, colors, speed_min, speed_max, size_min, size_max, even=False):
        """Particles flying outward from (x, y); `even` spaces them on a ring."""
        rng = self.rng
        for i in range(count):
            ang = (i / count) * math.pi * 2 if even else rng.uniform(0, math.pi * 2)
            speed = rng.uniform(speed_min, speed_max)
            self.particles.append({
                "x": x,
                "y": y,
                "vx": math.cos(ang) * speed,
                "vy": math.sin(ang) * speed,
                "size": rng.uniform(size_min, size_max),
                "life": 1.0,
                "color": rng.choice(colors),
            })

    def double_jump(self, player):
        self.burst(player.x + player.width / 2, player.y + player.height,
                   8, JUMP_PARTICLE_COLORS, 2, 4, 3, 6, even=True)

    def high_coin(self, coin):
        self.burst(coin.x + coin.size / 2, coin.y + coin.size / 2,
                   12, POWERUP_COLORS, 1, 4, 3, 7)

    def sparkle_around(self, player):
        """Floating sparkles in a ring around the player while powered up."""
        rng = self.rng
        cx = player.x + player.width / 2
        cy = player.y + player.height / 2
        for _ in range(2):
            ang = rng.uniform(0, math.pi * 2)
            dist = rng.uniform(20, 70)
            self.particles.append({
                "x": cx + math.cos(ang) * dist,
                "y": cy + math.sin(ang) * dist,
                "size": rng.uniform(2, 8),
                "life": 1.0,
                "color": rng.choice(POWERUP_COLORS),
            })

    def update(self):
        for p in self.particles[:]:
            if "vx" in p:
                p["x"] += p["vx"]
                p["y"] += p["vy"]
                p["vy"] += 0.1
            else:
                # ambient sparkles just float up
                p["y"] -= 0.8
            p["life"] -= 0.03
            if p["life"] <= 0:
                self.particles.remove(p)
