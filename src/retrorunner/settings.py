# settings.py
WIDTH, HEIGHT = 800, 533
TITLE = "Retro Runner"
FPS = 60

GROUND_Y = HEIGHT - 60
GRAVITY = 0.5
TERMINAL_VELOCITY = 9
JUMP_VELOCITY = -13
DOUBLE_JUMP_VELOCITY = -14     # stronger second jump

# Scroll speed (world units per tick)
INITIAL_SCROLL_SPEED = 4
MAX_SCROLL_SPEED = 12
SPEED_INCREASE_INTERVAL = 1000  # ms
SPEED_INCREASE_AMOUNT = 0.05
SPEED_MILESTONES = [           # (total score above, multiplier)
    (10000, 3.0),
    (5000, 2.5),
    (2000, 2.0),
    (1000, 1.5),
]

# Sizes
PLAYER_X = 100
PLAYER_WIDTH, PLAYER_HEIGHT = 56, 68
ENEMY_WIDTH, ENEMY_HEIGHT = 56, 68
COIN_SIZE = 32
HIGH_COIN_SIZE = 40
COLLISION_MARGIN = 12          # shrink applied to player/enemy boxes

# Scoring
SCORE_INCREASE_PER_SECOND = 10
SCORE_INCREASE_PER_COIN = 50
HIGH_COIN_BONUS = 3

# Power-up
POWERUP_COINS_REQUIRED = 20
POWERUP_DURATION = 10000           # ms
POWERUP_SPEED_BOOST = 3
POWERUP_RECOVERY_DURATION = 2000   # ms, no enemy spawns
POWERUP_SHOWCASE_COINS = 5
POWERUP_SHOWCASE_ENEMIES = 3

# Coin spawning
MIN_COINS_ON_SCREEN = 3
HIGH_COIN_CHANCE = 0.25
LOW_TIER_CHANCE = 0.6
COIN_HORIZONTAL_GAP_MIN = 120
COIN_TIERS = {                 # height above the ground line
    "low": (60, 120),          # regular jump
    "mid": (150, 200),         # challenging jump
    "high": (280, 350),        # double jump required
}
COIN_PLACEMENT_ATTEMPTS = 5

# Enemy spawning
MIN_ENEMIES_ON_SCREEN = 1
ENEMY_MILESTONES = [(5000, 3), (2000, 2)]
ENEMY_BASE_GAP_MIN = 400
ENEMY_BASE_GAP_MAX = 800
ENEMY_GAP_REDUCTION_FACTOR = 0.65
ENEMY_MIN_GAP_LIMIT = 120
ENEMY_SPAWN_VARIANCE = 0.3
DIFFICULTY_EXPONENT = 1.8
ENEMY_PLACEMENT_ATTEMPTS = 3

SPAWN_SEPARATION_MARGIN = 75   # coins and enemies never closer than this

# Game states
STATE_START = 0
STATE_PLAYING = 1
STATE_GAMEOVER = 2

RESTART_DELAY = 300            # ms before a restart is accepted
INTENT_QUEUE_SIZE = 8

# Colors
BG = (235, 220, 253)
GROUND = (123, 20, 239)
PLAYER_COLOR = (254, 2, 167)
ENEMY_COLOR = (123, 20, 239)
COIN_COLOR = (255, 205, 0)
HIGH_COIN_COLOR = (254, 2, 167)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
POWERUP_COLORS = [
    (255, 0, 0), (255, 119, 0), (255, 255, 0), (0, 255, 0), (0, 119, 255),
    (123, 20, 239), (254, 2, 167), (196, 151, 254), (235, 220, 253),
]
JUMP_PARTICLE_COLORS = [(255, 255, 255), (196, 151, 254), (235, 220, 253)]

# Game over "Play Again?" button (x, y, w, h)
PLAY_AGAIN_BUTTON = (WIDTH // 2 - 75, HEIGHT // 2 + 70, 150, 50)
