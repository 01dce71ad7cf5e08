"""Game-wide constants for Lawn Defense.

Screen and grid geometry, plant/zombie stat tables, tuning knobs for spawning,
combat and the sun economy, colors for the procedural renderer, and logging
configuration. All timings are in milliseconds.
"""
import os

from .models import PlantKind, PlantStats, ZombieKind, ZombieStats

WIDTH, HEIGHT = 960, 540           # 16:9 playfield
FPS = 60                           # target frame rate
MAX_FRAME_MS = 100                 # clamp for long frames (window drag, breakpoints)

# Lawn grid
GRID_ROWS = 5
GRID_COLS = 9
CELL_WIDTH = 71
CELL_HEIGHT = 64
GRID_OFFSET_X = 130
GRID_OFFSET_Y = 185

# Sun economy
SUN_START = 50
SUN_VALUE = 25
SUN_LIFETIME_MS = 8000
SUN_HALF_EXTENT = 25               # clickable square is 50x50
PASSIVE_SUN_INTERVAL_MS = 9000
PASSIVE_SUN_Y = GRID_OFFSET_Y + 20

# Plants
PLANT_STATS = {
    PlantKind.SUNFLOWER: PlantStats(cost=50, max_health=300),
    PlantKind.PEASHOOTER: PlantStats(cost=100, max_health=300),
    PlantKind.WALLNUT: PlantStats(cost=50, max_health=1200),
}
SUNFLOWER_SUN_INTERVAL_MS = 7000
SUNFLOWER_FLASH_MS = 400
SUNFLOWER_SUN_OFFSET = (0, -30)
PEASHOOTER_SHOT_INTERVAL_MS = 1500
PEASHOOTER_FLASH_MS = 200
PEASHOOTER_PEA_OFFSET = (20, -10)
HEALTH_BAND_DAMAGED = 0.66         # ratio at or below this looks cracked
HEALTH_BAND_CRITICAL = 0.33

# Zombies
ZOMBIE_STATS = {
    ZombieKind.CLASSIC: ZombieStats(max_health=200, speed=20),
    ZombieKind.CONE: ZombieStats(max_health=400, speed=20),
    ZombieKind.BUCKET: ZombieStats(max_health=800, speed=20),
}
ZOMBIE_SPAWN_WEIGHTS = (
    (ZombieKind.CLASSIC, 0.7),
    (ZombieKind.CONE, 0.2),
    (ZombieKind.BUCKET, 0.1),
)
ZOMBIE_BITE_DPS = 20               # health per second while feeding
ZOMBIE_REACH = CELL_WIDTH / 2
ZOMBIE_ENTRY_X = WIDTH + 40
ZOMBIE_Y_OFFSET = -10
ZOMBIE_CORPSE_MS = 1000            # how long a defeated zombie stays on the lawn

# Spawn scheduling
ZOMBIE_SPAWN_INTERVAL_START_MS = 9000
ZOMBIE_SPAWN_INTERVAL_MIN_MS = 2500
ZOMBIE_SPAWN_INTERVAL_DECAY = 0.99

# Peas
PEA_SPEED = 300                    # px per second
PEA_DAMAGE = 50
PEA_STRIKE_RADIUS = 30
PEA_EXIT_X = WIDTH + 50
SPLASH_LIFETIME_MS = 200
SPLASH_OFFSET = (0, -10)

# Colors (procedural renderer)
BG_COLOR = (25, 28, 33)
TEXT_COLOR = (235, 235, 235)
LAWN_LIGHT = (92, 160, 70)
LAWN_DARK = (78, 142, 60)
GRID_LINE = (0, 0, 0, 50)
SUNFLOWER_COLOR = (245, 200, 40)
PEASHOOTER_COLOR = (70, 190, 70)
WALLNUT_COLOR = (160, 110, 60)
ZOMBIE_COLORS = {
    ZombieKind.CLASSIC: (120, 150, 110),
    ZombieKind.CONE: (210, 130, 50),
    ZombieKind.BUCKET: (150, 150, 160),
}
PEA_COLOR = (120, 230, 80)
SUN_COLOR = (255, 220, 60)
FLASH_COLOR = (255, 235, 90)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
