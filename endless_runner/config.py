"""
Configuration & Resource Paths
==============================
Gameplay constants shared by the simulation, the renderer and the app shell,
plus the lookup of the assets directory.

All distances are world units (roughly metres), all times are seconds.
"""
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource next to the package.
    """
    # config.py is in endless_runner/, the project root is one level up
    project_root: Path = Path(__file__).resolve().parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")

# ----------------------------- Window ---------------------------------
WIDTH, HEIGHT = 960, 540
FPS = 60
MAX_FRAME_DT = 0.1          # clamp for real frame time, avoids huge steps

# ----------------------------- Physics --------------------------------
GRAVITY = 9.81 * 1.5        # m/s^2, always pulling down
JUMP_VELOCITY = 10.0        # m/s, vertical impulse of a jump

# ----------------------------- Treadmill ------------------------------
START_TREADMILL_SPEED = 8.0
TREADMILL_ACCELERATION = 0.1    # speed gained per second

# ----------------------------- Level ----------------------------------
SEED = 12345678
VIEW_SIZE = 10.0            # half height of the visible band
CHUNK_SIZE = 5              # platforms per generated chunk
MEDIAN_DIVISOR = 5          # fixed, independent of CHUNK_SIZE
PLATFORM_WIDTH_RANGE = (6, 15)
HORIZONTAL_LEEWAY = 1.0     # subtracted from every planned jump distance
JUMP_LEEWAY = 0.95          # generator plans against 95% of the real jump
INITIAL_CHUNK_JUMP_VELOCITY = 5.0
STARTING_PLATFORM = (3.0, 10.0, 0.0)    # position, width, height
PLATFORM_DEPTH = 25.0       # platforms are columns hanging down this far
PRUNE_DISTANCE = 40.0       # bodies further left than this are dropped

# ----------------------------- Player ---------------------------------
PLAYER_BOUNDS_CENTER = (0.0, 0.9, 0.0)
PLAYER_BOUNDS_SIZE = (0.6, 1.8, 0.6)
PLAYER_HEIGHT = 1.8
STEP_INTERVAL = 1 / 3       # seconds between footsteps
AIR_SOUND_DELAY = 0.75      # whoosh starts this long into a jump
RUN_ANIM_SPEEDUP = 0.0005
CROSSFADE_TIME = 0.25

# ----------------------------- Collision ------------------------------
OVERLAP_EPSILON = 0.01

# ----------------------------- Birds ----------------------------------
BIRD_CHANCE = 0.4           # per platform of a new chunk
BIRD_MAX_PER_PLATFORM = 3
BIRD_SPEED_RANGE = (10, 14)
BIRD_TAKEOFF_X = 8.0
BIRD_SPREAD = 0.45          # fraction of platform width birds may sit on

# ----------------------------- Audio ----------------------------------
AMBIENCE_VOLUME = 0.1
BIRD_VOLUME = 0.5
