# --- Configuration Constants ---
DEFAULT_FPS = 60
DEFAULT_RESOLUTION = (1280, 720)
WINDOW_NAME = "Fireworks"

# Burst colours (one is picked at random when none is given)
PALETTE = [
    "#FF6B6B",
    "#FFD166",
    "#06D6A0",
    "#118AB2",
    "#EF476F",
    "#9D4EDD",
    "#FF9E00",
    "#00BBF9",
    "#FF005C",
    "#00FFAA",
    "#FFAA00",
    "#AA00FF",
]

# Particle system settings (units are pixels and frames)
PARTICLES_PER_BURST = 100
PARTICLE_SPEED_MIN = 2
PARTICLE_SPEED_MAX = 8
PARTICLE_SIZE_MIN = 2
PARTICLE_SIZE_MAX = 6
PARTICLE_DECAY_MIN = 0.95
PARTICLE_DECAY_MAX = 0.99
PARTICLE_GRAVITY = 0.05
ALPHA_FADE = 0.985  # Opacity multiplier per frame
SIZE_SHRINK = 0.99  # Radius multiplier per frame
MIN_ALPHA = 0.05  # Below this a particle is invisible
MIN_SIZE = 0.1

# Spawning
BURSTS_PER_SPAWN = 1
SPAWN_JITTER = 15  # Max origin offset per axis
LAUNCH_MARGIN = 100  # Inset of the random launch rectangle
AUTO_FIRE_PERIOD = 0.8  # seconds
WELCOME_DELAY = 0.5  # seconds after start
WELCOME_COUNT = 3
WELCOME_STAGGER = 0.4  # seconds between welcome bursts

# Background
STAR_COUNT = 150
STAR_SIZE_MAX = 1.5
STAR_BRIGHTNESS_MIN = 0.3
STAR_BRIGHTNESS_MAX = 0.8
STAR_COLOR = "#FFFFFF"
SKY_GRADIENT = [(0.0, "#0f0c29"), (0.5, "#302b63"), (1.0, "#24243e")]
TRAIL_FILL_ALPHA = 0.1  # Lower = longer trails
TRAIL_SNAP = 5  # Levels from the sky at which a trail pixel is cleared

# Audio cue
TONE_SAMPLE_RATE = 22050
TONE_START_FREQ = 800
TONE_END_FREQ = 100
TONE_DURATION = 0.5  # seconds
TONE_START_GAIN = 0.1
TONE_END_GAIN = 0.01

# Controls
AUTO_FIRE = "autoFire"
STOP_FIRE = "stopFire"
CLEAR_SCREEN = "clearScreen"
KEY_BINDINGS = {
    ord("a"): AUTO_FIRE,
    ord("s"): STOP_FIRE,
    ord("c"): CLEAR_SCREEN,
}
QUIT_KEYS = (ord("q"), 27)  # q / Esc
BUTTON_WIDTH = 150
BUTTON_HEIGHT = 40
BUTTON_GAP = 12
BUTTON_BOTTOM_OFFSET = 24

# Button colours (BGR format for OpenCV)
BUTTON_IDLE_COLOR = (252, 117, 37)  # Blue
BUTTON_ACTIVE_COLOR = (0, 94, 255)  # Orange
BUTTON_STOP_COLOR = (93, 71, 239)  # Pink-red
BUTTON_CLEAR_COLOR = (120, 110, 100)  # Slate
BUTTON_TEXT_COLOR = (255, 255, 255)
