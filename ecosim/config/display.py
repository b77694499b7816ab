"""Display and UI configuration constants."""

# Canvas dimensions in pixels
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400

# The frame rate for the animation loop, in frames per second
FRAME_RATE = 60

# Fraction of the canvas height covered by sky (ground fills the rest)
SKY_FRACTION = 0.7

# Specks of texture baked into the ground once per renderer
GROUND_TEXTURE_SPECKS = 20

# Horizontal spawn band shared by every entity kind
ENTITY_MIN_X = 10
ENTITY_SPAN_X = 780

# Vertical spawn bands (top, span) per entity kind
FLORA_BAND = (200, 200)
FAUNA_BAND = (250, 100)
ENERGY_BAND = (100, 150)
INDUSTRY_BAND = (150, 120)

# Upper bounds of each entity count at 100% of its driving parameter
MAX_FLORA = 30
MAX_FAUNA = 15
MAX_ENERGY_SOURCES = 8
MAX_INDUSTRY_SOURCES = 6

# Entity colors
TREE_VIBRANT_COLOR = (34, 197, 94)
TREE_YELLOW_GREEN_COLOR = (101, 163, 13)
TREE_YELLOW_COLOR = (202, 138, 4)
TREE_UNHEALTHY_COLOR = (220, 38, 38)
TRUNK_COLOR = (139, 69, 19)
ANIMAL_COLORS = (
    (239, 68, 68),
    (59, 130, 246),
    (16, 185, 129),
    (245, 158, 11),
    (139, 92, 246),
)
ENERGY_COLOR = (59, 130, 246)
TURBINE_BLADE_COLOR = (229, 231, 235)
SOLAR_PANEL_COLOR = (30, 64, 175)
INDUSTRY_COLOR = (107, 114, 128)
SMOKESTACK_COLOR = (75, 85, 99)
WINDOW_COLOR = (251, 191, 36)

# Sky colors by pollution band
SKY_HEAVY_POLLUTION_COLOR = (184, 134, 11)
SKY_MODERATE_POLLUTION_COLOR = (221, 160, 221)
SKY_LIGHT_POLLUTION_COLOR = (240, 230, 140)
SKY_CLEAN_COLOR = (135, 206, 235)
SKY_HORIZON_COLOR = (224, 242, 254)
GROUND_TOP_COLOR = (132, 204, 22)
GROUND_BOTTOM_COLOR = (54, 83, 20)

# Overlay panel
OVERLAY_BG_COLOR = (0, 0, 0)
OVERLAY_ALPHA = 178
OVERLAY_TEXT_COLOR = (255, 255, 255)
RUNNING_BADGE_COLOR = (34, 197, 94)
OVERLAY_FONT_SIZE = 20
