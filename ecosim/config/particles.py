"""Particle pool configuration constants."""

# Hard upper bound on concurrently live particles
MAX_PARTICLES = 100

# Peak opacity of a freshly spawned particle
PARTICLE_MAX_ALPHA = 0.7

# Pollution particles emitted by industry sources
POLLUTION_SPAWN_CHANCE = 0.2
POLLUTION_MAX_LIFE = 120
POLLUTION_X_JITTER = 20.0
POLLUTION_Y_OFFSET = -25.0
POLLUTION_MAX_DRIFT = 2.0
POLLUTION_MIN_RISE = 1.0
POLLUTION_RISE_SPAN = 2.0
POLLUTION_MIN_RADIUS = 2.0
POLLUTION_RADIUS_SPAN = 4.0
POLLUTION_COLOR = (107, 114, 128)

# Clean particles emitted by renewable energy sources
CLEAN_SPAWN_CHANCE = 0.1
CLEAN_MAX_LIFE = 80
CLEAN_X_JITTER = 10.0
CLEAN_MAX_DRIFT = 1.0
CLEAN_MIN_RISE = 0.5
CLEAN_RISE_SPAN = 1.0
CLEAN_MIN_RADIUS = 1.0
CLEAN_RADIUS_SPAN = 3.0
CLEAN_COLOR = (16, 185, 129)
