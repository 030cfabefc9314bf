# frictionlab/core/constants.py
"""
Fixed numerical constants shared by every resolver.

The resolvers are tuned against DT; drivers that want faster playback
call the step several times per frame instead of changing it.
"""

# Fixed integration step [s] (~60 fps)
DT = 0.016

# Speeds at or below this [m/s] count as "at rest" when choosing between
# static and kinetic friction.
TOLERANCE = 0.005

# Numeric slack [N] when testing a required static friction against mu*N
STATIC_SLACK = 1e-4

# Extra relative displacement [m] past L/2 before the block counts as off
DETACH_MARGIN = 0.05

# Default gravitational acceleration [m/s^2]
G_DEFAULT = 9.8

__all__ = ["DT", "TOLERANCE", "STATIC_SLACK", "DETACH_MARGIN", "G_DEFAULT"]
