"""Named numeric tolerances for the path kernel.

Every function that compares coordinates or angles takes its tolerance as a
keyword argument defaulting to one of these values.
"""

# Points
POINT_ACCURACY = 1e-7             # rounding step for per-axis point equality
BETWEEN_ACCURACY = 1e-6           # a line axis shorter than this is degenerate

# Angles (degrees)
ANGLE_TOLERANCE = 1e-4            # arc angle equality, fixed for path equality
FULL_CIRCLE = 360.0

# Bezier parameter search
BEZIER_SAMPLES = 32               # coarse samples seeding the nearest-t solve
BEZIER_ON_CURVE = 1e-6            # max distance for a point to count as on-curve
