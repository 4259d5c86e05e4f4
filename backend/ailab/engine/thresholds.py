"""Hand-tuned heuristic thresholds for the doodle shape classifier.

None of these are derived; they were tuned by hand on mouse drawings on a
400x300 canvas. Change them here, never inline.
"""

import math

# ── Pixel sampling ──

# Sample every 5th pixel in both axes (400x300 canvas → 80x60 grid).
SAMPLE_STRIDE = 5
# Unweighted RGB mean below this = ink. Mid-point of the 8-bit range.
LUMINANCE_THRESHOLD = 128

# ── Descriptor guard ──

# Fewer outline points than this → unknown shape.
MIN_OUTLINE_POINTS = 5

# ── Corner detection ──

# Summed turn over a 4-point window above 60° counts as a corner.
CORNER_ANGLE = math.pi / 3
# Minimum window positions between two corners.
CORNER_COOLDOWN = 5
# No corner found but more outline than this → estimate from outline length.
CORNER_FALLBACK_MIN_POINTS = 20
# One estimated corner per this many outline points.
CORNER_FALLBACK_DIVISOR = 50

# ── Closedness ──

# Endpoints closer than max(15px, 10% of shape size) → closed.
CLOSURE_MIN_DISTANCE = 15.0
CLOSURE_SIZE_FRACTION = 0.10
# Loop check needs more outline than this.
LOOP_MIN_POINTS = 10
# Point three-quarters through the outline ...
LOOP_POSITION = 0.75
# ... within 30% of shape size of the start → closed.
LOOP_SIZE_FRACTION = 0.30
