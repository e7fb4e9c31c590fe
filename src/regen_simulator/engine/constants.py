"""Physical constants and integrator bounds."""

AIR_DENSITY = 1.225       # kg/m³, sea level
GRAVITY = 9.81            # m/s²

KMH_PER_MS = 3.6
J_PER_WH = 3_600.0

TIME_STEP = 0.1           # s, fixed forward-Euler step
MIN_SPEED = 0.1           # m/s, a run ends at or below this
MAX_TIME = 600.0          # s, hard cap: at most ~6000 ticks per strategy
STOP_TOLERANCE = 0.1      # m, remaining distance treated as "arrived"

COAST_OVERRUN_FACTOR = 1.5    # Strategy A stops integrating at 1.5 × target
BRAKE_OVERRUN_MARGIN = 5.0    # Strategy B stops integrating at target + 5 m
TARGET_TOLERANCE = 2.0        # m, "reached the target" for the summary
