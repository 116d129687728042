# config.py — Central configuration for the terrain path finder

# Terrain generation
SIZE = 33                # must be 2**n + 1
ROUGHNESS = SIZE * 4
SEED = None              # None draws a fresh terrain every run

# Route endpoints as vertex indices (x * SIZE + y); None means bottom-right corner
SOURCE_VERTEX = 0
TARGET_VERTEX = None

# Missions to run, in order: (algorithm, cost function)
#   algorithms:     "dijkstra", "floyd"
#   cost functions: "climb"          — flat/downhill 1, uphill 1 + climb^2
#                   "climb_descent"  — as "climb" but downhill 1 + drop (may be negative)
MISSIONS = [
    ("dijkstra", "climb"),
    ("floyd", "climb_descent"),
]

# Output
SHOW_TERRAIN = True      # print the generated terrain before the missions
DISPLAY_FINAL = False    # show each route in an OpenCV window
PLOT_3D = False          # show the terrain and last route as a 3D surface
WAIT_FOR_EXIT = True     # wait for Enter before exiting
LOG_LEVEL = "WARNING"
