
CONFIG = {
    "CELL_SIZE": 30,
    "PREVIEW_CELL_SIZE": 25,
    "FPS": 60,
    "SEED": None,
    "BASE_DROP_MS": 1000,
    "MIN_DROP_MS": 100,
    "DROP_STEP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "LINE_SCORES": (0, 100, 300, 500, 800),
}
