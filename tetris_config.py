
CONFIG = {
    "CELL_SIZE": 32,
    "TICK_MS": 500,
    "LINE_BONUS": 100,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
