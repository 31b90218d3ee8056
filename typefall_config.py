
CONFIG = {
    "TICK_MS": 1000,
    "MAX_WORDS": 8,
    "SPAWN_BASE": 0.08,
    "SPAWN_PER_LEVEL": 0.01,
    "WORDS_PER_LEVEL": 15,
    "START_LIVES": 3,
    "MIN_WORD_LEN": 1,
    "MAX_WORD_LEN": 12,
    "CELL_SIZE": 16,
    "RNG_SEED": None,
    "DICT_PATH": "/usr/share/dict/words",
    "LOG_LEVEL": "INFO",
}
