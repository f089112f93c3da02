DEBUG = False

CURRENT_VERSION = "1.5.0"

# None lets ThreadPoolExecutor pick its own default
DEFAULT_MAX_WORKERS = None
