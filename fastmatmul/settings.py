import os

# ------- Tunables -------
STRASSEN_CUTOVER    = int(os.getenv("STRASSEN_CUTOVER", "64"))    # side <= this -> schoolbook
WINOGRAD_CUTOVER    = int(os.getenv("WINOGRAD_CUTOVER", "32"))
SHORT_RENDER_LIMIT  = int(os.getenv("SHORT_RENDER_LIMIT", "10"))  # corner blocks above this
MIN_GENERATED_SIDE  = int(os.getenv("MIN_GENERATED_SIDE", "64"))
DEFAULT_STRATEGY    = os.getenv("MM_STRATEGY", "strassen")
DEFAULT_MIN_VALUE   = float(os.getenv("MM_MIN_VALUE", "-10"))
DEFAULT_MAX_VALUE   = float(os.getenv("MM_MAX_VALUE", "10"))

# ------- Storage -------
OUTPUT_CONTAINER    = os.getenv("OUTPUT_CONTAINER", "output-container")
REPORT_CONTAINER    = os.getenv("REPORT_CONTAINER", "reports")
RUN_LOG_CONTAINER   = os.getenv("RUN_LOG_CONTAINER", OUTPUT_CONTAINER)
RUN_LOG_PREFIX      = os.getenv("RUN_LOG_PREFIX", "runs/")

LOG_LEVEL           = os.getenv("LOG_LEVEL", "INFO").upper()
