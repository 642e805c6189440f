from datetime import datetime

from fleetprob.domain.config import (
    DEBUG_ENV_VAR,
    DEBUG_LOG_ENV_VAR,
    DEFAULT_DEBUG_LOG_PATH,
    env_flag,
    env_str,
)

# -----------------------------
# Debug helpers (enable with --debug or env FLEETPROB_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = DEFAULT_DEBUG_LOG_PATH


def configure_from_env() -> None:
    global DEBUG_ENABLED, DEBUG_LOG_PATH
    if env_flag(DEBUG_ENV_VAR, False):
        DEBUG_ENABLED = True
    DEBUG_LOG_PATH = env_str(DEBUG_LOG_ENV_VAR, DEBUG_LOG_PATH)


def _debug_log_line(line: str) -> None:
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_event(
    title: str,
    message: str,
    details: str = "",
    *,
    level: str = "info",
) -> None:
    """Append a debug event to the log file when debugging is enabled."""
    if not DEBUG_ENABLED:
        return

    _debug_log_line(f"{level.upper()} | {title} | {message}")
    if details:
        for ln in details.splitlines():
            _debug_log_line(f"    {ln}")
