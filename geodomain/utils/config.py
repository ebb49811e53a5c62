"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    root = _project_root()
    env_path = root / ".env"
    load_dotenv(env_path, override=True)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_optional_bool(key: str, default: bool) -> bool:
    """Get optional env var as bool (1/true/yes/on); return default if missing."""
    load_config()
    raw = os.getenv(key, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


# --- Public config accessors ---

def check_strategy() -> str:
    """Optional: availability strategy. One of heuristic, probe, cached. Default heuristic."""
    val = get_optional("CHECK_STRATEGY", "heuristic").lower()
    return val if val in ("heuristic", "probe", "cached") else "heuristic"


def page_size() -> int:
    """Optional: results per page. Default 20."""
    return max(1, get_optional_int("PAGE_SIZE", 20))


def batch_size() -> int:
    """Optional: availability checks per batch. Default 20."""
    return max(1, get_optional_int("BATCH_SIZE", 20))


def batch_delay_seconds() -> float:
    """Optional: pause between availability batches. BATCH_DELAY_MS, default 50 ms."""
    return max(0, get_optional_int("BATCH_DELAY_MS", 50)) / 1000.0


def cache_ttl_seconds() -> float:
    """Optional: availability cache time-to-live. Default 300 (5 minutes)."""
    return get_optional_float("CACHE_TTL_SECONDS", 300.0)


def http_timeout_seconds() -> float:
    """Optional: timeout for WHOIS/DNS/HTTP lookups. Default 5."""
    return get_optional_float("HTTP_TIMEOUT_SECONDS", 5.0)


def lookup_min_interval_seconds() -> float:
    """Optional: minimum spacing between outbound lookups. LOOKUP_MIN_INTERVAL_MS, default 0 (off)."""
    return max(0, get_optional_int("LOOKUP_MIN_INTERVAL_MS", 0)) / 1000.0


def keyword_mode() -> str:
    """Optional: keyword parsing mode, multi (split on comma/newline) or single. Default multi."""
    return get_optional("KEYWORD_MODE", "multi").lower()


def swap_policy() -> str:
    """Optional: how the swap toggle interacts with position. invert, beginning_only or ignore."""
    return get_optional("SWAP_POLICY", "invert").lower()


def position_anchor() -> str:
    """Optional: which word the position setting places, city (default) or keyword."""
    return get_optional("POSITION_ANCHOR", "city").lower()


def csv_quoting() -> bool:
    """Optional: quote CSV fields. Default False (legacy unescaped rows)."""
    return get_optional_bool("CSV_QUOTING", False)


def heuristic_seed() -> int | None:
    """Optional: fixed seed for the heuristic checker. None = nondeterministic."""
    raw = get_optional("HEURISTIC_SEED", "")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()


def log_file() -> Path | None:
    """Optional: path of a log file in addition to stderr."""
    val = get_optional("LOG_FILE", "")
    return Path(val) if val else None
