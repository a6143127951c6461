import logging
from pathlib import Path
from typing import Optional

_configured = False

_ROOT_LOGGER = "content"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Install console (and optional file) handlers on the service root logger.

    Safe to call more than once; only the first call installs handlers.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    # Console handler - respects LOG_LEVEL
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    )
    root.addHandler(console_handler)

    # File handler - always logs everything
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
        )
        root.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> 'ServiceLogger':
    """Get a logger for a module, nested under the service root logger."""
    if not name.startswith(_ROOT_LOGGER):
        name = f"{_ROOT_LOGGER}.{name}"
    return ServiceLogger(logging.getLogger(name))


class ServiceLogger:
    """Thin semantic wrapper over a stdlib logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def section(self, title: str):
        """Section header with dividers."""
        self.logger.info(f"{'='*60}")
        self.logger.info(title)
        self.logger.info(f"{'='*60}")

    def detail(self, msg: str):
        """Indented detail message."""
        self.logger.info(f"   {msg}")

    # ─── Query lifecycle ───────────────────────────────────────────

    def query_started(self, operation: str, take: Optional[int] = None, skip: Optional[int] = None):
        self.debug(f"🔍 {operation} (take={take}, skip={skip})")

    def cache_hit(self, operation: str, key: str):
        self.debug(f"💾 cache hit for {operation} [{key}]")

    def cache_miss(self, operation: str, key: str):
        self.debug(f"cache miss for {operation} [{key}]")

    def cache_error(self, action: str, key: str, error: Exception):
        self.warning(f"cache {action} failed for [{key}]: {error}")

    def relation_loaded(self, kind: str, key_count: int, row_count: int):
        self.debug(f"   {kind}: {key_count} keys -> {row_count} rows")

    def hydration_complete(self, entity: str, count: int, queries: int):
        self.debug(f"Hydrated {count} {entity} with {queries} relation queries")
