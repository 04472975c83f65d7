import logging
import threading

from dotenv import load_dotenv

from app.api.orfo_service import OrfoService, orfo_service
from app.common.config import settings

load_dotenv()

logger = logging.getLogger(__name__)

FAILURE_RETRY_S = 15


def run_once(service: OrfoService | None = None) -> bool:
    """Force one dictionary reload; returns False when a stale snapshot is being served."""
    service = service or orfo_service
    snapshot = service.refresh_dictionary(force=True)
    logger.info("dictionary refreshed: words=%s stale=%s", len(snapshot), snapshot.stale)
    return not snapshot.stale


class DictionaryRefresher:
    """Background thread that keeps the in-process dictionary snapshot warm."""

    def __init__(self, service: OrfoService | None = None, interval_s: int | None = None) -> None:
        self.service = service or orfo_service
        self.interval_s = settings.dictionary_refresh_interval_s if interval_s is None else interval_s
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def run(self) -> None:
        logger.info("starting dictionary refresher with interval=%ss", self.interval_s)
        while not self._stop.is_set():
            try:
                ok = run_once(self.service)
                wait_for = self.interval_s if ok else min(self.interval_s, FAILURE_RETRY_S)
            except Exception:
                logger.exception("dictionary refresh failed; retrying in %ss", FAILURE_RETRY_S)
                wait_for = FAILURE_RETRY_S
            self._stop.wait(max(1, wait_for))

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="dictionary-refresher", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    if not run_once():
        raise SystemExit(1)


if __name__ == "__main__":
    main()
