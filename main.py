# main.py
import logging

from core.settings import settings
from core.logging import setup_logging

from domain.records.models import RecordType
from domain.records.store import RecordStore

from domain.processors.loader import load_roster, roster_to_dict
from domain.processors.registry import ProcessorRegistry

from reporting.panels import render_processor_listing, render_store_listing, render_store_stats

KURAMA_VERSION = "1.0"


def build_core():
    """Create the record store and the processor registry with its default roster."""
    store = RecordStore(
        settings.STORE_INITIAL_CAPACITY,
        max_capacity=settings.STORE_MAX_CAPACITY,
    )
    registry = ProcessorRegistry(settings.MAX_PROCESSORS)
    path = settings.roster_path()
    roster = load_roster(path) if path else load_roster()
    logging.getLogger("main").debug("roster %s", roster_to_dict(roster))
    registry.load_defaults(roster)
    return store, registry


def shutdown_core(store: RecordStore, registry: ProcessorRegistry) -> None:
    store.save("Kurama shutting down gracefully", "shutdown", RecordType.EVOLUTION, 5)
    registry.shutdown()
    store.shutdown()


def app() -> int:
    setup_logging(settings.LOG_LEVEL, json_mode=settings.is_prod)
    log = logging.getLogger("main")

    store, registry = build_core()
    try:
        if not store.save("Kurama brain initialized", "init", RecordType.EVOLUTION, 10):
            log.error("Could not record startup")
            return 1
        log.info("Kurama core %s ready: %d processors active", KURAMA_VERSION, registry.active_count)

        print(render_store_stats(store.stats()))
        print(render_store_listing(store.records()))
        print(render_processor_listing(registry.processors(), registry.stats()))
    finally:
        shutdown_core(store, registry)
        log.info("Shutdown complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(app())
