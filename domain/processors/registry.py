"""Bounded registry of typed, activatable processors with first-match dispatch."""
from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Tuple

from core.logging import get_logger
from domain.errors import CapacityExceeded, InvalidArgument, NotFound, require_text

from .capabilities import (
    Capability,
    Clock,
    CreativityCapability,
    EmotionCapability,
    LearningCapability,
    NullCapability,
    PersonalityCapability,
)
from .loader import load_roster
from .models import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PROCESSORS,
    InitHook,
    Processor,
    ProcessorType,
    RegistryStats,
    Roster,
    TeardownHook,
)

log = get_logger("processor_registry")

_CAPABILITIES: Dict[ProcessorType, Callable[[Clock], Capability]] = {
    ProcessorType.PERSONALITY: PersonalityCapability,
    ProcessorType.EMOTION: lambda clock: EmotionCapability(),
    ProcessorType.CREATIVITY: lambda clock: CreativityCapability(),
    ProcessorType.LEARNING: lambda clock: LearningCapability(),
}


def capability_for(ptype: ProcessorType, clock: Clock = time.time) -> Capability:
    factory = _CAPABILITIES.get(ptype)
    if factory is None:
        return NullCapability()
    return factory(clock)


class ProcessorRegistry:
    """
    Holds at most ``max_processors`` processors in registration order.

    Usage:
      reg = ProcessorRegistry()
      reg.register("EmotionEngine", "Emotional understanding", ProcessorType.EMOTION)
      reg.activate("EmotionEngine")
      reg.dispatch("I am so happy", ProcessorType.EMOTION)

    Names are not required to be unique; ``find`` and the activation calls
    always resolve to the earliest registration.
    """

    def __init__(self, max_processors: int = MAX_PROCESSORS, *, clock: Clock = time.time) -> None:
        self._max = max_processors
        self._clock = clock
        self._processors: List[Processor] = []
        self._total_loaded = 0
        self._active_count = 0
        log.info("registry_initialized", max_processors=max_processors)

    # ---------- stats ----------

    @property
    def count(self) -> int:
        return len(self._processors)

    @property
    def active_count(self) -> int:
        return self._active_count

    @property
    def total_loaded(self) -> int:
        return self._total_loaded

    def stats(self) -> RegistryStats:
        return RegistryStats(count=self.count, active_count=self._active_count, total_loaded=self._total_loaded)

    def processors(self) -> Tuple[Processor, ...]:
        return tuple(self._processors)

    # ---------- registration ----------

    def register(
        self,
        name: str,
        description: str,
        type: ProcessorType,
        *,
        init_hook: Optional[InitHook] = None,
        teardown_hook: Optional[TeardownHook] = None,
    ) -> bool:
        return self._register(name, description, type, init_hook=init_hook, teardown_hook=teardown_hook) is not None

    def _register(
        self,
        name: str,
        description: str,
        type: ProcessorType,
        *,
        init_hook: Optional[InitHook] = None,
        teardown_hook: Optional[TeardownHook] = None,
    ) -> Optional[Processor]:
        try:
            name = require_text(name, "name")
            description = require_text(description, "description")
            try:
                ptype = ProcessorType(type)
            except ValueError as exc:
                raise InvalidArgument(str(exc)) from exc
            if self.count >= self._max:
                raise CapacityExceeded(f"registry already holds {self._max} processors")
        except (InvalidArgument, CapacityExceeded) as exc:
            log.warning("processor_register_rejected", name=name, reason=str(exc))
            return None

        processor = Processor(
            name=name[:MAX_NAME_LENGTH],
            description=description[:MAX_DESCRIPTION_LENGTH],
            type=ptype,
            capability=capability_for(ptype, self._clock),
            priority=self.count,
            init_hook=init_hook,
            teardown_hook=teardown_hook,
        )
        self._processors.append(processor)
        self._total_loaded += 1
        log.info("processor_loaded", name=processor.name, type=ptype.label, priority=processor.priority)
        return processor

    def load_defaults(self, roster: Optional[Roster] = None) -> int:
        """Register and activate every roster entry; returns how many were registered."""
        if roster is None:
            roster = load_roster()
        registered: List[Tuple[Processor, bool]] = []
        for entry in roster.entries:
            processor = self._register(entry.name, entry.description, entry.type)
            if processor is not None:
                registered.append((processor, entry.active))
        for processor, active in registered:
            if active:
                self._activate(processor)
        loaded = len(registered)
        log.info("default_processors_loaded", loaded=loaded, active=self._active_count)
        return loaded

    # ---------- lookup ----------

    def _lookup(self, name: str) -> Processor:
        name = require_text(name, "name")
        for processor in self._processors:
            if processor.name == name:
                return processor
        raise NotFound(f"processor {name!r} not registered")

    def find(self, name: str) -> Optional[Processor]:
        try:
            return self._lookup(name)
        except (InvalidArgument, NotFound):
            return None

    # ---------- activation ----------

    def activate(self, name: str) -> bool:
        try:
            processor = self._lookup(name)
        except (InvalidArgument, NotFound) as exc:
            log.info("processor_activate_miss", name=name, reason=str(exc))
            return False
        return self._activate(processor)

    def _activate(self, processor: Processor) -> bool:
        if processor.is_active:
            log.debug("processor_already_active", name=processor.name)
            return True
        if processor.init_hook is not None and not processor.init_hook():
            log.warning("processor_init_failed", name=processor.name)
            return False
        processor.is_active = True
        self._active_count += 1
        log.info("processor_activated", name=processor.name)
        return True

    def deactivate(self, name: str) -> bool:
        try:
            processor = self._lookup(name)
        except (InvalidArgument, NotFound) as exc:
            log.info("processor_deactivate_miss", name=name, reason=str(exc))
            return False
        if not processor.is_active:
            log.debug("processor_already_inactive", name=name)
            return True
        if processor.teardown_hook is not None:
            processor.teardown_hook()
        processor.is_active = False
        self._active_count -= 1
        log.info("processor_deactivated", name=name)
        return True

    # ---------- dispatch ----------

    def dispatch(self, text: str | None, type: ProcessorType) -> Optional[str]:
        """Run the first active processor of ``type``; at most one is invoked."""
        if text is None:
            return None
        try:
            ptype = ProcessorType(type)
        except ValueError:
            log.debug("processor_dispatch_miss", type=type, reason="unknown processor type")
            return None
        for processor in self._processors:
            if processor.type is ptype and processor.is_active:
                result = processor.process(text)
                log.debug("processor_dispatched", name=processor.name, type=ptype.label, produced=result is not None)
                return result
        log.debug("processor_dispatch_miss", type=ptype.label)
        return None

    def shutdown(self) -> None:
        log.info("registry_shutdown", processors=self.count)
        try:
            for processor in self._processors:
                if processor.is_active and processor.teardown_hook is not None:
                    try:
                        processor.teardown_hook()
                    except Exception:
                        log.exception("processor_teardown_failed", name=processor.name)
        finally:
            self._processors = []
            self._active_count = 0
