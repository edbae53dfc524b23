from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..core import EventStore
from ..data import load_events, load_sample_events

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings and the event store."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(default_factory=EventStore)

    def seed(self) -> int:
        """Fill the store from the configured fixture, or the bundled samples."""

        seed = self.settings.seed
        if seed.seed_file is not None:
            events = load_events(seed.seed_file)
        elif seed.load_samples:
            events = load_sample_events()
        else:
            logger.debug("No seed configured; starting with an empty calendar")
            return 0
        self.store.replace_all(events)
        return len(events)
