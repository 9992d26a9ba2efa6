"""EventLogProcessor — rebuilds the tree from a recorded JSON-lines event log."""

from __future__ import annotations

import logging

from buildoutline.core.processor import BuildOutputProcessor
from buildoutline.models.events import load_events

logger = logging.getLogger(__name__)


class EventLogProcessor(BuildOutputProcessor):
    """A processor whose associated file is an event log.

    ``process()`` replays the file only while ``needs_processing`` is
    set; call ``clear()`` to force a rebuild.

    Raises
    ------
    FileNotFoundError
        From ``process()``, if the event log does not exist.
    EventLogError
        From ``process()``, if a line cannot be decoded.
    """

    def process(self) -> None:
        if not self.needs_processing:
            return
        events = load_events(self.file_name)
        self.clear()
        count = self.replay(events)
        logger.info("Processed %d events from %s.", count, self.file_name)
        super().process()
