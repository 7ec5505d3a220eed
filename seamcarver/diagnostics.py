"""
Progress reporting for carving sessions.

A SeamCarver calls into a Reporter at fixed points of every cycle. The
default Reporter ignores everything; LoggingReporter forwards events to
the standard logging module. Reporters only observe; nothing they do
feeds back into the carving.
"""

import logging

logger = logging.getLogger(__name__)


class Reporter:
    """No-op reporter. Subclass and override the events you care about."""

    def cycle_started(self, index: int, total: int) -> None:
        pass

    def map_built(self, name: str, shape) -> None:
        pass

    def seam_chosen(self, index: int, seam) -> None:
        pass

    def seam_removed(self, index: int, shape) -> None:
        pass


class LoggingReporter(Reporter):
    """
    Log carving progress.

    Args:
        level: 1 logs cycle, map and carving milestones; 2 also logs the
            coordinates of every chosen seam
        log: Logger to write to (defaults to this module's logger)
    """

    def __init__(self, level: int = 1, log: logging.Logger = None):
        self.level = level
        self.log = log or logger

    def cycle_started(self, index, total):
        if self.level > 0:
            self.log.info(f"----- Carving seam #{index + 1} of {total} -----")

    def map_built(self, name, shape):
        if self.level > 0:
            self.log.info(f"Created {name} map {tuple(shape)}")

    def seam_chosen(self, index, seam):
        if self.level > 1:
            self.log.info(f"Chose seam {' '.join(str(i) for i in seam)}")

    def seam_removed(self, index, shape):
        if self.level > 0:
            self.log.info(f"Carved seam #{index + 1}, image is now {tuple(shape)}")


class RecordingReporter(Reporter):
    """Keep every event as a tuple in ``events``."""

    def __init__(self):
        self.events = []

    def cycle_started(self, index, total):
        self.events.append(('cycle_started', index, total))

    def map_built(self, name, shape):
        self.events.append(('map_built', name, tuple(shape)))

    def seam_chosen(self, index, seam):
        self.events.append(('seam_chosen', index, list(seam)))

    def seam_removed(self, index, shape):
        self.events.append(('seam_removed', index, tuple(shape)))
