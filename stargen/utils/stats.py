import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1000


@dataclass
class GenerationStats:
    """Counters for one generation run."""

    accepted: int = 0
    candidates: int = 0
    center_rejections: int = 0
    distance_rejections: int = 0

    @property
    def rejections(self) -> int:
        return self.center_rejections + self.distance_rejections

    def log_progress(self, target: int):
        if self.accepted % PROGRESS_INTERVAL == 0:
            logger.debug("%d/%d stars placed (%d candidates drawn)", self.accepted, target, self.candidates)

    def log_summary(self, strategy: str):
        logger.info(
            "%s: %d stars from %d candidates (%d center rejections, %d distance rejections)",
            strategy, self.accepted, self.candidates, self.center_rejections, self.distance_rejections,
        )
