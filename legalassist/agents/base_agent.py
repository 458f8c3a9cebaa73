import logging
import time

logger = logging.getLogger(__name__)


class BaseAgent:
    """Common base for the analysis agents.

    The bundled agents return canned responses after a fixed delay standing in
    for a call to a hosted model. A client backed by a real model subclasses
    this and keeps the same public method names.
    """

    latency = 1.0

    def __init__(self, latency_scale=1.0):
        self.latency_scale = latency_scale

    def _simulate_latency(self):
        delay = self.latency * self.latency_scale
        logger.debug("%s waiting %.2fs", type(self).__name__, delay)
        if delay > 0:
            time.sleep(delay)
