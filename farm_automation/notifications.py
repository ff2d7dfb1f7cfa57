"""
Short-lived messages telling the player what happened on the farm.
"""
import logging

import simpy

logger = logging.getLogger(__name__)


class NotificationSink:
    """
    Holds at most one current message. Each message expires `ttl` time units
    after it was posted on the SimPy environment; posting a new message
    interrupts the pending expiry of the previous one.
    """
    def __init__(self, env, ttl=5000):
        self.env = env
        self.ttl = ttl
        self.current = None
        self.history = []  # (env time, message)
        self._expiry = None

    def push(self, message):
        self.cancel_expiry()
        self.current = message
        self.history.append((self.env.now, message))
        logger.info("[%s] %s", self.env.now, message.replace("\n", " | "))
        self._expiry = self.env.process(self._expire(self.ttl))

    def cancel_expiry(self):
        if self._expiry is not None and self._expiry.is_alive:
            self._expiry.interrupt("replaced")
        self._expiry = None

    def clear(self):
        self.cancel_expiry()
        self.current = None

    def _expire(self, delay):
        try:
            yield self.env.timeout(delay)
        except simpy.Interrupt:
            return
        self.current = None
        self._expiry = None
