"""Arithmetic service used as a remotely exposed subject."""

from surrogate.core.dispatch import Dispatchable


class MathService(Dispatchable):
    exposed_operations = ("add",)

    def add(self, a, b):
        return a + b
