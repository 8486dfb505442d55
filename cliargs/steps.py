"""
Step Pipeline.

Threads a value through a chain of callables, each step receiving the output
of the previous one:

    Step(" 42 ").then(str.strip).then(int).end(print)
"""

import typing


class Step:
    def __init__(self, value: typing.Any):
        self.value = value

    def then(self, step: typing.Callable[[typing.Any], typing.Any]) -> "Step":
        return Step(step(self.value))

    def end(self, step: typing.Callable[[typing.Any], None]) -> "Step":
        step(self.value)
        return Step(None)
