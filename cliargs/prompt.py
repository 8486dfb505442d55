"""
Interactive Question/Answer Helper.

Fills caller-owned data from answers typed at the terminal, one question at a
time. It never touches a parser; callers use it next to one, for example to
ask for values the command line left out.

    person = Question({}) \
        .ask_with_default("Name", "anonymous") \
        .then(lambda ans, d: d.update(name=ans)) \
        .end()
"""

import typing

from rich.prompt import Prompt

from .printer import cons


Asker = typing.Callable[[str, typing.Optional[str]], str]


def ask_terminal(question: str, default: typing.Optional[str] = None) -> str:
    if default is None:
        return Prompt.ask(question, console=cons.raw)

    return Prompt.ask(question, default=default, console=cons.raw)


class Question:
    def __init__(self, data: typing.Any, asker: Asker = None):
        self.data     = data
        self.question = ""
        self.default: typing.Optional[str] = None
        self.asker    = asker if asker is not None else ask_terminal

    def ask(self, question: str) -> "Question":
        self.question = question
        self.default  = None
        return self

    def ask_with_default(self, question: str, default: str) -> "Question":
        self.question = question
        self.default  = default
        return self

    def then(self, handler: typing.Callable[[str, typing.Any], None]) -> "Question":
        """ Ask the current question and hand the answer to handler along
            with the data being filled in. """
        answer = self.asker(self.question, self.default)
        handler(answer, self.data)
        return self

    def end(self) -> typing.Any:
        return self.data
