"""
This module contains the IOInterface abstract base class and its implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for text input/output in the console games.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Always quits, so an interactive loop ends immediately."""
        return "q"


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays scripted input.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted response, or "q" once the script runs out.

    def add_input(self, response):
        Append a response to the script.
    """

    __test__ = False

    def __init__(self, responses: Iterable[str] = ()):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.input_responses: List[str] = list(responses)

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return "q"

    def add_input(self, response: str) -> None:
        """Add a response to the end of the script."""
        self.input_responses.append(response)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            return "q"
