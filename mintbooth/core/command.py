"""
Provides support for the Command pattern.

Every booth operation (settings, print requests, free mint claims, sponsored group building)
is modeled as a command object. Dependencies are injected through the constructor and the
command is invoked as a function.
"""
from abc import ABC, abstractmethod
from logging import Logger
from typing import TypeVar, Generic

from mintbooth.core.logging import get_logger

Args = TypeVar("Args")

Result = TypeVar("Result")


class Command(Generic[Args, Result], ABC):
    """
    Commands are invoked as functions
    """

    @abstractmethod
    def __call__(self, args: Args) -> Result:
        """
        Executes the command
        """

    def get_logger(self, name: str | None = None) -> Logger:
        """
        Returns a logger named after the command class, see :func:`mintbooth.core.logging.get_logger`
        """
        return get_logger(self, name)
