import logging
from typing import Iterable

from utm.options import Option

logger = logging.getLogger(__name__)


def process_options(options: Iterable[Option]) -> str:
    """
    Concatenates the rendered options in the given order.
    Every option supplies its own trailing separator.
    """
    options = list(options)
    logger.debug(f"Processing {len(options)} options")
    return "".join(option.render() for option in options)


class OptionsGenerator:
    """
    Builds a command as a list of strings: base_cmd followed by the
    serialized options split into separate arguments.
    """

    def __init__(self, base_cmd: list[str], options: Iterable[Option] = ()):
        self.base_cmd = base_cmd
        self.options: list[Option] = []
        self.append_options(options)

    def append_options(self, options: Iterable[Option]):
        """
        Appends options after the existing ones. Duplicates are kept.
        """
        for option in options:
            assert isinstance(option, Option)
            self.options.append(option)

    def generate(self) -> list[str]:
        result = self.base_cmd.copy()
        # Values holding whitespace end up split, nothing is quoted.
        result += process_options(self.options).split()
        return result
