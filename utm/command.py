from abc import ABC, abstractmethod
from pathlib import PurePath

from buildbot.plugins import steps
from utm.processor import OptionsGenerator


class Command(ABC):
    """
    Base class for commands handed to a build step.
    Attributes:
        name (str): The name of the command.
        workdir (PurePath): The working directory where the command will be executed.
    """

    def __init__(self, name, workdir: PurePath):
        self.name = name
        self.workdir = workdir

    @abstractmethod
    def as_cmd_arg(self) -> list[str]:
        pass


class UTMCommand(Command):
    """
    A command running a program with serialized UTM options.
    Attributes:
        name (str): The name of the command.
        generator (OptionsGenerator): Provides the program and its options.
        workdir (PurePath): The working directory for the command.
    """

    def __init__(
        self,
        name: str,
        generator: OptionsGenerator,
        workdir: PurePath = PurePath("."),
    ):
        assert isinstance(generator, OptionsGenerator)
        self.generator = generator
        super().__init__(name=f"UTM - {name}", workdir=workdir)

    def as_cmd_arg(self) -> list[str]:
        return self.generator.generate()

    def as_step(self, **kwargs) -> steps.ShellCommand:
        """
        Wraps the command in a ShellCommand step. Extra keyword arguments
        are passed to the step.
        """
        return steps.ShellCommand(
            name=self.name,
            command=self.as_cmd_arg(),
            workdir=str(self.workdir),
            **kwargs,
        )
