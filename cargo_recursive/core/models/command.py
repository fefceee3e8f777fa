"""
Command specification models.

The command run in every matched directory is either an arbitrary external
binary (first token is the binary) or the fixed default tool with every token
passed as an argument. The two shapes are a tagged union so the coupling
between "external" and "first token is the binary" lives in one place.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import Field

from ..exceptions import EmptyCommandError
from .base import ImmutableModel
from .config import DEFAULT_BINARY


class ExternalCommand(ImmutableModel):
    """Run ``tokens[0]`` with ``tokens[1:]`` as its arguments."""

    kind: Literal["external"] = "external"
    tokens: tuple[str, ...] = ()

    def to_argv(self) -> list[str]:
        """Build the argument vector passed to the OS.

        Raises:
            EmptyCommandError: If there is no binary to run
        """
        if not self.tokens:
            raise EmptyCommandError()
        return list(self.tokens)


class ToolCommand(ImmutableModel):
    """Run the fixed default tool with every token as an argument."""

    kind: Literal["tool"] = "tool"
    tool: Annotated[str, Field(min_length=1)] = DEFAULT_BINARY
    tokens: tuple[str, ...] = ()

    def to_argv(self) -> list[str]:
        """Build the argument vector passed to the OS.

        Raises:
            EmptyCommandError: If no arguments were given for the tool
        """
        if not self.tokens:
            raise EmptyCommandError()
        return [self.tool, *self.tokens]


Invocation = Annotated[ExternalCommand | ToolCommand, Field(discriminator="kind")]


class CommandSpec(ImmutableModel):
    """Immutable description of what to run in each matched directory.

    Attributes:
        invocation: External binary or default tool, with its tokens
        forward_output: Write captured stdout/stderr to our own streams
        exit_on_error: Treat a failing exit status as a fatal error
    """

    invocation: Invocation
    forward_output: bool = True
    exit_on_error: bool = False

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[str],
        *,
        external: bool = False,
        tool: str = DEFAULT_BINARY,
        forward_output: bool = True,
        exit_on_error: bool = False,
    ) -> CommandSpec:
        """Build a specification from the positional command tokens.

        Raises:
            EmptyCommandError: If no tokens were given
        """
        token_tuple = tuple(tokens)
        if not token_tuple:
            raise EmptyCommandError("No command specified")

        invocation: ExternalCommand | ToolCommand
        if external:
            invocation = ExternalCommand(tokens=token_tuple)
        else:
            invocation = ToolCommand(tool=tool, tokens=token_tuple)

        return cls(
            invocation=invocation,
            forward_output=forward_output,
            exit_on_error=exit_on_error,
        )

    @property
    def tokens(self) -> tuple[str, ...]:
        return self.invocation.tokens

    def to_argv(self) -> list[str]:
        return self.invocation.to_argv()

    def display(self) -> str:
        """Human-readable rendering of the command, for traces."""
        return " ".join(self.invocation.to_argv()) if self.tokens else ""
