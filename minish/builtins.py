"""Commands the shell runs itself: cd, echo, env, exit, export, pwd and unset."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from typing import TextIO

from minish.env import Environment, export_line
from minish.expand import expand, unquote

_ECHO_FLAG = re.compile(r"""(?:"-n+"|'-n+'|-n+)(?= |$)""")
_DIGITS = re.compile(r"[0-9]+")
_PWD_USAGE = "pwd: usage: pwd [-LP]\n"


class ExitRequest(Exception):
    """Raised by ``exit`` when the shell should stop.

    ``status`` is the exit status to use, or ``None`` to keep the last one.
    """

    def __init__(self, status: int | None = None) -> None:
        super().__init__(status)
        self.status = status


def _report(stream: TextIO, subject: str, error: OSError) -> None:
    stream.write(f"{subject}: {error.strerror}\n")


def echo_flag_length(text: str) -> int:
    """Return the length of a leading ``-n`` flag (possibly quoted), or 0."""
    match = _ECHO_FLAG.match(text)
    return match.end() if match else 0


def builtin_cd(args: Sequence[str], env: Environment, stderr: TextIO) -> int:
    """Change directory; ``args`` starts with the command name. Return the status."""
    if len(args) > 2:
        stderr.write("cd: too many arguments\n")
        return 1
    if len(args) == 1 or args[1] == "~":
        home = env.get("HOME")
        if home is None:
            stderr.write("cd: HOME not set\n")
            return 1
        target = home
    else:
        target = args[1]
    try:
        os.chdir(target)
    except OSError as error:
        _report(stderr, target, error)
        return 1
    return 0


def builtin_echo(
    command: str, env: Environment, exit_status: int, stdout: TextIO
) -> int:
    """Print the arguments of a raw ``echo`` command text. Return the status."""
    if len(command) <= 4:
        stdout.write("\n")
        return 0
    text = command[5:]
    flag = echo_flag_length(text)
    if flag:
        text = text[flag:].lstrip(" ")
    output = unquote(expand(text, env, exit_status))
    stdout.write(output if flag else output + "\n")
    return 0


def builtin_env(env: Environment, stdout: TextIO) -> int:
    """Print every variable that has a value. Return the status."""
    for entry in env:
        if "=" in entry:
            stdout.write(entry + "\n")
    return 0


def builtin_exit(argument_text: str, stderr: TextIO) -> int:
    """Handle ``exit`` given the text after the command name.

    Raises ``ExitRequest`` when the shell should stop; returns 1 when there are
    too many arguments and the shell goes on.
    """
    text = argument_text.lstrip(" ")
    if not text:
        raise ExitRequest(None)
    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    match = _DIGITS.match(text)
    rest = text[match.end():] if match else text
    if match is None or (rest and rest[0] != " "):
        stderr.write("exit: numeric argument required\n")
        raise ExitRequest(2)
    if rest.strip(" "):
        stderr.write("exit: too many arguments\n")
        return 1
    raise ExitRequest((sign * int(match.group())) & 0xFF)


def builtin_export(
    args: Sequence[str], env: Environment, stdout: TextIO, stderr: TextIO
) -> int:
    """List or set exported variables; ``args`` starts with the command name."""
    if not len(env):
        return 0
    if len(args) == 1:
        for entry in env.sorted_entries():
            stdout.write(export_line(entry) + "\n")
        return 0
    status = 0
    for argument in args[1:]:
        try:
            env.export(argument)
        except ValueError as error:
            stderr.write(f"minishell: export: {error}\n")
            status = 1
    return status


def builtin_pwd(args: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    """Print the working directory; any option is refused. Return the status."""
    if len(args) > 1:
        option = args[1]
        if option.startswith("-") and len(option) > 1:
            if option[1] != "-":
                stderr.write(f"pwd: -{option[1]}: invalid option\n")
                stderr.write(_PWD_USAGE)
                return 2
            if len(option) > 2:
                stderr.write("pwd: --: invalid option\n")
                stderr.write(_PWD_USAGE)
                return 2
    try:
        current = os.getcwd()
    except OSError as error:
        _report(stderr, "pwd", error)
        return 0
    stdout.write(current + "\n")
    return 0


def builtin_unset(command: str, env: Environment) -> int:
    """Remove the variables named after the command name in a raw command text."""
    names = [word for word in command.split(" ") if word]
    env.unset(names[1:])
    return 0