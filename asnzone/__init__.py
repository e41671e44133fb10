""" Asnzone main package """

from .exit_code import ExitCode
from .cli_commands import CLICommands
