from ircline.commands.registry import COMMANDS, CommandRegistry
from ircline.commands.tokenizer import CommandLine, tokenize

__all__ = ["COMMANDS", "CommandLine", "CommandRegistry", "tokenize"]
