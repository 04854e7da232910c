#! /usr/bin/python3
"""
Command line front end: prints files and derives words of a sample grammar.
"""
import random
import sys

import plac

from grammar.errors import GrammarError
from grammar.leftmost_derivation import LeftmostDerivation
from grammar.rewriting import Grammar, Rule
from util.file_printing import print_file
from util.logger import Logger

HELP = "help"
PRINT = "print"
LIST = "list"
DERIVE = "derive"
COMMANDS = [HELP, PRINT, LIST, DERIVE]

NO_WORD = "No word generated"

COMMAND_HELP = {
    HELP: "Provides help information for rose commands\n\n"
          "help [command]",
    PRINT: "Prints the contents of a file.\n\n"
           "print <file_path> [--numbered]\n\n"
           "- The file path is required following the print argument.\n"
           "- The numbered flag is optional, adding it prefixes every line with its line number.",
    LIST: "Prints all usable commands.\n\n"
          "list [rules]\n\n"
          "- With 'rules', prints the rules of the sample grammar instead.",
    DERIVE: "Derives a random word from the sample grammar.\n\n"
            "derive [random] [--max-steps N] [--seed N] [--history] [--log FILE]\n\n"
            "- Gives up after N rule applications (default 20).",
}

SUMMARY = {
    HELP: "Provides help information for rose commands",
    PRINT: "Prints text from a specified file",
    LIST: "Prints all commands",
    DERIVE: "Derives a random word from the sample grammar",
}


class DeriveSettings:
    def __init__(self):
        self.max_steps = 20
        self.seed = None
        self.history = False
        self.log_path = None

    def __str__(self):
        __str = "Derive Settings {\n"
        for key in self.__dict__:
            if not key.startswith("__"):
                __str += "\t" + key + ": " + str(self.__dict__[key]) + "\n"
        return __str + "}"


def sample_grammar():
    return Grammar([Rule('S', 'aA'), Rule('A', 'AAa'), Rule('A', 'b')])


def help_command(topic=None, out=None):
    out = out if out is not None else sys.stdout
    if topic is None:
        for command in COMMANDS:
            print(command.upper() + "\t\t" + SUMMARY[command], file=out)
        return
    topic = topic.lower()
    if topic in COMMAND_HELP:
        print(COMMAND_HELP[topic], file=out)
    else:
        print("Command not found", file=out)


def list_command(target=None, grammar=None, out=None):
    out = out if out is not None else sys.stdout
    if target is None:
        for command in COMMANDS:
            print(command.upper(), file=out)
    elif target == "rules":
        grammar = grammar if grammar is not None else sample_grammar()
        for rule in grammar.rules:
            print(rule.display(), file=out)
    else:
        raise ValueError("Unknown list target: " + target)


def derive_command(settings, grammar=None, out=None):
    """
    :type settings: DeriveSettings
    :return: the derived word or None
    """
    out = out if out is not None else sys.stdout
    grammar = grammar if grammar is not None else sample_grammar()
    rng = random.Random(settings.seed)
    derivation = LeftmostDerivation(grammar)
    logger = Logger(settings.log_path, stream=out) if settings.log_path is not None else None
    try:
        if logger is not None:
            print(settings, file=logger)
            print(grammar.display(), end='', file=logger)
        word = derivation.derive_random(max_steps=settings.max_steps, rng=rng, logger=logger)
    finally:
        if logger is not None:
            logger.close()
    print(word if word is not None else NO_WORD, file=out)
    if settings.history:
        print(derivation.get_history(), file=out)
    return word


@plac.annotations(
    command=('command to run', 'positional', None, str, COMMANDS),
    target=('help topic, file path for print, "rules" for list, "random" for derive', 'positional', None, str),
    numbered=('print: prefix lines with line numbers', 'flag', 'n'),
    history=('derive: print the derivation history', 'flag', 'H'),
    max_steps=('derive: maximal number of rule applications', 'option', 'm', int),
    seed=('derive: random seed', 'option', 's', int),
    log=('derive: append a trace of the derivation to this file', 'option', 'l', str),
    )
def main(command, target=None, numbered=False, history=False, max_steps=20, seed=None, log=None):
    """
    rose: leftmost derivations over single character grammars.
    """
    try:
        if command == HELP:
            help_command(target)
        elif command == PRINT:
            if target is None:
                raise ValueError("Missing file path for print")
            print_file(target, numbered=numbered)
        elif command == LIST:
            list_command(target)
        elif command == DERIVE:
            if target not in (None, "random"):
                raise ValueError("Unknown derive mode: " + target)
            settings = DeriveSettings()
            settings.max_steps = max_steps
            settings.seed = seed
            settings.history = history
            settings.log_path = log
            derive_command(settings)
    except (GrammarError, ValueError, IOError) as e:
        print("Application error: " + str(e), file=sys.stderr)
        return 1
    return 0


def cli():
    sys.exit(plac.call(main))


if __name__ == '__main__':
    cli()
