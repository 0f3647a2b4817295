# coding=utf-8
import logging
import re

import click

from montyvm.stack import Stack
from montyvm.validators import is_number
from montyvm.virtual_machine_error import InvalidPushArgument, UnknownInstruction

log = logging.getLogger(__name__)

# what C strtol hands back on a 64-bit platform
LONG_MIN = -2 ** 63
LONG_MAX = 2 ** 63 - 1

# C isspace; Unicode separators such as \xa0 stay inside tokens
WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def parse_integer(token):
    """
    parse a decimal literal, saturating at the signed 64-bit range.
    The stack narrows the result to 32 bits when it stores it.
    :param token: str accepted by `is_number`
    :rtype: int
    """
    return max(LONG_MIN, min(LONG_MAX, int(token)))


class VirtualMachine(object):
    def __init__(self, stack=None, write=None):
        self.stack = stack if stack is not None else Stack()
        self.write = write or click.echo

    def parse_line(self, line):
        """
        split a line into its opcode and the remaining tokens.
        Blank lines and comments give an opcode of None.
        """
        tokens = [token for token in WHITESPACE.split(line) if token]
        if not tokens or tokens[0].startswith('#'):
            return None, []
        return tokens[0], tokens[1:]

    def dispatch(self, line, line_number):
        """
        Dispatch by opcode to the corresponding `op_` method.
        Errors are raised to the caller, which owns the cleanup.
        """
        opcode, arguments = self.parse_line(line)
        if opcode is None:
            return
        opcode_fn = getattr(self, 'op_%s' % opcode, None)
        if opcode_fn is None:
            raise UnknownInstruction(line_number, opcode)
        log.debug("L%d: %s %s", line_number, opcode, ' '.join(arguments))
        opcode_fn(arguments, line_number)

    def run_lines(self, lines):
        """
        feed every line to `dispatch`, counting lines from 1
        :param lines: iterable of str
        """
        for line_number, line in enumerate(lines, 1):
            self.dispatch(line, line_number)

    ## Opcodes

    def op_push(self, arguments, line_number):
        """
        push <integer>
        :param arguments: tokens following the opcode
        :param line_number: used in the error message
        """
        argument = arguments[0] if arguments else None
        if not is_number(argument):
            raise InvalidPushArgument(line_number)
        self.stack.push(parse_integer(argument))

    def op_pall(self, arguments, line_number):
        """
        print the stack, newest value first
        """
        for value in self.stack.print_all():
            self.write("%d" % value)
