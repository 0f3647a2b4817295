# coding=utf-8


class MontyError(Exception):
    """
    Base class of every fatal interpreter error.
    str(error) is the exact message written to stderr.
    """
    exit_code = 1


class UsageError(MontyError):
    def __init__(self):
        super(UsageError, self).__init__("USAGE: monty file")


class FileOpenError(MontyError):
    def __init__(self, path):
        super(FileOpenError, self).__init__("Error: Can't open file %s" % path)
        self.path = path


class InvalidPushArgument(MontyError):
    def __init__(self, line_number):
        super(InvalidPushArgument, self).__init__(
            "L%d: usage: push integer" % line_number
        )
        self.line_number = line_number


class UnknownInstruction(MontyError):
    def __init__(self, line_number, opcode):
        super(UnknownInstruction, self).__init__(
            "L%d: unknown instruction %s" % (line_number, opcode)
        )
        self.line_number = line_number
        self.opcode = opcode


class AllocationError(MontyError):
    def __init__(self):
        super(AllocationError, self).__init__("Error: malloc failed")
