# coding=utf-8
import logging

from montyvm.virtual_machine import VirtualMachine
from montyvm.virtual_machine_error import FileOpenError

log = logging.getLogger(__name__)


def run_monty_file(filename, vm=None):
    """Run a monty bytecode file.
    `filename` is the path to the file to execute. The stack of `vm` is
    released on every way out, including when an error propagates.
    """
    vm = vm or VirtualMachine()
    try:
        try:
            f = open(filename, 'r', encoding='utf-8', errors='replace', newline='\n')
        except OSError as e:
            log.debug("open %s failed: %s", filename, e)
            raise FileOpenError(filename)
        with f:
            vm.run_lines(f)
    finally:
        vm.stack.release_all()
    return vm
