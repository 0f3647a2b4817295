# coding=utf-8
import logging
import weakref

from montyvm.virtual_machine_error import AllocationError

log = logging.getLogger(__name__)

INT32_MIN = -2 ** 31


def to_int32(value):
    """Wrap an integer to the signed 32-bit range (two's complement)."""
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


class Node(object):
    """
    one stack element: `value`, an owning link to the next-older node
    and a weak back-link to the next-newer one
    """
    __slots__ = ['value', 'next', '_prev', '__weakref__']

    def __init__(self, value, next_node=None):
        self.value = value
        self.next = next_node
        self._prev = None

    @property
    def prev(self):
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, node):
        self._prev = weakref.ref(node) if node is not None else None


class Stack(object):
    """
    doubly linked LIFO of signed 32-bit integers, newest first.
    `head` owns the whole chain; an empty stack has `head` set to None.
    """

    def __init__(self):
        self.head = None
        self.size = 0

    """
    Data stack manipulation
    """

    def push(self, value):
        """
        push a value on top of the stack.
        The value is not re-validated, negative numbers are accepted.
        :param value: int
        """
        try:
            node = Node(to_int32(value), self.head)
        except MemoryError:
            raise AllocationError()
        if self.head is not None:
            self.head.prev = node
        self.head = node
        self.size += 1
        log.debug("push %d (depth %d)", node.value, self.size)

    def top(self):
        """
        top
        :return: value of the newest node
        """
        if self.head is None:
            raise IndexError("top of empty stack")
        return self.head.value

    def print_all(self):
        """Yield every value from the newest to the oldest."""
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    __iter__ = print_all

    def release_all(self):
        """
        unlink every node exactly once and leave the stack empty.
        Calling it on an empty stack does nothing.
        """
        released = 0
        node = self.head
        self.head = None
        while node is not None:
            older = node.next
            node.next = None
            node = older
            released += 1
        self.size = 0
        if released:
            log.debug("released %d node(s)", released)

    def __len__(self):
        return self.size

    def __bool__(self):
        return self.head is not None

    def __repr__(self):
        return "Stack(%r)" % list(self)
