"""Classic data structures over id-carrying records: lists, stack, queues, deque and tree."""

__version__ = "0.1.0"