"""Classic algorithms and data structures: lists, stacks, queues, heaps, sorting,
matrices, string matching, plane geometry, and a travelling-salesman toolkit."""

__version__ = "0.1.0"