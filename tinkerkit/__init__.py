"""Linked lists, queues and a heap, small algorithms, text and file helpers, and tiny socket tools."""

__version__ = "0.1.0"