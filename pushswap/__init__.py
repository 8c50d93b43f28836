"""Sort integers with two stacks and produce the stack operations used, plus small string, byte and output helpers."""

__version__ = "1.0.0"