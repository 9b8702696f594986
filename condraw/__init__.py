"""Character-cell drawing on an in-memory console screen: boxes, connectors,
shapes, text frames, binary trees, a line editor and a weighted graph viewer."""

__version__ = "0.1.0"