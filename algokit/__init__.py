"""Classic algorithms on trees, graphs, strings, arrays, heaps and bits in pure Python."""

__version__ = "0.1.0"