"""Classic algorithms and data structures in plain Python: string matching, range-query trees, tries, queues, trees, graphs and more."""

__version__ = "0.1.0"