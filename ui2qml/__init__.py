"""Read Qt Designer .ui elements into a node tree and write it as QML widget code."""

__version__ = "0.1.0"