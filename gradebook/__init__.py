"""Records, password scrambling, course scoring and console menus for a gradebook."""

__version__ = "0.1.0"