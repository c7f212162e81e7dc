"""
connect_four - Console Connect Four on a board of any size

This package provides the board representation, the drop and win rules,
the turn loop, a random computer opponent and the console front-end.
"""

# Version number
__version__ = '0.1.0'
