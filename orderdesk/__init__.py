"""Order, client and invoice management backend"""

__version__ = "0.1.0"
