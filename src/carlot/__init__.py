"""carlot - dealership inventory and contract manager."""

__version__ = "0.1.0"
