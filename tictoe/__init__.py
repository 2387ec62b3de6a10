"""Console tic-tac-toe against a random computer opponent, driven by gamepad button names."""

__version__ = "0.1.0"
__all__ = ["controls", "game"]