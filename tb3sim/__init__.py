"""Kinematic TurtleBot3 simulation, message types and a reactive obstacle-avoiding drive controller."""

__version__ = "0.1.0"
__all__ = ["messages", "fake", "drive"]