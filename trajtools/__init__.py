"""Record odometry as trajectories, save and load them as JSON, CSV or YAML, and draw them as markers."""

__version__ = "0.1.0"

__all__ = ["models", "saver", "reader", "publisher"]