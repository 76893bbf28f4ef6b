"""Order management domain: order aggregate, repositories and domain events."""

__version__ = "0.1.0"
