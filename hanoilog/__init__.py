"""Discrete-event simulation of package routing and stacked storage in a warehouse network."""

__version__ = "0.1.0"