"""Adventure Tracker - character and play session tracker."""

__version__ = "0.1.0"
