"""MyWineCellar - wine catalog write service for a personal cellar tracker."""

__version__ = "0.1.0"
