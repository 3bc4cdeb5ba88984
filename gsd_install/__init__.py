"""Install gsd command and skill templates into AI coding assistant config dirs."""

__version__ = "1.3.0"
