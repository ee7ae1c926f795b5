"""Compile XAML pages into C++ class headers and model XAML element layout, events and animation."""

__version__ = "0.1.0"