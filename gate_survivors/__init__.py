"""Gate Survivors: lane shooter where gates multiply your guns."""

__version__ = "0.1.0"
