"""Core configuration support for mlcp: XDG paths, settings and theme."""
