"""Line-oriented IRC client front-end: command dispatch and tab completion."""

__version__ = "0.1.0"
