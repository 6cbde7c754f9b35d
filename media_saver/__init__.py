"""
Media saver: copy supported media files and work with HH:MM:SS durations.
"""

__version__ = "0.1.0"
