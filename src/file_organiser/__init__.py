"""File Organiser: sorts a folder's files into category subfolders."""

__version__ = "1.0.0"
