"""Web dashboard for File Organiser."""
