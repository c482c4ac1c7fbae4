"""checkboard - Kanban board over checklist tasks in markdown notes."""

__version__ = "0.1.0"
