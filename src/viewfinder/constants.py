from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates naming conventions so that resolvers, scanners and the
CLI agree on where templates live and how they are spelled on disk.
"""

# Views directory, relative to the application root.
VIEWS_DIR: str = 'app/views'

# A directory containing this file is treated as an application root.
APP_MARKER: str = 'config/application.rb'

# Lookup priority order. First existing file wins.
TEMPLATE_EXTENSIONS: tuple[str, ...] = ('.html.erb', '.erb', '.builder', '.slim')

# Hard ceiling on nested partial expansion.
DEFAULT_MAX_DEPTH: int = 64
