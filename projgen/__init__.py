"""projgen - scaffold compiled-language projects from template directories.

Templates are plain directory trees; ``{{ identifier }}`` placeholders in file
contents and names are replaced with the project name and domain.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
