"""Cookbook scaffold - materializes a new Chef cookbook from a template tree.

Copies the verbatim ``files/`` subtree and renders the Jinja2 ``templates/``
subtree of a template source into ``<cookbook_path>/<cookbook_name>``.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
