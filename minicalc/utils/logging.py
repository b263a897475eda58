"""
Logging utilities for tracking visitor activity across the site.
"""

import logging

from flask import request

logger = logging.getLogger(__name__)


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    visitor = request.remote_addr or "unknown address"

    logger.info(f"[{project_name}] Visitor from {visitor} visited {display_name}")
