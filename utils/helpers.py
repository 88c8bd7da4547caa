"""
Helpers Module - Utility functions shared by the request hooks and blueprints
"""

from flask import current_app, request
from pydantic import ValidationError

from .data import get_store


def validate_body(schema):
    """
    Validate the JSON request body against a model

    Args:
        schema: pydantic model class to validate with

    Returns:
        The model instance, or None when the body is missing or invalid
    """
    payload = request.get_json(silent=True)
    if payload is None:
        current_app.logger.info(f"Rejected {request.method} {request.path}: body is not JSON")
        return None
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        fields = ', '.join('.'.join(str(part) for part in error['loc']) or '<body>' for error in e.errors())
        current_app.logger.info(f"Rejected {request.method} {request.path}: invalid {fields}")
        return None


def should_track_visit():
    """Only public page GETs count as visits; API calls and untracked paths do not"""
    if request.method != 'GET':
        return False
    path = request.path
    if path.startswith(current_app.config['API_PREFIX']):
        return False
    return path not in current_app.config['UNTRACKED_PATHS']


def track_visitor(page=None):
    """Record one visit; never interferes with the request being served"""
    page = page or request.path
    try:
        get_store().track_visit(page)
    except Exception as e:
        current_app.logger.error(f"Error tracking visit to {page}: {str(e)}")
