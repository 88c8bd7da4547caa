"""
Dashboard Routes - Admin content management API
Handles: Project, technology, blog, timeline and site content mutations,
contact message and visit listings

Every route requires an authenticated admin session; the check runs before
the body is even parsed, so an anonymous request never touches the store.
"""

from flask import jsonify, current_app
from models import (
    BlogInsert,
    ProjectInsert,
    SiteContentInsert,
    SiteContentValue,
    TechnologyInsert,
    TimelineItemInsert,
)
from utils.data import get_store, NotFoundError
from utils.decorators import login_required
from utils.helpers import validate_body
from . import dashboard_bp


def _create(collection, schema, label):
    data = validate_body(schema)
    if data is None:
        return jsonify({'message': f'Invalid {label.lower()} data'}), 400
    try:
        record = collection.create(data)
    except Exception as e:
        current_app.logger.error(f"Error creating {label.lower()}: {str(e)}")
        return jsonify({'message': f'Error creating {label.lower()}'}), 500
    current_app.logger.info(f"Created {collection.name} #{record.id}")
    return jsonify(record.to_json()), 201


def _update(collection, record_id, schema, label):
    data = validate_body(schema)
    if data is None:
        return jsonify({'message': f'Invalid {label.lower()} data'}), 400
    try:
        record = collection.update(record_id, data)
    except NotFoundError:
        return jsonify({'message': f'{label} not found'}), 404
    except Exception as e:
        current_app.logger.error(f"Error updating {label.lower()} {record_id}: {str(e)}")
        return jsonify({'message': f'Error updating {label.lower()}'}), 500
    current_app.logger.info(f"Updated {collection.name} #{record_id}")
    return jsonify(record.to_json())


def _delete(collection, record_id, label):
    try:
        collection.delete(record_id)
    except NotFoundError:
        return jsonify({'message': f'{label} not found'}), 404
    except Exception as e:
        current_app.logger.error(f"Error deleting {label.lower()} {record_id}: {str(e)}")
        return jsonify({'message': f'Error deleting {label.lower()}'}), 500
    current_app.logger.info(f"Deleted {collection.name} #{record_id}")
    return '', 204


# Contacts and visits

@dashboard_bp.route('/contacts')
@login_required
def list_contacts():
    """Contact messages, most recent first"""
    return jsonify([contact.to_json() for contact in get_store().get_contacts()])


@dashboard_bp.route('/visits')
@login_required
def list_visits():
    """Page visits, most recent first"""
    return jsonify([visit.to_json() for visit in get_store().get_visits()])


# Projects

@dashboard_bp.route('/projects', methods=['POST'])
@login_required
def create_project():
    return _create(get_store().projects, ProjectInsert, 'Project')


@dashboard_bp.route('/projects/<int:project_id>', methods=['PUT'])
@login_required
def update_project(project_id):
    return _update(get_store().projects, project_id, ProjectInsert, 'Project')


@dashboard_bp.route('/projects/<int:project_id>', methods=['DELETE'])
@login_required
def delete_project(project_id):
    return _delete(get_store().projects, project_id, 'Project')


# Technologies

@dashboard_bp.route('/technologies', methods=['POST'])
@login_required
def create_technology():
    return _create(get_store().technologies, TechnologyInsert, 'Technology')


@dashboard_bp.route('/technologies/<int:technology_id>', methods=['PUT'])
@login_required
def update_technology(technology_id):
    return _update(get_store().technologies, technology_id, TechnologyInsert, 'Technology')


@dashboard_bp.route('/technologies/<int:technology_id>', methods=['DELETE'])
@login_required
def delete_technology(technology_id):
    return _delete(get_store().technologies, technology_id, 'Technology')


# Blogs

@dashboard_bp.route('/blogs', methods=['POST'])
@login_required
def create_blog():
    return _create(get_store().blogs, BlogInsert, 'Blog')


@dashboard_bp.route('/blogs/<int:blog_id>', methods=['PUT'])
@login_required
def update_blog(blog_id):
    return _update(get_store().blogs, blog_id, BlogInsert, 'Blog')


@dashboard_bp.route('/blogs/<int:blog_id>', methods=['DELETE'])
@login_required
def delete_blog(blog_id):
    return _delete(get_store().blogs, blog_id, 'Blog')


# Timeline

@dashboard_bp.route('/timeline', methods=['POST'])
@login_required
def create_timeline_item():
    return _create(get_store().timeline, TimelineItemInsert, 'Timeline item')


@dashboard_bp.route('/timeline/<int:item_id>', methods=['PUT'])
@login_required
def update_timeline_item(item_id):
    return _update(get_store().timeline, item_id, TimelineItemInsert, 'Timeline item')


@dashboard_bp.route('/timeline/<int:item_id>', methods=['DELETE'])
@login_required
def delete_timeline_item(item_id):
    return _delete(get_store().timeline, item_id, 'Timeline item')


# Site content

@dashboard_bp.route('/site-content', methods=['POST'])
@login_required
def create_site_content():
    """Upsert a key/value pair given in the body"""
    data = validate_body(SiteContentInsert)
    if data is None:
        return jsonify({'message': 'Invalid site content data'}), 400
    try:
        entry = get_store().update_site_content(data.key, data.value)
    except Exception as e:
        current_app.logger.error(f"Error saving site content {data.key}: {str(e)}")
        return jsonify({'message': 'Error saving site content'}), 500
    current_app.logger.info(f"Saved site content {data.key}")
    return jsonify(entry.to_json()), 201


@dashboard_bp.route('/site-content/<key>', methods=['PUT'])
@login_required
def update_site_content(key):
    data = validate_body(SiteContentValue)
    if data is None:
        return jsonify({'message': 'Invalid site content data'}), 400
    try:
        entry = get_store().update_site_content(key, data.value)
    except Exception as e:
        current_app.logger.error(f"Error updating site content {key}: {str(e)}")
        return jsonify({'message': 'Error updating site content'}), 500
    current_app.logger.info(f"Updated site content {key}")
    return jsonify(entry.to_json())


@dashboard_bp.route('/site-content/<key>', methods=['DELETE'])
@login_required
def delete_site_content(key):
    try:
        get_store().delete_site_content(key)
    except NotFoundError:
        return jsonify({'message': 'Site content not found'}), 404
    except Exception as e:
        current_app.logger.error(f"Error deleting site content {key}: {str(e)}")
        return jsonify({'message': 'Error deleting site content'}), 500
    current_app.logger.info(f"Deleted site content {key}")
    return '', 204
