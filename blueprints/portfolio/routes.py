"""
Portfolio Routes - Public content API
Handles: Listing and reading published content, contact form submissions

Every list is returned unfiltered, drafts included; the public site filters
blogs by ``published`` on its own side.
"""

from flask import jsonify, current_app
from models import ContactInsert
from utils.data import get_store
from utils.helpers import validate_body
from . import portfolio_bp


def _list(records):
    return jsonify([record.to_json() for record in records])


def _one(record, label):
    if record is None:
        return jsonify({'message': f'{label} not found'}), 404
    return jsonify(record.to_json())


@portfolio_bp.route('/projects')
def list_projects():
    return _list(get_store().projects.all())


@portfolio_bp.route('/projects/<int:project_id>')
def get_project(project_id):
    return _one(get_store().projects.get(project_id), 'Project')


@portfolio_bp.route('/technologies')
def list_technologies():
    return _list(get_store().technologies.all())


@portfolio_bp.route('/technologies/<int:technology_id>')
def get_technology(technology_id):
    return _one(get_store().technologies.get(technology_id), 'Technology')


@portfolio_bp.route('/blogs')
def list_blogs():
    return _list(get_store().blogs.all())


@portfolio_bp.route('/blogs/<int:blog_id>')
def get_blog(blog_id):
    return _one(get_store().blogs.get(blog_id), 'Blog')


@portfolio_bp.route('/timeline')
def list_timeline():
    """Timeline items ordered by sortOrder"""
    return _list(get_store().timeline.all())


@portfolio_bp.route('/timeline/<int:item_id>')
def get_timeline_item(item_id):
    return _one(get_store().timeline.get(item_id), 'Timeline item')


@portfolio_bp.route('/site-content')
def list_site_content():
    return _list(get_store().get_all_site_content())


@portfolio_bp.route('/site-content/<key>')
def get_site_content(key):
    """Value for one key; unknown keys yield an empty string"""
    entry = get_store().get_site_content(key)
    return jsonify({'value': entry.value if entry is not None else ''})


@portfolio_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form submission"""
    data = validate_body(ContactInsert)
    if data is None:
        return jsonify({'message': 'Invalid contact data'}), 400

    try:
        contact = get_store().create_contact(data)
    except Exception as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        return jsonify({'message': 'Error sending message'}), 500

    current_app.logger.info(f"Contact message saved, id: {contact.id}")
    return jsonify(contact.to_json())
