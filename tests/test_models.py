# Model Tests
# Validation rules for request bodies
# Dependent files: models.py

import pytest
from pydantic import ValidationError

from models import (
    BlogInsert,
    ContactInsert,
    LoginCredentials,
    Project,
    ProjectInsert,
    TechnologyInsert,
    TimelineItemInsert,
)


def test_contact_accepts_valid_message():
    contact = ContactInsert.model_validate({
        "name": "Ana",
        "email": "Ana@X.com",
        "message": "Hello there, testing.",
    })
    # the caller's spelling is kept
    assert contact.email == "Ana@X.com"


@pytest.mark.parametrize("email", ["not-an-email", "ana@", "@x.com", ""])
def test_contact_rejects_bad_email(email):
    with pytest.raises(ValidationError):
        ContactInsert.model_validate({"name": "Ana", "email": email, "message": "Hello there, testing."})


def test_contact_requires_ten_character_message():
    with pytest.raises(ValidationError):
        ContactInsert.model_validate({"name": "Ana", "email": "ana@x.com", "message": "too short"})


def test_project_rejects_malformed_image_url():
    with pytest.raises(ValidationError):
        ProjectInsert.model_validate({
            "title": "P",
            "description": "",
            "image": "just some text",
            "tags": [],
            "category": "web",
        })


def test_project_requires_category():
    with pytest.raises(ValidationError):
        ProjectInsert.model_validate({
            "title": "P",
            "description": "",
            "image": "https://cdn.mail.com/p.png",
        })


def test_technology_type_is_an_enum():
    TechnologyInsert.model_validate({"name": "Flask", "type": "stack", "icon": "flask"})
    with pytest.raises(ValidationError):
        TechnologyInsert.model_validate({"name": "Flask", "type": "framework", "icon": "flask"})


def test_blog_defaults_to_unpublished():
    blog = BlogInsert.model_validate({
        "title": "Draft",
        "content": "...",
        "image": "https://cdn.mail.com/b.png",
    })
    assert blog.published is False
    assert blog.tags == []


def test_timeline_type_is_an_enum():
    with pytest.raises(ValidationError):
        TimelineItemInsert.model_validate({
            "type": "hobby",
            "title": "T",
            "organization": "O",
            "startDate": "2020-01",
            "description": "",
        })


def test_timeline_accepts_camel_and_snake_case():
    camel = TimelineItemInsert.model_validate({
        "type": "education", "title": "BSc", "organization": "Uni",
        "startDate": "2015-09", "endDate": "2019-06", "description": "", "sortOrder": 3,
    })
    snake = TimelineItemInsert.model_validate({
        "type": "education", "title": "BSc", "organization": "Uni",
        "start_date": "2015-09", "end_date": "2019-06", "description": "", "sort_order": 3,
    })
    assert camel == snake
    assert camel.to_json()["sortOrder"] == 3


def test_record_serializes_camel_case():
    project = Project.model_validate({
        "id": 1,
        "createdAt": "2024-05-01T10:00:00Z",
        "title": "P",
        "description": "",
        "image": "https://cdn.mail.com/p.png",
        "tags": ["x"],
        "category": "web",
    })
    payload = project.to_json()
    assert payload["id"] == 1
    assert payload["createdAt"].startswith("2024-05-01T10:00:00")
    assert "created_at" not in payload


def test_login_requires_both_fields():
    with pytest.raises(ValidationError):
        LoginCredentials.model_validate({"username": "vwolf"})
    with pytest.raises(ValidationError):
        LoginCredentials.model_validate({"username": "", "password": "x"})
