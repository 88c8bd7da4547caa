"""
Entity Models - Declarative shapes for every portfolio entity

Each entity has an ``<Entity>Insert`` model holding the fields a caller may
supply and a record model that adds the store-assigned ``id`` and creation
timestamp. The same models validate request bodies, serialize API responses
and read/write the JSON data files, so input and output cannot drift apart.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictInt,
    TypeAdapter,
    model_validator,
)
from pydantic.alias_generators import to_camel


_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def _ensure_url(value):
    """Reject malformed URLs but keep the caller's spelling"""
    _url_adapter.validate_python(value)
    return value


def _ensure_email(value):
    """Reject malformed addresses but keep the caller's spelling"""
    _email_adapter.validate_python(value)
    return value


UrlStr = Annotated[str, AfterValidator(_ensure_url)]
EmailAddress = Annotated[str, AfterValidator(_ensure_email)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class Schema(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self):
        return self.model_dump(mode='json', by_alias=True)


# Contacts

class ContactInsert(Schema):
    name: NonEmptyStr
    email: EmailAddress
    message: str = Field(min_length=10)


class Contact(ContactInsert):
    id: int
    created_at: datetime


# Visits

class VisitInsert(Schema):
    page: NonEmptyStr


class Visit(VisitInsert):
    id: int
    timestamp: datetime


# Projects

class ProjectInsert(Schema):
    title: NonEmptyStr
    description: str
    image: UrlStr
    tags: List[str] = Field(default_factory=list)
    category: str


class Project(ProjectInsert):
    id: int
    created_at: datetime


# Technologies

class TechnologyInsert(Schema):
    name: NonEmptyStr
    type: Literal['service', 'stack']
    icon: str
    description: Optional[str] = None


class Technology(TechnologyInsert):
    id: int
    created_at: datetime


# Blogs

class BlogInsert(Schema):
    title: NonEmptyStr
    content: str
    image: UrlStr
    tags: List[str] = Field(default_factory=list)
    published: StrictBool = False


class Blog(BlogInsert):
    id: int
    created_at: datetime


# Site content

class SiteContentInsert(Schema):
    key: NonEmptyStr
    value: str


class SiteContentValue(Schema):
    """Body of a keyed site-content update"""
    value: str


class SiteContent(SiteContentInsert):
    id: int
    created_at: datetime


# Timeline

class TimelineItemInsert(Schema):
    type: Literal['work', 'education', 'project', 'achievement']
    title: NonEmptyStr
    organization: NonEmptyStr
    location: Optional[str] = None
    start_date: NonEmptyStr
    end_date: Optional[str] = None
    description: str
    technologies: Optional[List[str]] = None
    current: StrictBool = False
    sort_order: StrictInt = 0

    @model_validator(mode='after')
    def _clear_end_date_when_current(self):
        # an ongoing item has no end date
        if self.current:
            self.end_date = None
        return self


class TimelineItem(TimelineItemInsert):
    id: int
    created_at: datetime


# Auth

class LoginCredentials(Schema):
    username: NonEmptyStr
    password: NonEmptyStr


ENTITY_MODELS = {
    'contacts': (ContactInsert, Contact),
    'visits': (VisitInsert, Visit),
    'projects': (ProjectInsert, Project),
    'technologies': (TechnologyInsert, Technology),
    'blogs': (BlogInsert, Blog),
    'site_content': (SiteContentInsert, SiteContent),
    'timeline': (TimelineItemInsert, TimelineItem),
}


__all__ = [
    'Schema',
    'ContactInsert', 'Contact',
    'VisitInsert', 'Visit',
    'ProjectInsert', 'Project',
    'TechnologyInsert', 'Technology',
    'BlogInsert', 'Blog',
    'SiteContentInsert', 'SiteContentValue', 'SiteContent',
    'TimelineItemInsert', 'TimelineItem',
    'LoginCredentials',
    'ENTITY_MODELS',
]
