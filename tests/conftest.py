# Shared fixtures: a store on a temporary data directory and a Flask test
# client wired to it.

import pytest

from app import create_app
from utils.data import PortfolioStore

ADMIN_USERNAME = "vwolf"
ADMIN_PASSWORD = "prueba"


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return PortfolioStore(str(data_dir)).load()


@pytest.fixture
def app(data_dir):
    app = create_app("testing", config_overrides={"DATA_DIR": str(data_dir)})
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def app_store(app):
    return app.extensions["portfolio_store"]


@pytest.fixture
def admin_client(client):
    """Test client holding an authenticated admin session."""
    resp = client.post("/api/login", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD,
    })
    assert resp.status_code == 200
    return client


@pytest.fixture
def project_payload():
    return {
        "title": "Portfolio",
        "description": "My personal site",
        "image": "https://cdn.mail.com/img/portfolio.png",
        "tags": ["flask", "react"],
        "category": "web",
    }
