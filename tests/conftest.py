import pytest

from hello_web import create_app
from hello_web.config import PACKAGE_TEMPLATES_DIR

LAYOUT = '<html><head><title>{{ Title }}</title></head><body>{% block content %}{% endblock %}</body></html>'
INDEX = '{% extends "layout.html" %}{% block content %}<p>{{ Title }}</p>{% endblock %}'


@pytest.fixture
def app():
    app = create_app({'TESTING': True, 'TEMPLATES_DIR': str(PACKAGE_TEMPLATES_DIR)})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def template_dir(tmp_path):
    """Write a layout/index pair into a fresh directory; returns a writer."""

    def write(layout=LAYOUT, index=INDEX):
        if layout is not None:
            (tmp_path / 'layout.html').write_text(layout)
        if index is not None:
            (tmp_path / 'index.html').write_text(index)
        return tmp_path

    return write
