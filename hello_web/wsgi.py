# e.g. gunicorn --bind 0.0.0.0:3000 hello_web.wsgi:app
from hello_web.app import create_app

app = create_app()
