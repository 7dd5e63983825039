import argparse
import logging
import os

from flask import Flask, Response, stream_with_context
from jinja2 import TemplateError

from hello_web.config import Config, configure_logging, resolve_templates_dir
from hello_web.template_store import TemplateLoadError, TemplateStore

PAGE_TITLE = 'Hello World'

PAGES = {
    'index': ('layout.html', 'index.html'),
}

log = logging.getLogger(__name__)


def create_app(config=None):
    """Build the application; raises TemplateLoadError if templates are broken."""
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env('HELLO_WEB')
    if config:
        app.config.update(config)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    templates_dir = resolve_templates_dir(app.config['TEMPLATES_DIR'])
    store = TemplateStore.load(templates_dir, PAGES, environment=app.jinja_env)
    app.extensions['template_store'] = store
    app.logger.info('Loaded templates %s from %s', ', '.join(store), templates_dir)

    @app.route('/')
    def index():
        template = store['index']
        view = {'Title': PAGE_TITLE}
        # Status is committed before rendering; a render error can only cut the body short.
        body = _render_stream(app, template, view)
        return Response(stream_with_context(body), status=200, mimetype='text/html')

    return app


def _render_stream(app, template, view):
    try:
        yield from template.generate(view)
    except TemplateError:
        app.logger.exception('Rendering %r failed', template.name)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='hello-web', description='Serve the greeting page.')
    parser.add_argument('--host', help='address to bind (default from config)')
    parser.add_argument('--port', type=int, help='port to listen on (default 3000)')
    args = parser.parse_args(argv)

    overrides = {}
    if args.host is not None:
        overrides['HOST'] = args.host
    if args.port is not None:
        overrides['PORT'] = args.port

    # app.config does not exist yet.
    configure_logging(os.environ.get('HELLO_WEB_LOG_LEVEL', Config.LOG_LEVEL))
    try:
        app = create_app(overrides)
    except TemplateLoadError:
        log.exception('Refusing to start')
        raise SystemExit(1)

    host, port = app.config['HOST'], app.config['PORT']
    log.info('Listening on %s:%s', host, port)
    app.run(host=host, port=port, debug=app.config['DEBUG'])


# Local convenience; production runs hello_web.wsgi:app under a WSGI server
if __name__ == '__main__':
    main()
