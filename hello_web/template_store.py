"""Compiled layout + content templates, loaded once at start-up."""

from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, nodes, select_autoescape


class TemplateLoadError(Exception):
    """A template pair could not be read or parsed."""

    def __init__(self, filename, cause):
        super().__init__(f'Could not load template {filename!r}: {cause}')
        self.filename = filename
        self.cause = cause


class TemplateStore(Mapping):
    """Read-only mapping of page name -> compiled content template.

    Each content template extends its layout; both are parsed when the store
    is built so a broken deployment fails before any request is served.
    """

    def __init__(self, templates):
        self._templates = dict(templates)

    @classmethod
    def load(cls, directory, pages, environment=None):
        directory = Path(directory)
        if not directory.is_dir():
            raise TemplateLoadError(str(directory), 'template directory does not exist')

        # Files are read once; edits on disk are not picked up.
        loader = FileSystemLoader(str(directory))
        if environment is None:
            env = Environment(
                loader=loader, autoescape=select_autoescape(['html']), auto_reload=False
            )
        else:
            env = environment.overlay(loader=loader, auto_reload=False)

        templates = {}
        for name, (layout, content) in pages.items():
            _compile(env, layout)
            templates[name] = _compile_content(env, content, layout)
        return cls(templates)

    def __getitem__(self, name):
        return self._templates[name]

    def __iter__(self):
        return iter(self._templates)

    def __len__(self):
        return len(self._templates)

    def __repr__(self):
        return f'<TemplateStore {sorted(self._templates)}>'


def _compile(env, filename):
    try:
        return env.get_template(filename)
    except TemplateError as exc:
        raise TemplateLoadError(filename, exc) from exc


def _compile_content(env, content, layout):
    # Parsed once; the same tree is checked and then compiled.
    try:
        source, filename, uptodate = env.loader.get_source(env, content)
        tree = env.parse(source, content, filename)
        parents = {
            node.template.value
            for node in tree.find_all(nodes.Extends)
            if isinstance(node.template, nodes.Const)
        }
        if layout not in parents:
            raise TemplateLoadError(content, f'does not extend {layout!r}')
        code = env.compile(tree, content, filename)
    except TemplateError as exc:
        raise TemplateLoadError(content, exc) from exc
    return env.template_class.from_code(env, code, env.make_globals(None), uptodate)
