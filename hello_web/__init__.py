from hello_web.app import create_app, main
from hello_web.template_store import TemplateLoadError, TemplateStore

__all__ = ['create_app', 'main', 'TemplateLoadError', 'TemplateStore']
