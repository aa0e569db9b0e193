"""
Webpages module configuration.
"""
from django.apps import AppConfig


class WebpagesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.webpages'
    verbose_name = 'Webpages'
