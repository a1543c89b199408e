"""Django app configuration for wagtail-script-renderer."""

from django.apps import AppConfig


class WagtailScriptRendererConfig(AppConfig):
    name = "wagtail_script_renderer"
    verbose_name = "Wagtail Script Renderer"
