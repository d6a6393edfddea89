"""
Django Assemblyman app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AssemblymanConfig(AppConfig):
    """Assemblyman application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "assemblyman"
    verbose_name = _("Workshop Stock")

    def ready(self):
        """Load the recipe catalog once, failing fast on bad configuration."""
        from assemblyman.catalog import get_catalog

        get_catalog()
