from django.apps import AppConfig


class FleetopsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'fleetops'
    verbose_name = 'Fleet operations'
