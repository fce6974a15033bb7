from django.apps import AppConfig

class DiaryConfig(AppConfig):
    """Django app config for the diary; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'diary'

    def ready(self):
        """Import signal modules to register handlers."""
        import diary.signals
