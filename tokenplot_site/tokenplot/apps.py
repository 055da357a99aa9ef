from django.apps import AppConfig


class TokenplotConfig(AppConfig):
    name = "tokenplot"
    verbose_name = "Tokenize, Plot & Predict"

    def ready(self):
        # Process-wide sentence history; lives as long as the app registry.
        from .services.history import SentenceHistory
        self.history = SentenceHistory()
