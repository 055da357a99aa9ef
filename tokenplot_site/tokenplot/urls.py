from django.urls import path

from . import views

app_name = "tokenplot"

urlpatterns = [
    path("", views.home, name="home"),
    path("tokenize", views.tokenize, name="tokenize"),
    path("api/tokenize", views.api_tokenize, name="api_tokenize"),
    path("api/history", views.api_history, name="api_history"),
]
