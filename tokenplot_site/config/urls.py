from django.urls import include, path

urlpatterns = [
    path("", include("tokenplot.urls")),
]
