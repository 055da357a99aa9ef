from django.conf import settings


def assets(request):
    """CDN locations for the stylesheet and the plotting library."""
    return {
        "PLOTLY_JS_URL": settings.PLOTLY_JS_URL,
        "TAILWIND_CSS_URL": settings.TAILWIND_CSS_URL,
    }
