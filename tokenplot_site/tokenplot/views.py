import json
import logging

from django.http import HttpResponseServerError, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST, require_safe

from .exceptions import InvalidInputError
from .forms import SentenceForm
from .services import history as history_svc
from .services import pipeline

logger = logging.getLogger(__name__)


def _render_home(request, form, status=200):
    ctx = {
        "form": form,
        "history": history_svc.get_history().snapshot(),
    }
    return render(request, "tokenplot/home.html", ctx, status=status)


@require_safe
def home(request):
    """Render the input form and the previous inputs."""
    return _render_home(request, SentenceForm())


@require_POST
def tokenize(request):
    """
    Tokenize the posted sentence and render the 3D plot page.

    Context keys (see TokenPlot):
      - tokens, xs, ys, zs: the plot series, one entry per token
      - prediction: average token length, 2 decimals
      - history: last sentences, oldest first (includes this one)
    """
    form = SentenceForm(request.POST)
    if not form.is_valid():
        return _render_home(request, form, status=400)

    try:
        plot = pipeline.process_sentence(
            form.cleaned_data["sentence"], history_svc.get_history()
        )
    except InvalidInputError as e:
        logger.info("Rejected sentence: %s", e.message)
        form.add_error("sentence", e.message)
        return _render_home(request, form, status=400)
    except Exception as e:
        logger.exception("Tokenize request failed: %s", e)
        return HttpResponseServerError("Internal server error")

    return render(request, "tokenplot/plot.html", plot.as_payload())


def _read_sentence(request):
    if request.content_type == "application/json":
        body = json.loads(request.body or b"{}")
        if not isinstance(body, dict):
            raise ValueError("Expected a JSON object.")
        return body.get("sentence")
    return request.POST.get("sentence")


@csrf_exempt
@require_POST
def api_tokenize(request):
    try:
        sentence = _read_sentence(request)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        return JsonResponse({"error": f"Malformed request body: {e}"}, status=400)

    if sentence is not None and not isinstance(sentence, str):
        return JsonResponse({"error": "'sentence' must be a string."}, status=400)

    try:
        plot = pipeline.process_sentence(sentence, history_svc.get_history())
    except InvalidInputError as e:
        return JsonResponse({"error": e.message}, status=400)
    except Exception as e:
        logger.exception("Tokenize request failed: %s", e)
        return JsonResponse({"error": "Internal server error"}, status=500)

    return JsonResponse(plot.as_payload())


@require_safe
def api_history(request):
    return JsonResponse({"history": history_svc.get_history().snapshot()})
