import logging

from django.conf import settings
from django.http import HttpResponse, HttpResponseRedirect, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_safe

from stream_codes.descriptors import is_multi
from stream_codes.exceptions import StorageError
from stream_codes.links import code_from_query, viewer_url
from stream_codes.registry import get_registry

from .crawlers import is_crawler

logger = logging.getLogger(__name__)

PREVIEW_MAX_AGE_SECONDS = 60


def build_preview(descriptor: dict) -> dict:
    site_name = settings.SITE_NAME
    if is_multi(descriptor):
        title = f"Multi Viewer - {site_name}"
        description = "Watch several live streams side by side!"
        return {
            "page_title": title,
            "title": title,
            "description": description,
            "summary": description,
            "image": settings.PREVIEW_DEFAULT_IMAGE,
        }

    name = descriptor.get("display_name") or descriptor.get("name") or "Live stream"
    platform = str(descriptor.get("platform") or "").upper()
    stream_title = descriptor.get("title") or ""
    return {
        "page_title": f"{name} - Live on {platform} | {site_name}",
        "title": f"{name} - Live Now!",
        "description": f"{name} is live on {platform}! {stream_title}".strip(),
        "summary": f"{name} is live on {platform}! Watch now on {site_name}.",
        "image": descriptor.get("thumbnail") or descriptor.get("image") or settings.PREVIEW_DEFAULT_IMAGE,
    }


@require_safe
def share_preview(request):
    code = code_from_query(request.GET)
    if not code:
        return HttpResponse("Missing stream code", status=400, content_type="text/plain")

    try:
        descriptor = get_registry().resolve(code)
    except StorageError as exc:
        logger.exception("Preview lookup failed for stream code %s", code)
        return JsonResponse({"error": str(exc)}, status=500)

    if descriptor is None:
        return HttpResponse("Stream not found or expired", status=404, content_type="text/plain")

    target = viewer_url(code, descriptor)
    if not is_crawler(request.headers.get("User-Agent")):
        return HttpResponseRedirect(target)

    context = build_preview(descriptor)
    context.update({"site_name": settings.SITE_NAME, "target_url": target})
    response = render(request, "previews/preview.html", context)
    response["Cache-Control"] = f"public, max-age={PREVIEW_MAX_AGE_SECONDS}"
    return response
