import logging

from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import CodeSpaceExhausted, StorageError
from .links import code_from_query, viewer_url
from .registry import get_registry, normalize_code
from .serializers import StreamDescriptorSerializer

logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Stream not found or expired"
UNAVAILABLE_DETAIL = "Stream code service unavailable"


def _storage_failure():
    return Response({"detail": UNAVAILABLE_DETAIL}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _resolved(code):
    try:
        descriptor = get_registry().resolve(code)
    except StorageError:
        logger.exception("Resolving stream code %s failed", code)
        return _storage_failure()

    if descriptor is None:
        return Response({"detail": NOT_FOUND_DETAIL}, status=status.HTTP_404_NOT_FOUND)

    return Response(
        {
            "code": code,
            "descriptor": descriptor,
            "viewer_url": viewer_url(code, descriptor),
        }
    )


class StreamCodeIssueView(APIView):
    # Descriptors are JSON objects only.
    parser_classes = [JSONParser]

    def post(self, request):
        s = StreamDescriptorSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        descriptor = s.descriptor

        try:
            code = get_registry().issue(descriptor)
        except CodeSpaceExhausted:
            return Response(
                {"detail": "Could not create a shareable link"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        except StorageError:
            logger.exception("Issuing a stream code failed")
            return _storage_failure()

        return Response(
            {
                "code": code,
                "descriptor": descriptor,
                "viewer_url": viewer_url(code, descriptor),
                "preview_url": request.build_absolute_uri(f"/share/?code={code}"),
            },
            status=status.HTTP_201_CREATED,
        )


class StreamCodeDetailView(APIView):
    def get(self, request, code):
        return _resolved(normalize_code(code))


class StreamCodeResolveView(APIView):
    """Resolve a code passed as a query token, e.g. ``?code=AB12`` or ``?=AB12``."""

    def get(self, request):
        code = code_from_query(request.query_params)
        if not code:
            return Response({"detail": "Missing stream code"}, status=status.HTTP_400_BAD_REQUEST)
        return _resolved(code)
