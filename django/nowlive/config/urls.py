from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/stream-codes/", include("stream_codes.urls")),
    path("share/", include("previews.urls")),
]
