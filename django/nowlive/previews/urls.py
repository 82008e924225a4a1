from django.urls import path
from .views import share_preview

urlpatterns = [
    path("", share_preview),
]
