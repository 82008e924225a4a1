from django.urls import path
from .views import StreamCodeDetailView, StreamCodeIssueView, StreamCodeResolveView

urlpatterns = [
    path("", StreamCodeIssueView.as_view()),
    path("resolve/", StreamCodeResolveView.as_view()),
    path("<str:code>/", StreamCodeDetailView.as_view()),
]
