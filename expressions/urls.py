from django.urls import path
from .views import CompileDocumentAPIView


urlpatterns = [
    path("compile/", CompileDocumentAPIView.as_view(), name="compile-document"),
]
