from django.contrib import admin
from django.http import HttpResponse
from django.urls import path, include

def health(_request):
    return HttpResponse("ok")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("healthz/", health, name="health"),
    path("", include("moods.urls")),
]
