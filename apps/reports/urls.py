from django.urls import path

from . import views

app_name = "reports"
urlpatterns = [
    path("index/", views.report_index, name="index"),
]
