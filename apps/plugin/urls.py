from django.urls import path

from . import views

app_name = "plugin"
urlpatterns = [
    path("navigation/", views.navigation_menu, name="navigation_menu"),
    path("header/", views.header_menu, name="header_menu"),
]
