from django.urls import path

from sellers.views import LoginView, UploadView

urlpatterns = [
    path("auth/login", LoginView.as_view(), name="seller-login"),
    path("upload", UploadView.as_view(), name="seller-upload"),
]
