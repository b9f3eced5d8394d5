from django.urls import path

from market.handlers import (
    UserDetailView,
    UserListView,
    VenueBuyView,
    VenueDetailView,
    VenueListView,
)

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path("venues/<str:venue_id>/buy", VenueBuyView.as_view(), name="venue-buy"),
    path("users", UserListView.as_view(), name="user-list"),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
]
