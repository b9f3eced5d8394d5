from market.handlers.views import (
    UserDetailView,
    UserListView,
    VenueBuyView,
    VenueDetailView,
    VenueListView,
)

__all__ = [
    "UserDetailView",
    "UserListView",
    "VenueBuyView",
    "VenueDetailView",
    "VenueListView",
]
