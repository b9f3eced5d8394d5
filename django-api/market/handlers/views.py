"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from market.domain import Amount, Bought, UserId, VenueId
from market.domain.errors import DomainError, NotFoundError
from market.handlers.serializers import (
    BuyInputSerializer,
    UserInputSerializer,
    UserSerializer,
    VenueInputSerializer,
    VenueSerializer,
)
from market.services import get_services


def error_response(error: DomainError) -> Response:
    """Map a domain error to a JSON error response."""
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status_code,
    )


class VenueListView(APIView):
    """Handler for GET /venues"""

    def get(self, request: Request) -> Response:
        venues = get_services().venues.list_venues()
        return Response(VenueSerializer(venues, many=True).data)


class VenueDetailView(APIView):
    """Handler for GET, PUT and DELETE /venues/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            venue = get_services().venues.get_venue(VenueId(venue_id))
        except DomainError as error:
            return error_response(error)
        return Response(VenueSerializer(venue).data)

    def put(self, request: Request, venue_id: str) -> Response:
        serializer = VenueInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            saved_id = get_services().venues.put_venue(
                VenueId(venue_id), name=data["name"], price=Amount(data["price"])
            )
        except DomainError as error:
            return error_response(error)
        return Response(saved_id.value)

    def delete(self, request: Request, venue_id: str) -> Response:
        try:
            deleted_id = get_services().venues.delete_venue(VenueId(venue_id))
        except DomainError as error:
            return error_response(error)
        return Response(deleted_id.value)


class VenueBuyView(APIView):
    """Handler for POST /venues/{venue_id}/buy"""

    def post(self, request: Request, venue_id: str) -> Response:
        serializer = BuyInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        buyer_id = UserId(serializer.validated_data["buyerId"])

        result = get_services().purchases.buy(VenueId(venue_id), buyer_id)
        if not result.is_ok():
            return error_response(result.error)

        outcome = result.value
        if isinstance(outcome, Bought):
            return Response(outcome.message)
        return Response(outcome.message, status=status.HTTP_400_BAD_REQUEST)


class UserListView(APIView):
    """Handler for GET and POST /users"""

    def get(self, request: Request) -> Response:
        users = get_services().users.list_users()
        return Response({"users": UserSerializer(users, many=True).data})

    def post(self, request: Request) -> Response:
        serializer = UserInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            account = get_services().users.create_user(
                name=data["name"], budget=Amount(data["budget"])
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            UserSerializer(account).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"{settings.MARKET_PUBLIC_URL}/users/{account.id}"},
        )


class UserDetailView(APIView):
    """Handler for GET, PUT and DELETE /users/{user_id}"""

    def get(self, request: Request, user_id: str) -> Response:
        try:
            account = get_services().users.get_user(UserId(user_id))
        except DomainError as error:
            return error_response(error)
        return Response(UserSerializer(account).data)

    def put(self, request: Request, user_id: str) -> Response:
        serializer = UserInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            account = get_services().users.replace_user(
                UserId(user_id), name=data["name"], budget=Amount(data["budget"])
            )
        except DomainError as error:
            return error_response(error)
        return Response(UserSerializer(account).data)

    def delete(self, request: Request, user_id: str) -> Response:
        try:
            deleted_id = get_services().users.delete_user(UserId(user_id))
        except DomainError as error:
            return error_response(error)
        return Response(deleted_id.value)
