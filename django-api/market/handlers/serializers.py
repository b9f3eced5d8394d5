"""Serializers for request parsing and domain model responses.

Input serializers check format only; domain rules (non-negative amounts,
non-empty names) are enforced by the domain types.
"""

from rest_framework import serializers

MAX_DIGITS = 18
# JSON amounts carry two decimals; purchase messages use Amount.__str__,
# which drops trailing zeros (500.50 reads "500.5", 1000.00 reads "1000").
DECIMAL_PLACES = 2


class VenueInputSerializer(serializers.Serializer):
    """Body of PUT /venues/{id}."""

    name = serializers.CharField(max_length=255, trim_whitespace=False)
    price = serializers.DecimalField(max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES)


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    price = serializers.DecimalField(
        source="price.value",
        max_digits=MAX_DIGITS,
        decimal_places=DECIMAL_PLACES,
        coerce_to_string=False,
    )
    owner = serializers.SerializerMethodField()

    def get_owner(self, venue) -> str | None:
        return None if venue.owner is None else venue.owner.value


class BuyInputSerializer(serializers.Serializer):
    """Body of POST /venues/{id}/buy."""

    buyerId = serializers.CharField(max_length=255)


class UserInputSerializer(serializers.Serializer):
    """Body of POST /users and PUT /users/{id}."""

    name = serializers.CharField(max_length=255)
    budget = serializers.DecimalField(max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES)


class UserSerializer(serializers.Serializer):
    """Serializer for UserAccount read model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    budget = serializers.DecimalField(
        source="budget.value",
        max_digits=MAX_DIGITS,
        decimal_places=DECIMAL_PLACES,
        coerce_to_string=False,
    )
