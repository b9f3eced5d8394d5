"""Integration tests for the venue routes.

Run with: pytest tests/test_venue_api.py -v
"""

import uuid

from rest_framework.test import APIClient

from market.domain import Amount, UserId


def create_venue(api_client: APIClient, price=500, name="XYZ") -> str:
    venue_id = str(uuid.uuid4())
    response = api_client.put(f"/venues/{venue_id}", {"name": name, "price": price})
    assert response.status_code == 200
    return response.json()


def create_user(services, budget) -> str:
    return services.users.create_user(name="Kapi", budget=Amount(budget)).id.value


class TestVenueCrud:
    """Tests for GET/PUT/DELETE /venues"""

    def test_list_venues_empty(self, api_client: APIClient):
        """Given no venues, returns empty list."""
        response = api_client.get("/venues")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_venues_returns_created(self, api_client: APIClient):
        create_venue(api_client)

        response = api_client.get("/venues")

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_put_creates_venue_and_returns_id(self, api_client: APIClient):
        venue_id = str(uuid.uuid4())

        response = api_client.put(f"/venues/{venue_id}", {"name": "ABC", "price": 100})

        assert response.status_code == 200
        assert response.json() == venue_id

    def test_get_venue_returns_details(self, api_client: APIClient):
        venue_id = create_venue(api_client)

        response = api_client.get(f"/venues/{venue_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == venue_id
        assert body["name"] == "XYZ"
        assert body["price"] == 500
        assert body["owner"] is None

    def test_get_venue_not_found(self, api_client: APIClient):
        response = api_client.get(f"/venues/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "VENUE_NOT_FOUND"

    def test_delete_venue(self, api_client: APIClient):
        venue_id = create_venue(api_client)

        response = api_client.delete(f"/venues/{venue_id}")

        assert response.status_code == 200
        assert response.json() == venue_id
        assert api_client.get(f"/venues/{venue_id}").status_code == 404

    def test_delete_venue_not_found(self, api_client: APIClient):
        response = api_client.delete(f"/venues/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_replace_venue_keeps_owner(self, api_client: APIClient, services):
        venue_id = create_venue(api_client)
        buyer_id = create_user(services, 1000)
        api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        response = api_client.put(f"/venues/{venue_id}", {"name": "DEF", "price": 333})

        assert response.status_code == 200
        body = api_client.get(f"/venues/{venue_id}").json()
        assert body["name"] == "DEF"
        assert body["price"] == 333
        assert body["owner"] == buyer_id

    def test_put_negative_price_is_rejected(self, api_client: APIClient):
        response = api_client.put(f"/venues/{uuid.uuid4()}", {"name": "ABC", "price": -1})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_AMOUNT"

    def test_put_blank_name_is_rejected(self, api_client: APIClient):
        response = api_client.put(f"/venues/{uuid.uuid4()}", {"name": "   ", "price": 1})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_VENUE_NAME"

    def test_put_missing_fields_is_rejected(self, api_client: APIClient):
        response = api_client.put(f"/venues/{uuid.uuid4()}", {"name": "ABC"})

        assert response.status_code == 400


class TestVenueBuy:
    """Tests for POST /venues/{id}/buy"""

    def test_buy_fails_when_buyer_cannot_afford(self, api_client: APIClient, services):
        buyer_id = create_user(services, 500)
        venue_id = create_venue(api_client, price=1000, name="Trump Tower")

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        assert response.status_code == 400
        assert response.json() == f"{buyer_id} can't afford Trump Tower"
        assert services.users.get_user(UserId(buyer_id)).budget == Amount(500)

    def test_buy_unowned_venue(self, api_client: APIClient, services):
        buyer_id = create_user(services, 1000)
        venue_id = create_venue(api_client, price=1000, name="Trump Tower")

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        assert response.status_code == 200
        assert response.json() == f"Trump Tower was bought by {buyer_id} for 1000"
        assert api_client.get(f"/venues/{venue_id}").json()["owner"] == buyer_id
        assert services.users.get_user(UserId(buyer_id)).budget == Amount(0)

    def test_buy_owned_venue(self, api_client: APIClient, services):
        first_id = create_user(services, 500)
        second_id = create_user(services, 1000)
        venue_id = create_venue(api_client)
        assert api_client.post(f"/venues/{venue_id}/buy", {"buyerId": first_id}).status_code == 200

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": second_id})

        assert response.status_code == 200
        assert response.json() == f"XYZ was bought by {second_id} for 500"
        assert api_client.get(f"/venues/{venue_id}").json()["owner"] == second_id
        assert services.users.get_user(UserId(first_id)).budget == Amount(500)
        assert services.users.get_user(UserId(second_id)).budget == Amount(500)

    def test_buy_unknown_venue(self, api_client: APIClient, services):
        buyer_id = create_user(services, 1000)

        response = api_client.post(f"/venues/{uuid.uuid4()}/buy", {"buyerId": buyer_id})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "VENUE_NOT_FOUND"

    def test_buy_with_unknown_buyer(self, api_client: APIClient):
        venue_id = create_venue(api_client)

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": "nobody"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    def test_owner_buying_again_is_rejected(self, api_client: APIClient, services):
        buyer_id = create_user(services, 1000)
        venue_id = create_venue(api_client)
        api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VENUE_ALREADY_OWNED"
        assert services.users.get_user(UserId(buyer_id)).budget == Amount(500)

    def test_buy_without_buyer_id(self, api_client: APIClient):
        venue_id = create_venue(api_client)

        response = api_client.post(f"/venues/{venue_id}/buy", {})

        assert response.status_code == 400

    def test_fractional_price_in_message_drops_trailing_zero(self, api_client: APIClient, services):
        buyer_id = create_user(services, 1000)
        venue_id = create_venue(api_client, price="500.50", name="Kiosk")

        response = api_client.post(f"/venues/{venue_id}/buy", {"buyerId": buyer_id})

        assert response.status_code == 200
        assert response.json() == f"Kiosk was bought by {buyer_id} for 500.5"
        assert api_client.get(f"/venues/{venue_id}").json()["price"] == 500.5
        assert services.users.get_user(UserId(buyer_id)).budget == Amount("499.50")
