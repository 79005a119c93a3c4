import pytest


def test_create_property_type(client):
    response = client.post("/property-types", json={"title": "Flat", "type": "residential"})

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Flat"
    assert data["type"] == "residential"
    assert data["isActive"] is True


@pytest.mark.parametrize("kind", ["industrial", "", "Residential"])
def test_rejects_unknown_kind(client, kind):
    response = client.post("/property-types", json={"title": "Plant", "type": kind})

    assert response.status_code == 422


def test_type_is_required(client):
    response = client.post("/property-types", json={"title": "Plot"})

    assert response.status_code == 422


def test_list_and_filter_active(client):
    client.post("/property-types", json={"title": "Office", "type": "commercial"})
    client.post(
        "/property-types", json={"title": "Farm", "type": "agricultural", "isActive": False}
    )

    everything = client.get("/property-types").json()
    assert [p["title"] for p in everything] == ["Office", "Farm"]

    active = client.get("/property-types?active_only=true").json()
    assert [p["title"] for p in active] == ["Office"]


def test_get_property_type(client):
    created = client.post("/property-types", json={"type": "commercial"}).json()

    response = client.get(f"/property-types/{created['id']}")

    assert response.status_code == 200
    assert response.json()["title"] is None
    assert client.get("/property-types/999").json() == {"error": "Property type not found"}
