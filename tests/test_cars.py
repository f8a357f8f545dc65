"""
Car inventory API tests
"""
from pathlib import Path

from app.core.config import settings
from app.db.models import Car, Reservation, Statistics, CarStatus, ReservationStatus, VehicleSize
from factories import make_car, make_reservation

CAR_FORM = {
    "make": "Volkswagen",
    "car_model": "Golf",
    "year": "2021",
    "description": "Hatchback",
    "daily_rate": "40",
    "transmission": "manual",
    "mileage": "20000",
    "vehicle_size": "small",
}


def test_list_and_get_cars(client, db):
    first = make_car(db)
    make_car(db, make="Honda", car_model="Civic")

    listed = client.get("/api/cars")
    assert listed.status_code == 200
    assert [c["make"] for c in listed.json()] == ["Toyota", "Honda"]

    single = client.get(f"/api/cars/{first.id}")
    assert single.status_code == 200
    assert single.json()["status"] == "available"

    missing = client.get("/api/cars/999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Car not found", "status_code": 404}


def test_create_car_requires_admin(client, user_headers):
    assert client.post("/api/cars", data=CAR_FORM).status_code == 401
    assert client.post("/api/cars", data=CAR_FORM, headers=user_headers).status_code == 403


def test_create_car_without_image(client, admin_headers):
    response = client.post("/api/cars", data=CAR_FORM, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Car created successfully"
    assert body["car"]["status"] == "available"
    assert body["car"]["fuel_type"] == "diesel"
    assert body["car"]["image_url"] is None


def test_create_car_stores_image_locally(client, admin_headers):
    response = client.post(
        "/api/cars",
        data=CAR_FORM,
        files={"image": ("golf.jpg", b"fake-jpeg-bytes", "image/jpeg")},
        headers=admin_headers
    )

    assert response.status_code == 201
    car = response.json()["car"]
    assert car["image_url"].startswith(f"/static/uploads/cars/{car['id']}/images/")
    assert car["image_url"].endswith(".jpg")

    relative = car["image_url"][len("/static/uploads/"):]
    assert (Path(settings.UPLOAD_DIR) / relative).read_bytes() == b"fake-jpeg-bytes"

    served = client.get(car["image_url"])
    assert served.status_code == 200
    assert served.content == b"fake-jpeg-bytes"


def test_create_car_rejects_unknown_enum(client, admin_headers):
    response = client.post(
        "/api/cars", data={**CAR_FORM, "transmission": "hover"}, headers=admin_headers
    )

    assert response.status_code == 422


def test_update_car_status_override(client, db, car, admin_headers):
    response = client.put(
        f"/api/cars/{car.id}",
        json={"status": "maintenance", "daily_rate": 65},
        headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["car"]["status"] == "maintenance"
    db.expire_all()
    updated = db.get(Car, car.id)
    assert updated.status == CarStatus.MAINTENANCE
    assert updated.daily_rate == 65
    assert updated.make == "Toyota"

    assert client.put("/api/cars/999", json={"year": "2020"}, headers=admin_headers).status_code == 404


def test_delete_car(client, db, car, admin_headers):
    car_id = car.id

    response = client.delete(f"/api/cars/{car_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Car deleted successfully"}
    db.expire_all()
    assert db.get(Car, car_id) is None

    assert client.delete(f"/api/cars/{car_id}", headers=admin_headers).status_code == 404


def test_deleting_a_car_keeps_its_reservations(client, db, car, user, admin_headers):
    reservation = make_reservation(db, car, user, status=ReservationStatus.CONFIRMED)
    reservation_id = reservation.id

    assert client.delete(f"/api/cars/{car.id}", headers=admin_headers).status_code == 200

    db.expire_all()
    kept = db.get(Reservation, reservation_id)
    assert kept.car_id is None
    assert kept.status == ReservationStatus.CONFIRMED
    assert db.query(Statistics).filter(Statistics.reservation_id == reservation_id).count() == 1


def test_update_car_locks_the_car_row(client, car, admin_headers, row_locks):
    client.put(f"/api/cars/{car.id}", json={"status": "maintenance"}, headers=admin_headers)

    assert row_locks == [Car]


def test_makes_search_and_filter(client, db):
    make_car(db, make="Toyota", car_model="Corolla", daily_rate=50)
    make_car(db, make="Toyota", car_model="Yaris", daily_rate=35)
    make_car(db, make="BMW", car_model="X5", daily_rate=150)

    assert client.get("/api/cars/makes").json() == ["BMW", "Toyota"]

    found = client.get("/api/cars/search", params={"query": "yar"})
    assert [c["car_model"] for c in found.json()] == ["Yaris"]
    by_make = client.get("/api/cars/search", params={"query": "bmw"})
    assert [c["car_model"] for c in by_make.json()] == ["X5"]
    assert client.get("/api/cars/search").status_code == 400

    filtered = client.get("/api/cars/filter", params={"make": "Toyota", "price_max": 40})
    assert [c["car_model"] for c in filtered.json()] == ["Yaris"]
    ranged = client.get("/api/cars/filter", params={"price_min": 40})
    assert sorted(c["car_model"] for c in ranged.json()) == ["Corolla", "X5"]


def test_similar_cars(client, db):
    base = make_car(db, daily_rate=100, vehicle_size=VehicleSize.MEDIUM)
    same_size = make_car(db, car_model="Camry", daily_rate=300, vehicle_size=VehicleSize.MEDIUM)
    close_price = make_car(db, car_model="Aygo", daily_rate=140, vehicle_size=VehicleSize.SMALL)
    make_car(db, car_model="Land Cruiser", daily_rate=400, vehicle_size=VehicleSize.LARGE)

    response = client.get(f"/api/cars/similar/{base.id}")

    assert response.status_code == 200
    assert sorted(c["id"] for c in response.json()) == sorted([same_size.id, close_price.id])
    assert client.get("/api/cars/similar/999").status_code == 404


def test_similar_cars_are_capped_at_five(client, db):
    base = make_car(db)
    for _ in range(7):
        make_car(db)

    assert len(client.get(f"/api/cars/similar/{base.id}").json()) == 5


def test_car_update_does_not_touch_reservations(client, db, car, user, admin_headers):
    reservation = make_reservation(db, car, user)

    client.put(f"/api/cars/{car.id}", json={"status": "rented"}, headers=admin_headers)

    db.expire_all()
    assert db.get(Car, car.id).status == CarStatus.RENTED
    assert db.get(Reservation, reservation.id).status == ReservationStatus.PENDING
