"""
Review API tests
"""
from app.db.models import Review
from factories import make_car, make_user


def post_review(client, headers, car_id, rating=5, comment="Great car"):
    return client.post(
        "/api/reviews",
        json={"car_id": car_id, "rating": rating, "comment": comment},
        headers=headers
    )


def test_create_review(client, car, user, user_headers):
    assert post_review(client, {}, car.id).status_code == 401

    response = post_review(client, user_headers, car.id)

    assert response.status_code == 201
    review = response.json()["review"]
    assert review["user_id"] == user.id
    assert review["car_id"] == car.id
    assert review["rating"] == 5


def test_review_rating_bounds_and_missing_car(client, car, user_headers):
    assert post_review(client, user_headers, car.id, rating=6).status_code == 422
    assert post_review(client, user_headers, car.id, rating=0).status_code == 422
    assert post_review(client, user_headers, 999).status_code == 404


def test_car_reviews_include_username(client, db, car, user, user_headers):
    other = make_user(db, username="critic")
    db.add(Review(user_id=other.id, car_id=car.id, rating=2, comment="Noisy"))
    db.commit()
    post_review(client, user_headers, car.id)

    response = client.get(f"/api/reviews/car/{car.id}")

    assert response.status_code == 200
    assert {r["username"] for r in response.json()} == {"driver", "critic"}


def test_user_reviews_include_car(client, db, user, user_headers):
    first = make_car(db, make="Mazda", car_model="MX-5")
    second = make_car(db, make="Fiat", car_model="500")
    post_review(client, user_headers, first.id)
    post_review(client, user_headers, second.id, rating=3)

    response = client.get(f"/api/reviews/user/{user.id}", headers=user_headers)

    assert response.status_code == 200
    assert {(r["car"]["make"], r["car"]["car_model"]) for r in response.json()} == {
        ("Mazda", "MX-5"), ("Fiat", "500")
    }


def test_update_and_delete_review(client, db, car, user_headers):
    review_id = post_review(client, user_headers, car.id).json()["review"]["id"]

    updated = client.put(f"/api/reviews/{review_id}", json={"comment": "Good car"}, headers=user_headers)
    assert updated.status_code == 200
    assert updated.json()["review"]["comment"] == "Good car"
    assert updated.json()["review"]["rating"] == 5

    deleted = client.delete(f"/api/reviews/{review_id}", headers=user_headers)
    assert deleted.json() == {"message": "Review deleted successfully"}
    db.expire_all()
    assert db.get(Review, review_id) is None

    assert client.put(f"/api/reviews/{review_id}", json={"rating": 1}, headers=user_headers).status_code == 404
    assert client.delete(f"/api/reviews/{review_id}", headers=user_headers).status_code == 404
