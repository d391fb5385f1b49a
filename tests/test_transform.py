import json

from faithfinder.etl import transform


def test_classify_religion():
    assert transform.classify_religion(["mosque", "place_of_worship"]) == ("Islam", "Islamic")
    assert transform.classify_religion(["place_of_worship", "hindu_temple"]) == ("Hinduism", "Hindu")
    assert transform.classify_religion(["place_of_worship"]) == ("Christianity", "Non-denominational")
    assert transform.classify_religion([]) == ("Other", "")


def test_parse_address_with_country():
    parsed = transform.parse_address("1234 Mission St, San Francisco, CA 94103, USA")
    assert parsed == {"address": "1234 Mission St", "city": "San Francisco", "state": "CA", "zip_code": "94103"}


def test_parse_address_short():
    assert transform.parse_address("Mission St")["address"] == "Mission St"
    assert transform.parse_address("")["city"] == ""


def test_service_times_from_opening_hours():
    details = {"opening_hours": {"weekday_text": ["Monday: 9:00 AM – 5:00 PM", "Sunday"]}}
    times = transform.build_service_times("Islam", details)
    assert times[0] == {"day": "Monday", "time": "9:00 AM – 5:00 PM"}
    assert times[1] == {"day": "Sunday", "time": "Closed"}


def test_service_times_defaults_per_religion():
    assert transform.build_service_times("Judaism", None)[0]["day"] == "Friday Evening"
    assert transform.build_service_times("Buddhism", None) == []


def test_to_faith_group_from_details():
    place = {"place_id": "pid", "name": "Grace", "types": ["church"], "vicinity": "ignored"}
    details = {
        "place_id": "pid",
        "name": "Grace Church",
        "types": ["church", "place_of_worship"],
        "formatted_address": "1234 Mission St, San Francisco, CA 94103, USA",
        "geometry": {"location": {"lat": 37.7749, "lng": -122.4194}},
        "formatted_phone_number": "(415) 555-0123",
        "website": "https://grace.example",
        "rating": 4.6,
        "user_ratings_total": 120,
        "business_status": "OPERATIONAL",
    }

    row = transform.to_faith_group(place, details)

    assert row["google_place_id"] == "pid"
    assert row["name"] == "Grace Church"
    assert row["religion"] == "Christianity"
    assert row["denomination"] == "Christian"
    assert row["city"] == "San Francisco"
    assert row["latitude"] == "37.7749"
    assert row["longitude"] == "-122.4194"
    assert row["rating"] == "4.6"
    assert row["review_count"] == 120
    assert row["is_open"] == "open"
    assert row["phone"] == "(415) 555-0123"
    assert "Highly rated with 4.6 stars." in row["description"]
    assert "With 120 reviews" in row["long_description"]
    assert json.loads(row["service_times"])[0]["day"] == "Sunday Morning"


def test_to_faith_group_without_details():
    place = {
        "place_id": "pid",
        "name": "Masjid",
        "types": ["mosque"],
        "vicinity": "9 Elm St, Springfield, IL 62701",
        "geometry": {"location": {"lat": 39.78, "lng": -89.65}},
        "business_status": "CLOSED_TEMPORARILY",
    }

    row = transform.to_faith_group(place)

    assert row["religion"] == "Islam"
    assert row["state"] == "IL"
    assert row["zip_code"] == "62701"
    assert row["rating"] == "0.0"
    assert row["is_open"] == "closed"
    assert row["website"] is None


def test_to_faith_group_missing_geometry():
    row = transform.to_faith_group({"place_id": "pid", "name": "Somewhere", "types": []})
    assert row["latitude"] is None
    assert row["religion"] == "Other"
    assert row["denomination"] is None
