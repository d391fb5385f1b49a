"""Demonstration listings used to seed the in-memory repository."""

import json

SAMPLE_FAITH_GROUPS = [
    {
        "name": "Grace Community Church",
        "religion": "Christianity",
        "denomination": "Non-denominational Christian",
        "description": "A welcoming community focused on worship, fellowship, and serving our neighborhood. "
        "We offer services in multiple languages and have active youth programs.",
        "long_description": "Grace Community Church is a welcoming, diverse community of believers committed "
        "to following Jesus Christ. Our congregation includes people from all walks of life, and we pride "
        "ourselves on being an inclusive, family-friendly community.",
        "address": "1234 Mission Street",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94103",
        "latitude": "37.7749",
        "longitude": "-122.4194",
        "phone": "(415) 555-0123",
        "email": "info@gracecommunitysf.org",
        "website": "www.gracecommunitysf.org",
        "rating": "4.5",
        "review_count": 128,
        "service_times": json.dumps(
            [
                {"day": "Sunday Morning", "time": "9:00 AM & 11:00 AM"},
                {"day": "Wednesday Evening", "time": "7:00 PM"},
                {"day": "Bible Study", "time": "Saturday 10:00 AM"},
            ]
        ),
        "is_open": "open",
    },
    {
        "name": "St. Mary's Catholic Church",
        "religion": "Christianity",
        "denomination": "Roman Catholic",
        "description": "Historic parish serving the community for over 100 years. Daily masses, confession, "
        "and various ministries for all ages.",
        "long_description": "St. Mary's Catholic Church has been a cornerstone of the San Francisco community "
        "for over a century, offering traditional Catholic worship, youth programs and senior outreach.",
        "address": "567 California Street",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94108",
        "latitude": "37.7849",
        "longitude": "-122.4094",
        "phone": "(415) 555-0156",
        "email": "parish@stmarysSF.org",
        "website": "www.stmarysSF.org",
        "rating": "4.7",
        "review_count": 212,
        "service_times": json.dumps(
            [
                {"day": "Sunday Mass", "time": "8:00 AM, 10:00 AM, 12:00 PM"},
                {"day": "Daily Mass", "time": "7:00 AM, 5:30 PM"},
                {"day": "Confession", "time": "Saturday 3:00-4:00 PM"},
            ]
        ),
        "is_open": "open",
    },
    {
        "name": "Temple Beth Shalom",
        "religion": "Judaism",
        "denomination": "Conservative Judaism",
        "description": "Vibrant Jewish community offering traditional and contemporary services, Hebrew school, "
        "and cultural programs.",
        "long_description": "Temple Beth Shalom is a warm and welcoming Conservative Jewish congregation serving "
        "the Bay Area for over 50 years.",
        "address": "890 Fillmore Street",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94115",
        "latitude": "37.7849",
        "longitude": "-122.4324",
        "phone": "(415) 555-0234",
        "email": "info@bethshalomsf.org",
        "website": "www.bethshalomsf.org",
        "rating": "4.6",
        "review_count": 87,
        "service_times": json.dumps(
            [
                {"day": "Friday Evening", "time": "6:30 PM"},
                {"day": "Saturday Morning", "time": "10:00 AM"},
                {"day": "Hebrew School", "time": "Sunday 9:00 AM"},
            ]
        ),
        "is_open": "open",
    },
    {
        "name": "Islamic Center of San Francisco",
        "religion": "Islam",
        "denomination": "Sunni Islam",
        "description": "Community mosque providing daily prayers, Friday services, Islamic education, "
        "and community events.",
        "long_description": "The Islamic Center of San Francisco serves as a spiritual home for Muslims in the "
        "Bay Area, with daily prayers, educational programs and interfaith outreach.",
        "address": "456 Geary Boulevard",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94118",
        "latitude": "37.7849",
        "longitude": "-122.4644",
        "phone": "(415) 555-0345",
        "email": "info@islamiccentersf.org",
        "website": "www.islamiccentersf.org",
        "rating": "4.8",
        "review_count": 154,
        "service_times": json.dumps(
            [
                {"day": "Friday Prayer", "time": "1:00 PM"},
                {"day": "Daily Prayers", "time": "5 times daily"},
                {"day": "Islamic Classes", "time": "Saturday 10:00 AM"},
            ]
        ),
        "is_open": "open",
    },
    {
        "name": "Buddhist Meditation Center",
        "religion": "Buddhism",
        "denomination": "Zen Buddhism",
        "description": "Peaceful meditation center offering guided meditation, dharma talks, and mindfulness "
        "workshops.",
        "long_description": "Our Buddhist Meditation Center provides a serene space for practice and learning, "
        "welcoming practitioners of all levels.",
        "address": "789 Pine Street",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94108",
        "latitude": "37.7889",
        "longitude": "-122.4094",
        "phone": "(415) 555-0456",
        "email": "info@buddhismcentersf.org",
        "website": "www.buddhismcentersf.org",
        "rating": "4.4",
        "review_count": 63,
        "service_times": json.dumps(
            [
                {"day": "Morning Meditation", "time": "Daily 7:00 AM"},
                {"day": "Evening Sit", "time": "Daily 6:00 PM"},
                {"day": "Dharma Talk", "time": "Sunday 10:00 AM"},
            ]
        ),
        "is_open": "open",
    },
]
