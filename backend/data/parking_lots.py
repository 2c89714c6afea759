# data/parking_lots.py
"""
주차장 카탈로그 원본 데이터 (방갈로르)

앱 시작 시 한 번 로드되며 이후 변경되지 않습니다.
"""

PARKING_LOTS = [
    {
        "id": 1,
        "name": "Phoenix Mall Premium Parking",
        "location": {"lat": 12.9716, "lng": 77.5946},
        "total_spaces": 200,
        "available_spaces": 85,
        "price": "₹60/hour",
        "features": {
            "ev_charging": True,
            "car_wash": True,
            "security": {
                "guarded": True,
                "surveilled": True,
                "patrolled": True,
                "summary": "24/7 Armed Guards, 128 CCTV Cameras, Hourly Patrols",
            },
            "cafe": True,
            "valet": True,
            "wheelchair_access": True,
            "bike_parking": True,
            "premium_spots": True,
        },
        "prices": {
            "standard": {"amount": 60, "unit": "hour"},
            "valet": {"amount": 150, "unit": "hour"},
            "premium": {"amount": 200, "unit": "hour"},
            "bike_parking": {"amount": 20, "unit": "hour"},
        },
        "washing_price": {"amount": 399},
        "ev_charging_price": {"amount": 150, "unit": "hour"},
        "premium_details": "Reserved spots near entrance, Extra wide spaces, Personal assistance",
    },
    {
        "id": 2,
        "name": "MG Road Metro Parking",
        "location": {"lat": 12.9758, "lng": 77.6065},
        "total_spaces": 150,
        "available_spaces": 32,
        "price": "₹40/hour",
        "features": {
            "ev_charging": True,
            "car_wash": False,
            "security": {
                "guarded": True,
                "surveilled": True,
                "patrolled": False,
                "summary": "24/7 Security Staff, 64 CCTV Cameras",
            },
            "cafe": False,
            "valet": False,
            "wheelchair_access": True,
            "bike_parking": True,
            "premium_spots": False,
        },
        "prices": {
            "standard": {"amount": 40, "unit": "hour"},
            "bike_parking": {"amount": 15, "unit": "hour"},
        },
        "ev_charging_price": {"amount": 120, "unit": "hour"},
    },
    {
        "id": 3,
        "name": "Indiranagar Mall Elite Parking",
        "location": {"lat": 12.9784, "lng": 77.6408},
        "total_spaces": 120,
        "available_spaces": 55,
        "price": "₹50/hour",
        "features": {
            "ev_charging": True,
            "car_wash": True,
            "security": {
                "guarded": True,
                "surveilled": True,
                "patrolled": True,
                "summary": "24/7 Armed Guards, 96 CCTV Cameras, Regular Patrols",
            },
            "cafe": True,
            "valet": True,
            "wheelchair_access": True,
            "bike_parking": True,
            "premium_spots": True,
        },
        "prices": {
            "standard": {"amount": 50, "unit": "hour"},
            "valet": {"amount": 120, "unit": "hour"},
            "premium": {"amount": 180, "unit": "hour"},
            "bike_parking": {"amount": 20, "unit": "hour"},
        },
        "washing_price": {"amount": 449},
        "ev_charging_price": {"amount": 130, "unit": "hour"},
        "premium_details": "VIP spots, Dedicated attendant, Complimentary car care",
    },
]
