"""
Request helpers for building fixtures through the public API.
"""

USERNAME = "Admin"
PASSWORD = "Secret123"


def create_car(client, plate="RAD123A", **overrides):
    payload = {
        "plateNumber": plate,
        "carType": "Sedan",
        "carSize": "Medium",
        "driverName": "Jean",
        "phoneNumber": "0788000000",
    }
    payload.update(overrides)
    return client.post("/api/cars", json=payload)


def create_package(client, name="Basic Wash", price=3000, description="Exterior wash"):
    return client.post(
        "/api/packages",
        json={"packageName": name, "packageDescription": description, "packagePrice": price},
    )


def create_service(client, plate="RAD123A", package_number=1, service_date="2024-01-10"):
    return client.post(
        "/api/services",
        json={"serviceDate": service_date, "plateNumber": plate, "packageNumber": package_number},
    )


def create_payment(client, record_number=1, amount=3000, payment_date="2024-01-10", **extra):
    payload = {"amountPaid": amount, "paymentDate": payment_date, "recordNumber": record_number}
    payload.update(extra)
    return client.post("/api/payments", json=payload)


