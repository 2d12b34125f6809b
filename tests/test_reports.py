"""
Tests for the bill view, the dashboard and the daily report.
"""
from datetime import date, timedelta

from carwash.repositories.reports import month_bounds
from tests.helpers import create_car, create_package, create_payment, create_service


def test_walkthrough_from_car_to_bill(auth_client):
    car = create_car(auth_client)
    package = create_package(auth_client, name="Basic Wash", price=3000)
    service = create_service(auth_client, plate="RAD123A", package_number=1, service_date="2024-01-10")
    payment = create_payment(auth_client, record_number=1, amount=3000, payment_date="2024-01-10")

    assert car.status_code == 201
    assert package.status_code == 201
    assert package.json()["data"]["packageNumber"] == 1
    assert service.status_code == 201
    assert service.json()["data"]["recordNumber"] == 1
    assert payment.status_code == 201

    response = auth_client.get("/api/bill/1")

    assert response.status_code == 200
    bill = response.json()["data"]
    assert bill["billNumber"] == "BILL-1"
    assert bill["date"] == date.today().isoformat()
    assert bill["payment"]["amountPaid"] == 3000
    assert bill["payment"]["paymentMethod"] == "Cash"
    assert bill["car"] == {
        "plateNumber": "RAD123A",
        "type": "Sedan",
        "size": "Medium",
        "driver": "Jean",
        "phone": "0788000000",
    }
    assert bill["service"]["packageName"] == "Basic Wash"
    assert bill["service"]["serviceDate"] == "2024-01-10"


def test_bill_for_unknown_payment_is_not_found(auth_client):
    response = auth_client.get("/api/bill/3")

    assert response.status_code == 404
    assert response.json()["message"] == "Payment not found"


def test_empty_dashboard(auth_client):
    data = auth_client.get("/api/reports/dashboard").json()["data"]

    assert data == {
        "totalUsers": 1,
        "totalCars": 0,
        "totalPackages": 0,
        "totalServices": 0,
        "totalPayments": 0,
        "totalRevenue": 0,
        "todayServices": 0,
        "monthlyRevenue": 0,
        "recentServices": [],
    }


def test_dashboard_counters(auth_client):
    today = date.today()
    long_ago = date(2020, 5, 17)
    create_car(auth_client)
    create_car(auth_client, plate="RAB777B")
    create_package(auth_client, price=3000)
    create_service(auth_client, service_date=today.isoformat())
    create_service(auth_client, plate="RAB777B", service_date=today.isoformat())
    create_service(auth_client, service_date=long_ago.isoformat())
    create_payment(auth_client, record_number=1, amount=3000, payment_date=today.isoformat())
    create_payment(auth_client, record_number=3, amount=2500, payment_date=long_ago.isoformat())

    data = auth_client.get("/api/reports/dashboard").json()["data"]

    assert data["totalCars"] == 2
    assert data["totalPackages"] == 1
    assert data["totalServices"] == 3
    assert data["totalPayments"] == 2
    assert data["todayServices"] == 2
    assert data["monthlyRevenue"] == 3000
    assert [s["recordNumber"] for s in data["recentServices"]] == [2, 1, 3]
    assert data["recentServices"][0]["driverName"] == "Jean"
    assert data["recentServices"][0]["packageName"] == "Basic Wash"


def test_total_revenue_is_sum_of_all_payments(auth_client):
    create_car(auth_client)
    create_package(auth_client)
    amounts = [3000, 1250.5, 0, 999]
    for index, amount in enumerate(amounts, start=1):
        create_service(auth_client)
        create_payment(auth_client, record_number=index, amount=amount)

    total = auth_client.get("/api/reports/dashboard").json()["data"]["totalRevenue"]
    listed = sum(p["amountPaid"] for p in auth_client.get("/api/payments").json()["data"])

    assert total == sum(amounts) == listed


def test_recent_services_are_capped_at_ten(auth_client):
    create_car(auth_client)
    create_package(auth_client)
    start = date(2024, 3, 1)
    for offset in range(12):
        create_service(auth_client, service_date=(start + timedelta(days=offset)).isoformat())

    recent = auth_client.get("/api/reports/dashboard").json()["data"]["recentServices"]

    assert len(recent) == 10
    assert recent[0]["serviceDate"] == "2024-03-12"
    assert recent[-1]["serviceDate"] == "2024-03-03"


def test_daily_report_totals_treat_unpaid_as_zero(auth_client):
    create_car(auth_client)
    create_car(auth_client, plate="RAB777B", driverName="Alice")
    create_package(auth_client)
    create_service(auth_client, service_date="2024-01-10")
    create_service(auth_client, plate="RAB777B", service_date="2024-01-10")
    create_service(auth_client, service_date="2024-01-11")
    create_payment(auth_client, record_number=1, amount=3000)
    create_payment(auth_client, record_number=3, amount=4000, payment_date="2024-01-11")

    response = auth_client.get("/api/reports/daily/2024-01-10")

    assert response.status_code == 200
    report = response.json()["data"]
    assert report["reportDate"] == "2024-01-10"
    assert report["totalServices"] == 2
    assert report["totalRevenue"] == 3000
    rows = report["services"]
    assert [row["recordNumber"] for row in rows] == [1, 2]
    assert rows[1]["driverName"] == "Alice"
    assert rows[1]["amountPaid"] is None


def test_daily_report_for_quiet_day(auth_client):
    report = auth_client.get("/api/reports/daily/2023-12-25").json()["data"]

    assert report["totalServices"] == 0
    assert report["totalRevenue"] == 0
    assert report["services"] == []


def test_daily_report_rejects_invalid_date(auth_client):
    response = auth_client.get("/api/reports/daily/2024-13-01")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "report_date"


def test_month_bounds():
    assert month_bounds(date(2024, 1, 31)) == (date(2024, 1, 1), date(2024, 2, 1))
    assert month_bounds(date(2024, 12, 5)) == (date(2024, 12, 1), date(2025, 1, 1))
