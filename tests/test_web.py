import pytest

from loan_calc_web.app import create_app
from loan_calc_web.view_model import CalculatorView, group_thousands

FORM = {"principal": "10000", "rate": "5", "term": "60", "show_schedule": "0"}


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "CURRENCY_SYMBOL": "₱"})
    return app.test_client()


def test_get_renders_default_form(client):
    response = client.get("/")
    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert 'value="10,000"' in body
    assert "Monthly Payment" not in body


def test_calculate_renders_results_with_schedule_hidden(client):
    response = client.post("/", data={**FORM, "action": "calculate"})
    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Monthly Payment: ₱188.71" in body
    assert "Total Interest: ₱1,322.60" in body
    assert "Total Paid: ₱11,322.60" in body
    assert "Show Amortization Schedule" in body
    assert "schedule-table" not in body
    assert 'value="10,000"' in body


def test_toggle_shows_then_hides_schedule(client):
    shown = client.post("/", data={**FORM, "action": "toggle"}).get_data(as_text=True)
    assert "Hide Amortization Schedule" in shown
    assert "schedule-table" in shown
    assert shown.count("<tr>") == 61

    hidden = client.post(
        "/", data={**FORM, "show_schedule": "1", "action": "toggle"}
    ).get_data(as_text=True)
    assert "Show Amortization Schedule" in hidden
    assert "schedule-table" not in hidden


def test_invalid_input_renders_error(client):
    response = client.post("/", data={**FORM, "principal": "0", "action": "calculate"})
    body = response.get_data(as_text=True)
    assert response.status_code == 400
    assert "Loan Amount: must be greater than zero." in body
    assert "Monthly Payment" not in body


def test_unparseable_term_renders_error(client):
    response = client.post("/", data={**FORM, "term": "", "action": "calculate"})
    assert response.status_code == 400
    assert "Loan Term" in response.get_data(as_text=True)


def test_group_thousands():
    assert group_thousands("1234567.5") == "1,234,567.5"
    assert group_thousands("10,000") == "10,000"
    assert group_thousands("12a") == "12a"


def test_view_toggle_returns_new_view():
    view = CalculatorView()
    flipped = view.toggled()
    assert flipped.show_schedule is True
    assert view.show_schedule is False
    assert flipped.toggle_label == "Hide"


def test_settings_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOAN_CALC_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("ASSET_VERSION", "7")
    client = create_app({"TESTING": True}).test_client()

    page = client.get("/").get_data(as_text=True)
    assert "style.css?v=7" in page

    body = client.post("/", data={**FORM, "action": "calculate"}).get_data(as_text=True)
    assert "Monthly Payment: $188.71" in body
    assert "₱" not in body
