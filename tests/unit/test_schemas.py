"""Unit tests for per-entity form schemas and their wire mapping."""

import pytest
from pydantic import ValidationError

from exportdesk.application.schemas import (
    FORM_MODELS,
    AgreementForm,
    EmployeeForm,
    OrderForm,
    UserForm,
    order_total,
)
from exportdesk.domain.entities import FormMode

ORDER_VALUES = {
    "orderNumber": "ORD-100",
    "customerName": "Acme",
    "productName": "Polo shirt",
    "quantity": "10",
    "unitPrice": "5.50",
}


def test_order_total_is_rounded_to_cents():
    assert order_total(10, 5.50) == 55.00
    assert order_total("3", "0.335") == 1.01
    assert order_total("", "2") == 0.0
    assert order_total("abc", "2") == 0.0


def test_order_form_derives_total_and_maps_references():
    form = OrderForm.model_validate(
        {**ORDER_VALUES, "branchId": "2", "expectedDeliveryDate": "2024-07-01"}
    )

    payload = form.to_payload(FormMode.CREATE)

    assert payload["quantity"] == 10
    assert payload["unitPrice"] == 5.5
    assert payload["totalAmount"] == 55.00
    assert payload["branch"] == {"id": 2}
    assert payload["expectedDeliveryDate"] == "2024-07-01T00:00:00"
    assert payload["status"] == "PENDING"


def test_order_form_rejects_non_positive_quantity():
    with pytest.raises(ValidationError):
        OrderForm.model_validate({**ORDER_VALUES, "quantity": "0"})


def test_order_edit_values_from_record():
    values = OrderForm.from_record(
        {
            "id": 4,
            **ORDER_VALUES,
            "branch": {"id": 3, "name": "Galle"},
            "expectedDeliveryDate": "2024-07-01T00:00:00",
        }
    )

    assert values["branchId"] == 3
    assert values["expectedDeliveryDate"] == "2024-07-01"


def test_user_payload_drops_empty_branch_and_edit_password():
    form = UserForm.model_validate(
        {
            "firstName": "Ann",
            "lastName": "Perera",
            "email": "ann@example.com",
            "phone": "0770000000",
            "password": "",
            "role": "MANAGER",
        },
        context={"mode": FormMode.EDIT},
    )

    payload = form.to_payload(FormMode.EDIT)

    assert "password" not in payload
    assert "branchId" not in payload
    assert payload["role"] == "MANAGER"


def test_user_password_minimum_length_on_create():
    with pytest.raises(ValidationError):
        UserForm.model_validate(
            {
                "firstName": "Ann",
                "lastName": "Perera",
                "email": "ann@example.com",
                "phone": "0770000000",
                "password": "abc",
            },
            context={"mode": FormMode.CREATE},
        )


def test_employee_department_sent_as_reference():
    form = EmployeeForm.model_validate(
        {
            "firstName": "Kasun",
            "lastName": "Silva",
            "dateOfBirth": "1990-02-14",
            "contactInformation": "0712345678",
            "departmentId": "5",
        }
    )

    payload = form.to_payload(FormMode.CREATE)

    assert payload["department"] == {"id": 5}
    assert payload["dateOfBirth"] == "1990-02-14"


def test_agreement_end_date_not_before_start():
    values = {
        "title": "Supply contract",
        "agreementType": "Supply Agreement",
        "clientName": "Globex",
        "contractValue": "1000",
        "startDate": "2024-06-01",
        "endDate": "2024-05-01",
    }
    with pytest.raises(ValidationError):
        AgreementForm.model_validate(values)


def test_every_catalog_resource_has_a_form(catalog):
    assert set(catalog.names()) == set(FORM_MODELS)
