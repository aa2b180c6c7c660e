import pytest

from zarinpal import (
    ApiMethod,
    Currency,
    Metadata,
    PaymentRequest,
    PaymentVerification,
    RequestPayment,
    UnverifiedPayments,
    UnverifiedRequests,
    VerifyPayment,
    Wage,
)


def test_request_with_only_required_fields():
    payload = RequestPayment(
        amount=10000,
        callback_url="http://x/verify",
        description="d",
    ).to_payload()

    assert payload == {
        "amount": 10000,
        "callback_url": "http://x/verify",
        "description": "d",
        "metadata": {},
    }
    assert "currency" not in payload
    assert "wages" not in payload


def test_request_with_metadata_and_currency():
    payload = RequestPayment(
        merchant_id="1344b5d4-0048-11e8-94db-005056a205be",
        currency=Currency.IRT,
        amount=10000,
        callback_url="http://yoursite.com/verify",
        description="افزایش اعتبار کاربر شماره ۱۱۳۴۶۲۹",
        metadata=Metadata(mobile="09121234567", email="info.test@gmail.com"),
    ).to_payload()

    assert payload == {
        "merchant_id": "1344b5d4-0048-11e8-94db-005056a205be",
        "currency": "IRT",
        "amount": 10000,
        "callback_url": "http://yoursite.com/verify",
        "description": "افزایش اعتبار کاربر شماره ۱۱۳۴۶۲۹",
        "metadata": {"mobile": "09121234567", "email": "info.test@gmail.com"},
    }


def test_request_with_wages_and_card_pan():
    payload = RequestPayment(
        amount=20000,
        callback_url="http://yoursite.com/verify",
        description="Transaction description.",
        metadata=Metadata(card_pan="5022291083818920", order_id="ORD-1"),
        wages=[
            Wage(iban="IR130570028780010957775103", amount=1000, description="first"),
            Wage(iban="IR670170000000352965862009", amount=5000, description="second"),
        ],
    ).to_payload()

    assert payload["metadata"] == {"order_id": "ORD-1", "card_pan": "5022291083818920"}
    assert payload["wages"] == [
        {"iban": "IR130570028780010957775103", "amount": 1000, "description": "first"},
        {"iban": "IR670170000000352965862009", "amount": 5000, "description": "second"},
    ]


def test_empty_wage_list_is_still_sent():
    payload = RequestPayment(amount=1, callback_url="c", description="d", wages=[]).to_payload()
    assert payload["wages"] == []


def test_verify_payload():
    payload = VerifyPayment(
        merchant_id="xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
        amount=1000,
        authority="A00000000000000000000000000217885159",
    ).to_payload()

    assert payload == {
        "merchant_id": "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
        "amount": 1000,
        "authority": "A00000000000000000000000000217885159",
    }


def test_unverified_payload():
    assert UnverifiedRequests().to_payload() == {}
    assert UnverifiedRequests(merchant_id="m").to_payload() == {"merchant_id": "m"}


@pytest.mark.parametrize(
    "method",
    [
        RequestPayment(amount=1, callback_url="c", description="d"),
        VerifyPayment(amount=1, authority="A1"),
        UnverifiedRequests(),
    ],
)
def test_merchant_id_is_filled_only_when_unset(method):
    method.set_merchant_id_if_needed("from-client")
    assert method.merchant_id == "from-client"

    method.set_merchant_id_if_needed("another")
    assert method.merchant_id == "from-client"


def test_paths_and_result_types():
    assert RequestPayment.PATH == "pg/v4/payment/request.json"
    assert VerifyPayment.PATH == "pg/v4/payment/verify.json"
    assert UnverifiedRequests.PATH == "pg/v4/payment/unVerified.json"
    assert RequestPayment.result_type is PaymentRequest
    assert VerifyPayment.result_type is PaymentVerification
    assert UnverifiedRequests.result_type is UnverifiedPayments


def test_api_method_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ApiMethod()


def test_method_without_payload_cannot_be_instantiated():
    class Incomplete(ApiMethod[PaymentRequest]):
        PATH = "pg/v4/payment/incomplete.json"
        result_type = PaymentRequest

    with pytest.raises(TypeError):
        Incomplete()
