import pytest

from zarinpal import (
    EnvelopeDecodeError,
    FeeType,
    PaymentRequest,
    PaymentVerification,
    ResultCode,
    UnknownResultCode,
    UnverifiedPayments,
    Wage,
    decode_envelope,
)

VERIFY_DATA = {
    "code": 100,
    "message": "Verified",
    "card_hash": "1EBE3EBEBE35C7EC0F8D6EE4F2F859107A87822CA179BC9528767EA7B5489B69",
    "card_pan": "502229******5995",
    "ref_id": 201,
    "fee_type": "Merchant",
    "fee": 0,
}

UNVERIFIED_DATA = {
    "code": "100",
    "message": "Success",
    "authorities": [
        {
            "authority": "A00000000000000000000000000207288780",
            "amount": 50500,
            "callback_url": "https://golroz.com/vpay",
            "referer": "https://golroz.com/test-form/",
            "date": "2020-07-01 17:33:25",
        }
    ],
}


def test_request_result_exposes_gateway_url():
    result = PaymentRequest.from_response(
        {
            "code": 100,
            "message": "Success",
            "authority": "A00000000000000000000000000217885159",
            "fee_type": "Payer",
            "fee": 2500,
        }
    )

    assert result.gateway_url == (
        "https://www.zarinpal.com/pg/StartPay/A00000000000000000000000000217885159"
    )
    assert result.fee_type is FeeType.PAYER
    assert result.fee_type.is_payer


def test_verify_result_fields():
    result = decode_envelope({"data": VERIFY_DATA, "errors": []}, PaymentVerification)

    assert result.code is ResultCode.SUCCESS
    assert result.message == "Verified"
    assert result.card_pan == "502229******5995"
    assert result.ref_id == 201
    assert result.fee_type is FeeType.MERCHANT
    assert result.wages is None
    assert not result.already_verified


def test_verify_result_code_101_means_already_verified():
    result = PaymentVerification.from_response(dict(VERIFY_DATA, code=101))
    assert result.code is ResultCode.VERIFIED
    assert result.already_verified


def test_unknown_success_code_is_not_already_verified():
    result = PaymentVerification.from_response(dict(VERIFY_DATA, code=102))
    assert result.code == UnknownResultCode(102)
    assert not result.already_verified


def test_verify_result_with_wages():
    data = dict(
        VERIFY_DATA,
        wages=[
            {"iban": "IR130570028780010957775103", "amount": 1000, "description": "a"},
            {"iban": "IR670170000000352965862009", "amount": 5000, "description": "b"},
        ],
    )

    result = PaymentVerification.from_response(data)

    assert result.wages == (
        Wage(iban="IR130570028780010957775103", amount=1000, description="a"),
        Wage(iban="IR670170000000352965862009", amount=5000, description="b"),
    )


def test_unsupported_fee_type_is_a_decode_error():
    with pytest.raises(EnvelopeDecodeError):
        PaymentVerification.from_response(dict(VERIFY_DATA, fee_type="Bank"))


def test_unverified_code_arrives_as_string():
    result = decode_envelope({"data": UNVERIFIED_DATA}, UnverifiedPayments)

    assert result.code is ResultCode.SUCCESS
    assert result.message == "Success"
    assert len(result.authorities) == 1
    authority = result.authorities[0]
    assert authority.authority == "A00000000000000000000000000207288780"
    assert authority.amount == 50500
    assert authority.date == "2020-07-01 17:33:25"


@pytest.mark.parametrize("code", ["OK", "", "1_00", "١٠٠", " 100", "100\n", "+"])
def test_unverified_non_numeric_code_is_a_decode_error(code):
    with pytest.raises(EnvelopeDecodeError, match="numeric"):
        decode_envelope({"data": dict(UNVERIFIED_DATA, code=code)}, UnverifiedPayments)


@pytest.mark.parametrize("code, expected", [("100", 100), ("-54", -54), ("+101", 101)])
def test_unverified_signed_ascii_code_is_accepted(code, expected):
    result = UnverifiedPayments.from_response(dict(UNVERIFIED_DATA, code=code))
    assert int(result.code) == expected


def test_unverified_numeric_code_is_not_accepted_as_number():
    with pytest.raises(EnvelopeDecodeError):
        UnverifiedPayments.from_response(dict(UNVERIFIED_DATA, code=100))


def test_all_results_share_code_and_message():
    results = [
        PaymentRequest.from_response(
            {"code": 100, "message": "m", "authority": "A1", "fee_type": "Unknown", "fee": 0}
        ),
        PaymentVerification.from_response(VERIFY_DATA),
        UnverifiedPayments.from_response(UNVERIFIED_DATA),
    ]
    for result in results:
        assert result.code is ResultCode.SUCCESS
        assert isinstance(result.message, str)
