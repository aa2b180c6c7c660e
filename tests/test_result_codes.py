import pytest

from zarinpal import ResultCode, UnknownResultCode, decode_result_code, encode_result_code


@pytest.mark.parametrize("member", list(ResultCode))
def test_named_codes_round_trip(member):
    wire = member.value
    assert decode_result_code(wire) is member
    assert encode_result_code(decode_result_code(wire)) == wire


@pytest.mark.parametrize("wire", [0, 1, 42, 102, -1, -13, -55, 2**40, -(2**40)])
def test_unmapped_integers_decode_to_unknown(wire):
    code = decode_result_code(wire)
    assert code == UnknownResultCode(wire)
    assert encode_result_code(code) == wire


def test_wage_codes_use_negative_sign():
    assert decode_result_code(-30) is ResultCode.FLOATING_WAGES_NOT_ALLOWED
    assert decode_result_code(-54) is ResultCode.INVALID_AUTHORITY
    # Positive values in the wage range are not aliases.
    assert decode_result_code(30) == UnknownResultCode(30)
    assert encode_result_code(ResultCode.ERROR_IN_WAGES) == -39


def test_taxonomy_is_a_bijection():
    values = [member.value for member in ResultCode]
    assert len(values) == len(set(values)) == 25


def test_descriptions_and_success_flags():
    assert ResultCode.VERIFIED.description == "Already verified."
    assert ResultCode.SUCCESS.is_success
    assert ResultCode.VERIFIED.is_success
    assert not ResultCode.VALIDATION.is_success
    assert not UnknownResultCode(7).is_success
    assert "7" in UnknownResultCode(7).description
    assert int(ResultCode.SUCCESS) == 100
    assert str(ResultCode.INVALID_AUTHORITY) == "-54 (Invalid authority.)"
