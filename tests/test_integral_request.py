from __future__ import annotations

import pytest

from integral_core import SumType
from integral_request import MAX_COEFFICIENTS, IntegralRequest, RequestError, parse_request, serve_request


def test_parse_request_defaults() -> None:
    request = parse_request("0", "3.5", {})
    assert request == IntegralRequest(
        0.0, 3.5, (0.0, 0.0, 2.0), SumType.LEFT, (10, 100, 1000, 10_000, 100_000, 1_000_000)
    )


def test_parse_request_with_query() -> None:
    request = parse_request("1", "2", {"coefficients": "1,0,0,1", "policy": "RIGHT", "n": "2000"})
    assert request.coefficients == (1.0, 0.0, 0.0, 1.0)
    assert request.policy is SumType.RIGHT
    assert request.n_values == (2000,)


def test_parse_request_largest_n() -> None:
    assert parse_request("0", "1", {"n": "1000000"}).n_values == (1_000_000,)


@pytest.mark.parametrize(
    "lower, upper, params",
    [
        ("a", "1", {}),
        ("0", None, {}),
        ("0", "inf", {}),
        ("-1e308", "1e308", {}),
        ("0", "1", {"coefficients": "1,,2"}),
        ("0", "1", {"coefficients": "1,nan"}),
        ("0", "1", {"coefficients": ",".join(["1"] * (MAX_COEFFICIENTS + 1))}),
        ("0", "1", {"policy": "middle"}),
        ("0", "1", {"n": "ten"}),
        ("0", "1", {"n": "0"}),
        ("0", "1", {"n": "1000001"}),
        ("0", "1", {"n": str(10 ** 12)}),
    ],
)
def test_parse_request_rejects(lower, upper, params) -> None:
    with pytest.raises(RequestError):
        parse_request(lower, upper, params)


def test_serve_request() -> None:
    payload = serve_request(IntegralRequest(1.0, 2.0, (1.0, 0.0, 0.0, 1.0), SumType.LEFT, (2000,)))
    assert payload["function"] == "x^3 + 1"
    assert payload["results"][0]["value"] == pytest.approx(4.75, abs=0.01)


def test_serve_request_rejects_overflowing_sum() -> None:
    # 2x^2 near 1e200 overflows to inf
    request = IntegralRequest(1e200, 1e201, (0.0, 0.0, 2.0), SumType.RIGHT, (10,))
    with pytest.raises(RequestError, match="not finite"):
        serve_request(request)
