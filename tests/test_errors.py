import pytest

from rawg_service.errors import ErrorKind, Result, ServiceError


def test_error_kind_messages() -> None:
    assert ErrorKind.INVALID_ENDPOINT.value == "Invalid Endpoint"
    assert ErrorKind.NO_DATA.value == "Response No Data"
    assert ErrorKind.DECODER_ERROR.value == "Decoding Response Error"
    assert len(ErrorKind) == 7


def test_result_success_unwraps_value() -> None:
    result = Result.success({"id": 1}, status_code=200)

    assert result.ok
    assert result.error is None
    assert result.unwrap() == {"id": 1}


def test_result_failure_unwrap_raises_service_error() -> None:
    result: Result[dict] = Result.failure(ErrorKind.INVALID_RESPONSE, status_code=404)

    assert not result.ok
    with pytest.raises(ServiceError, match=r"Invalid Response \(status 404\)") as excinfo:
        result.unwrap()
    assert excinfo.value.kind is ErrorKind.INVALID_RESPONSE
    assert excinfo.value.status_code == 404


def test_service_error_without_status() -> None:
    error = ServiceError(ErrorKind.API_ERROR)

    assert str(error) == "API Error"
    assert error.status_code is None
