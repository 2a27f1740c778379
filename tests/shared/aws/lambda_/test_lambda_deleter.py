"""
tests/shared/aws/lambda_/test_lambda_deleter.py - Lambda 버전 일괄 삭제 테스트
"""

import threading
from unittest.mock import MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError

from shared.aws.lambda_.deleter import delete_versions
from shared.aws.lambda_.retention import DeleteRequest


def _requests(name: str, *qualifiers: str):
    return [DeleteRequest(name, q) for q in qualifiers]


class TestDeleteVersions:
    """delete_versions 테스트"""

    def test_one_call_per_request(self):
        """요청 K개면 delete_function K번, 모두 성공 시 None"""
        client = MagicMock()

        error = delete_versions(client, _requests("a", "1", "2"), _requests("b", "5"), [])

        assert error is None
        assert client.delete_function.call_count == 3
        called = {(c.kwargs["FunctionName"], c.kwargs["Qualifier"]) for c in client.delete_function.call_args_list}
        assert called == {("a", "1"), ("a", "2"), ("b", "5")}

    def test_no_requests(self):
        """요청이 없으면 호출 없이 None"""
        client = MagicMock()

        assert delete_versions(client) is None
        assert delete_versions(client, [], []) is None
        client.delete_function.assert_not_called()

    def test_failure_does_not_stop_others(self, client_error_factory):
        """한 요청이 실패해도 나머지는 모두 호출되고 오류 반환"""
        client = MagicMock()
        failure = client_error_factory("ResourceConflictException", "in use")

        def delete_function(FunctionName, Qualifier):
            if Qualifier == "2":
                raise failure
            return {}

        client.delete_function.side_effect = delete_function

        error = delete_versions(client, _requests("a", "1", "2", "3", "4"), max_workers=2)

        assert client.delete_function.call_count == 4
        assert error is failure
        assert isinstance(error, ClientError)

    def test_returns_one_of_collected_errors(self, client_error_factory):
        """여러 요청이 실패하면 수집된 오류 중 하나 반환"""
        client = MagicMock()
        failures = {
            "1": client_error_factory("ThrottlingException"),
            "2": client_error_factory("ResourceConflictException"),
        }

        def delete_function(FunctionName, Qualifier):
            if Qualifier in failures:
                raise failures[Qualifier]
            return {}

        client.delete_function.side_effect = delete_function

        error = delete_versions(client, _requests("a", "1", "2", "3"))

        assert error in failures.values()

    def test_botocore_error_collected(self):
        """ClientError 이외의 botocore 오류도 수집"""
        client = MagicMock()
        client.delete_function.side_effect = EndpointConnectionError(endpoint_url="https://lambda.us-east-1")

        error = delete_versions(client, _requests("a", "1"))

        assert isinstance(error, EndpointConnectionError)

    def test_unexpected_error_returned(self):
        """botocore 외 예외도 누락되지 않음"""
        client = MagicMock()
        client.delete_function.side_effect = RuntimeError("boom")

        error = delete_versions(client, _requests("a", "1"))

        assert isinstance(error, RuntimeError)

    def test_concurrency_bounded_by_max_workers(self):
        """동시 호출 수는 max_workers 이하"""
        client = MagicMock()
        lock = threading.Lock()
        state = {"current": 0, "peak": 0}
        barrier_event = threading.Event()

        def delete_function(FunctionName, Qualifier):
            with lock:
                state["current"] += 1
                state["peak"] = max(state["peak"], state["current"])
            barrier_event.wait(0.01)
            with lock:
                state["current"] -= 1
            return {}

        client.delete_function.side_effect = delete_function

        error = delete_versions(client, _requests("a", *[str(i) for i in range(1, 31)]), max_workers=3)

        assert error is None
        assert client.delete_function.call_count == 30
        assert state["peak"] <= 3

    def test_progress_tracker_notified(self, client_error_factory):
        """진행 추적기에 전체 수와 작업별 완료 전달"""
        client = MagicMock()
        client.delete_function.side_effect = [{}, client_error_factory("ServiceException")]
        tracker = MagicMock()

        delete_versions(client, _requests("a", "1", "2"), max_workers=1, progress_tracker=tracker)

        tracker.set_total.assert_called_once_with(2)
        assert sorted(c.args[0] for c in tracker.on_complete.call_args_list) == [False, True]
