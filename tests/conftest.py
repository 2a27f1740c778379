"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_lambda_client):
        # mock_lambda_client: 페이지네이터가 설정된 Lambda client MagicMock
        pass
"""

import json
import logging
import sys
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    # 실제 계정으로 호출되지 않도록 테스트용 자격 증명 사용
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

    yield

    # setup_logging()이 루트 logger에 추가한 핸들러 정리
    from rich.logging import RichHandler

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "us-east-1"

        yield mock_session


def make_function(
    name: str = "test-function",
    version: str = "$LATEST",
    code_size: int = 1000,
    region: str = "us-east-1",
) -> Dict[str, Any]:
    """boto3 FunctionConfiguration 응답 딕셔너리 생성 헬퍼"""
    arn = f"arn:aws:lambda:{region}:123456789012:function:{name}"
    if version != "$LATEST":
        arn = f"{arn}:{version}"
    return {
        "FunctionName": name,
        "FunctionArn": arn,
        "Version": version,
        "CodeSize": code_size,
        "Runtime": "python3.12",
        "Description": "",
        "LastModified": "2024-01-01T00:00:00.000+0000",
    }


class FakeLambdaClient:
    """함수/버전/Alias 상태를 가진 Lambda client 대역

    delete_function 호출 시 실제로 버전을 제거하므로
    삭제 후 재집계 흐름까지 검증할 수 있습니다.
    """

    def __init__(
        self,
        versions: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        aliases: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        fail_on: Optional[Dict[str, Exception]] = None,
    ):
        self.versions = versions or {}
        self.aliases = aliases or {}
        self.fail_on = fail_on or {}
        self.delete_calls: List[Dict[str, Any]] = []
        self.meta = MagicMock(region_name="us-east-1")
        self._lock = threading.Lock()

    # -- paginators --------------------------------------------------------

    def get_paginator(self, operation_name: str):
        paginator = MagicMock()
        if operation_name == "list_functions":
            paginator.paginate.side_effect = lambda **kwargs: [
                {"Functions": [self._latest(name) for name in self.versions]}
            ]
        elif operation_name == "list_versions_by_function":
            paginator.paginate.side_effect = lambda **kwargs: [
                {"Versions": list(self.versions.get(self._name_of(kwargs["FunctionName"]), []))}
            ]
        elif operation_name == "list_aliases":
            paginator.paginate.side_effect = lambda **kwargs: [
                {"Aliases": list(self.aliases.get(self._name_of(kwargs["FunctionName"]), []))}
            ]
        else:
            raise ValueError(operation_name)
        return paginator

    # -- operations --------------------------------------------------------

    def get_function(self, FunctionName: str):
        if FunctionName not in self.versions:
            raise create_mock_client_error("ResourceNotFoundException", f"Function not found: {FunctionName}")
        return {"Configuration": self._latest(FunctionName)}

    def delete_function(self, FunctionName: str, Qualifier: Optional[str] = None):
        key = f"{FunctionName}:{Qualifier}"
        self.delete_calls.append({"FunctionName": FunctionName, "Qualifier": Qualifier})
        if key in self.fail_on:
            raise self.fail_on[key]
        with self._lock:
            self.versions[FunctionName] = [v for v in self.versions[FunctionName] if v["Version"] != Qualifier]
        return {}

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _name_of(name_or_arn: str) -> str:
        if name_or_arn.startswith("arn:"):
            return name_or_arn.split(":")[6]
        return name_or_arn

    def _latest(self, name: str) -> Dict[str, Any]:
        for v in self.versions[name]:
            if v["Version"] == "$LATEST":
                return v
        return make_function(name)


@pytest.fixture
def fake_lambda_client():
    """함수 2개(order-api: 버전 1~4, billing: 버전 1)를 가진 FakeLambdaClient"""
    return FakeLambdaClient(
        versions={
            "order-api": [
                make_function("order-api", "$LATEST", 500),
                make_function("order-api", "1", 100),
                make_function("order-api", "2", 200),
                make_function("order-api", "3", 300),
                make_function("order-api", "4", 400),
            ],
            "billing": [
                make_function("billing", "$LATEST", 50),
                make_function("billing", "1", 50),
            ],
        }
    )


@pytest.fixture
def mock_lambda_client():
    """Lambda 클라이언트 모킹 (빈 페이지네이터)"""
    mock_client = MagicMock()

    mock_paginator = MagicMock()
    mock_paginator.paginate.return_value = [{}]
    mock_client.get_paginator.return_value = mock_paginator
    mock_client.meta.region_name = "us-east-1"

    yield mock_client


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials(monkeypatch):
        """moto 사용 시 AWS 자격 증명 설정"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
        monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

    @pytest.fixture
    def moto_lambda(aws_credentials):
        """moto를 사용한 Lambda 모킹 (실행 역할 포함)"""
        with moto.mock_aws():
            import boto3

            iam = boto3.client("iam", region_name="us-east-1")
            role = iam.create_role(
                RoleName="lambda-cleanup-test-role",
                AssumeRolePolicyDocument=json.dumps(
                    {
                        "Version": "2012-10-17",
                        "Statement": [
                            {
                                "Effect": "Allow",
                                "Principal": {"Service": "lambda.amazonaws.com"},
                                "Action": "sts:AssumeRole",
                            }
                        ],
                    }
                ),
                Path="/",
            )

            client = boto3.client("lambda", region_name="us-east-1")
            yield client, role["Role"]["Arn"]

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_lambda():
        pytest.skip("moto not installed")


# =============================================================================
# 헬퍼 픽스처 (테스트 모듈에서 conftest import 없이 사용)
# =============================================================================


@pytest.fixture
def function_factory():
    """make_function 헬퍼"""
    return make_function


@pytest.fixture
def client_error_factory():
    """create_mock_client_error 헬퍼"""
    return create_mock_client_error


@pytest.fixture
def fake_client_factory():
    """FakeLambdaClient 클래스"""
    return FakeLambdaClient
