"""
tests/core/auth/test_auth_session.py - 세션 생성 및 자격 증명 확인 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.credentials import RefreshableCredentials
from botocore.exceptions import NoCredentialsError, ProfileNotFound

from core.auth import create_lambda_client, get_session, verify_credentials
from core.config import CleanupConfig
from core.exceptions import AuthError


def _session_with(credentials):
    session = MagicMock()
    session.get_credentials.return_value = credentials
    return session


def _credentials(access_key="AKIATEST", spec=None):
    credentials = MagicMock(spec=spec) if spec else MagicMock()
    credentials.get_frozen_credentials.return_value = MagicMock(access_key=access_key)
    return credentials


class TestGetSession:
    """get_session 테스트"""

    def test_profile_and_region(self):
        with patch("core.auth.session.boto3.Session") as session_class:
            get_session("dev", "eu-west-1")

        session_class.assert_called_once_with(profile_name="dev", region_name="eu-west-1")

    def test_empty_profile_uses_default_chain(self):
        with patch("core.auth.session.boto3.Session") as session_class:
            get_session("", "us-east-1")

        session_class.assert_called_once_with(profile_name=None, region_name="us-east-1")

    def test_profile_not_found(self):
        with patch("core.auth.session.boto3.Session", side_effect=ProfileNotFound(profile="ghost")):
            with pytest.raises(AuthError) as exc_info:
                get_session("ghost", "us-east-1")

        assert exc_info.value.message == "ERROR ESTABLISHING AWS SESSION"
        assert exc_info.value.profile == "ghost"


class TestVerifyCredentials:
    """verify_credentials 테스트"""

    def test_valid(self):
        verify_credentials(_session_with(_credentials()))

    def test_no_credentials(self):
        with pytest.raises(AuthError) as exc_info:
            verify_credentials(_session_with(None))

        assert exc_info.value.message == "ERROR RETRIEVING AWS CREDENTIALS"

    def test_empty_access_key(self):
        with pytest.raises(AuthError):
            verify_credentials(_session_with(_credentials(access_key="")))

    def test_botocore_error_wrapped(self):
        session = MagicMock()
        session.get_credentials.side_effect = NoCredentialsError()

        with pytest.raises(AuthError) as exc_info:
            verify_credentials(session, "dev")

        assert isinstance(exc_info.value.cause, NoCredentialsError)
        assert exc_info.value.profile == "dev"

    def test_expired(self):
        """만료된 임시 자격 증명"""
        credentials = _credentials(spec=RefreshableCredentials)
        credentials.refresh_needed.return_value = True

        with pytest.raises(AuthError) as exc_info:
            verify_credentials(_session_with(credentials))

        assert exc_info.value.message == "AWS CREDENTIALS EXPIRED"
        credentials.refresh_needed.assert_called_once_with(0)

    def test_refreshable_not_expired(self):
        credentials = _credentials(spec=RefreshableCredentials)
        credentials.refresh_needed.return_value = False

        verify_credentials(_session_with(credentials))


class TestCreateLambdaClient:
    """create_lambda_client 테스트"""

    def test_builds_client(self):
        config = CleanupConfig(region="ap-northeast-2", profile="dev", max_workers=40)
        session = _session_with(_credentials())

        with patch("core.auth.session.boto3.Session", return_value=session) as session_class:
            create_lambda_client(config)

        session_class.assert_called_once_with(profile_name="dev", region_name="ap-northeast-2")
        args, kwargs = session.client.call_args
        assert args == ("lambda",)
        assert kwargs["region_name"] == "ap-northeast-2"
        assert kwargs["config"].max_pool_connections == 40
        assert kwargs["config"].user_agent_extra.startswith("lambda-cleanup/")

    def test_credentials_checked_before_client(self):
        config = CleanupConfig(region="us-east-1")
        session = _session_with(None)

        with patch("core.auth.session.boto3.Session", return_value=session):
            with pytest.raises(AuthError):
                create_lambda_client(config)

        session.client.assert_not_called()
