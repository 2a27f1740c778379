"""
cli/clean.py - clean 명령 실행기

대화형 프롬프트 없이 한 리전의 Lambda 버전을 정리합니다.
CI/CD 파이프라인 및 스크립트 자동화에 적합하며, 결과는 종료 코드로 전달됩니다.

Usage:
    lc clean -r us-east-1 -c 3
    lc clean -r us-east-1 -d -m            # 드라이런 + 함수별 상세
    lc clean -p my-profile -l lambdas.yaml  # 지정된 함수만
    lc clean -r us-east-1 -s               # Alias 대상 버전 보존

종료 코드:
    0: 성공
    1: 설정/인증/조회/삭제 오류
    130: 사용자 취소 (Ctrl+C)
"""

from __future__ import annotations

import logging
from typing import Any

from cli.i18n import t
from cli.ui.console import print_error, print_header, print_info, print_success, print_warning
from core.config import CleanupConfig
from core.exceptions import (
    APICallError,
    AuthError,
    ConfigError,
    LambdaCleanupError,
    LambdaDeleteError,
    ListFileError,
    format_error_for_user,
)

logger = logging.getLogger(__name__)


class CleanRunner:
    """clean 명령 실행기

    설정 확인(리전, 프로파일, 목록 파일)은 AWS 호출 전에 모두 끝내고,
    이후 세션 생성 -> 정리 실행 -> 결과 출력 순서로 진행합니다.
    """

    def __init__(self, config: CleanupConfig):
        self.config = config

    def run(self) -> int:
        """clean 실행

        Returns:
            0: 성공, 1: 실패, 130: 취소
        """
        try:
            config = self.config.resolve()
            custom_list = self._load_custom_list(config)
            self._log_modes(config)

            client = self._create_client(config)
            summary = self._execute(client, config, custom_list)

        except KeyboardInterrupt:
            print_warning(t("cli.cancelled"))
            return 130
        except ListFileError as e:
            print_error(t("clean.list_file_error", path=e.path, message=e.message))
            return 1
        except ConfigError as e:
            print_error(t("clean.config_error", message=e.message))
            return 1
        except AuthError as e:
            print_error(t("clean.auth_error", message=format_error_for_user(e)))
            return 1
        except APICallError as e:
            print_error(t("clean.list_failed", message=format_error_for_user(e)))
            self._permission_hint(e, "read")
            return 1
        except LambdaDeleteError as e:
            print_error(t("clean.delete_failed", message=format_error_for_user(e.cause or e)))
            self._permission_hint(e.cause or e, "delete")
            return 1
        except LambdaCleanupError as e:
            print_error(t("cli.error_label", message=format_error_for_user(e)))
            return 1
        except Exception as e:
            logger.debug("clean 실행 중 예외", exc_info=True)
            print_error(t("cli.unexpected_error", message=str(e)))
            print_warning(t("cli.issue_hint"))
            return 1

        if summary.function_count == 0:
            print_warning(t("clean.no_functions", region=config.region))
        elif summary.dry_run:
            print_success(
                t("clean.dry_run_result", count=summary.versions_deleted, size=self._size(summary.bytes_freed))
            )
        else:
            print_success(
                t("clean.clean_result", count=summary.versions_deleted, size=self._size(summary.bytes_freed))
            )

        return 0

    def _load_custom_list(self, config: CleanupConfig) -> list[str] | None:
        """사용자 지정 함수 목록 로드 (없으면 None)"""
        if not config.list_file:
            return None

        from shared.io.list_file import load_function_list

        logger.info("******** CUSTOM LAMBDA LIST PROVIDED ********")
        return load_function_list(config.list_file)

    def _permission_hint(self, error: BaseException, access: str) -> None:
        from core.parallel import ErrorCategory, categorize_error
        from shared.aws.lambda_.collector import REQUIRED_PERMISSIONS

        if categorize_error(error) == ErrorCategory.ACCESS_DENIED:
            print_info(t("clean.permission_hint", permissions=", ".join(REQUIRED_PERMISSIONS[access])))

    def _log_modes(self, config: CleanupConfig) -> None:
        print_header(t("clean.dry_run_title") if config.dry_run else t("clean.title"))

        if config.dry_run:
            logger.info("******** DRY RUN MODE ENABLED ********")
        if config.skip_aliases:
            logger.info("Skip Aliases enabled")

    def _create_client(self, config: CleanupConfig) -> Any:
        from core.auth import create_lambda_client

        return create_lambda_client(config)

    def _execute(self, client: Any, config: CleanupConfig, custom_list: list[str] | None) -> Any:
        from cli.ui.progress import parallel_progress
        from shared.aws.lambda_ import execute_clean

        return execute_clean(client, config, custom_list, progress=lambda: parallel_progress(t("clean.deleting")))

    def _size(self, value: int) -> str:
        from shared.io.size import format_size

        return format_size(value, self.config.size_iec)


def run_clean(config: CleanupConfig) -> int:
    """clean 실행 편의 함수

    Args:
        config: 명령줄 옵션으로 구성한 설정 (resolve 전)

    Returns:
        종료 코드
    """
    return CleanRunner(config).run()
