"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, help text, and error messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "AWS Lambda 함수의 이전 버전을 정리하여\n코드 저장 용량을 확보하는 CLI 도구입니다.",
        "en": "A CLI tool that removes former AWS Lambda versions\nto free up code storage.",
    },
    "help_basic_usage": {
        "ko": "[기본 사용법]",
        "en": "[Basic Usage]",
    },
    "help_clean": {
        "ko": "$LATEST와 최신 N개를 제외한 버전 삭제",
        "en": "Remove all versions except $LATEST and the newest N",
    },
    "help_dry_run": {
        "ko": "삭제 없이 결과 미리 보기",
        "en": "Preview the result without deleting",
    },
    "help_version": {
        "ko": "버전 및 새 릴리스 확인",
        "en": "Show version and check for a new release",
    },
    "help_examples": {
        "ko": "[예시]",
        "en": "[Examples]",
    },
    # =========================================================================
    # Common Errors
    # =========================================================================
    "error_label": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    "unexpected_error": {
        "ko": "예상치 못한 오류: {message}",
        "en": "Unexpected error: {message}",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
    "issue_hint": {
        "ko": "문제가 계속되면 GitHub 이슈로 보고해 주세요.",
        "en": "If this persists, please report it as a GitHub issue.",
    },
    # =========================================================================
    # version Command
    # =========================================================================
    "version_check_failed": {
        "ko": "새 릴리스 확인 실패: {message}",
        "en": "Failed to check for a new release: {message}",
    },
}
