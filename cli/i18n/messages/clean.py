"""
cli/i18n/messages/clean.py - clean Command Messages

Contains translations for the clean command console output.
"""

from __future__ import annotations

CLEAN_MESSAGES = {
    # =========================================================================
    # Header / Status
    # =========================================================================
    "title": {
        "ko": "Lambda 버전 정리",
        "en": "Lambda Version Clean-up",
    },
    "dry_run_title": {
        "ko": "Lambda 버전 정리 (드라이런)",
        "en": "Lambda Version Clean-up (dry run)",
    },
    "deleting": {
        "ko": "Lambda 버전 삭제",
        "en": "Deleting Lambda versions",
    },
    # =========================================================================
    # Results
    # =========================================================================
    "no_functions": {
        "ko": "정리할 Lambda 함수가 없습니다 ({region})",
        "en": "No Lambda functions to clean up in {region}",
    },
    "dry_run_result": {
        "ko": "드라이런: {count}개 버전, {size} 삭제 예정",
        "en": "Dry run: {count} versions and {size} would be removed",
    },
    "clean_result": {
        "ko": "정리 완료: {count}개 버전 삭제, {size} 확보",
        "en": "Clean-up complete: {count} versions removed, {size} freed",
    },
    # =========================================================================
    # Errors
    # =========================================================================
    "config_error": {
        "ko": "설정 오류: {message}",
        "en": "Configuration error: {message}",
    },
    "list_file_error": {
        "ko": "함수 목록 파일을 처리할 수 없습니다 ({path}): {message}",
        "en": "An issue occurred while processing {path}: {message}",
    },
    "auth_error": {
        "ko": "인증 오류: {message}",
        "en": "Authentication error: {message}",
    },
    "list_failed": {
        "ko": "Lambda 목록 조회 실패: {message}",
        "en": "Failed to retrieve Lambda list: {message}",
    },
    "delete_failed": {
        "ko": "Lambda 버전 삭제 실패: {message}",
        "en": "Failed to delete Lambda versions: {message}",
    },
    "permission_hint": {
        "ko": "필요한 IAM 권한: {permissions}",
        "en": "Required IAM permissions: {permissions}",
    },
}
