"""
shared/io/list_file.py - 정리 대상 함수 목록 파일 로드

JSON 또는 YAML 파일에서 "lambdas" 키의 함수 이름 목록을 읽습니다.

JSON 예시:
    {"lambdas": ["order-api", "billing-worker"]}

YAML 예시:
    lambdas:
      - order-api
      - billing-worker

"lambdas" 이외의 키, 누락된 "lambdas" 키, 빈 목록은 모두 오류입니다.
목록 파일은 정리 범위를 좁히는 용도이므로 빈 목록을 "전체 함수"로 해석하지 않습니다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from core.exceptions import ListFileError

logger = logging.getLogger(__name__)

LIST_KEY = "lambdas"
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

JSON_DECODE_ERROR = "unable to unmarshall the json file"
YAML_DECODE_ERROR = (
    "unable to decode the YAML file. Ensure the file is in the correct format and that all fields are correct."
)


def _determine_file_type(path: Path) -> str:
    if not path.is_file():
        raise ListFileError(str(path), "unable to read the input file")

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    raise ListFileError(str(path), "invalid file type provided. Must be of type json, yaml or yml")


def _extract_names(path: Path, data: dict[Any, Any]) -> list[str]:
    unknown = sorted(str(k) for k in data if k != LIST_KEY)
    if unknown:
        raise ListFileError(str(path), f"unknown field(s) in list file: {', '.join(unknown)}")

    if LIST_KEY not in data:
        raise ListFileError(str(path), f"missing required field '{LIST_KEY}'")

    names = data[LIST_KEY] or []
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ListFileError(str(path), f"'{LIST_KEY}' must be a list of function names")
    if not names:
        raise ListFileError(str(path), f"'{LIST_KEY}' must contain at least one function name")
    return names


def _read_json(path: Path, content: str) -> list[str]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ListFileError(str(path), JSON_DECODE_ERROR, e) from e

    if not isinstance(data, dict):
        raise ListFileError(str(path), JSON_DECODE_ERROR)

    return _extract_names(path, data)


def _read_yaml(path: Path, content: str) -> list[str]:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ListFileError(str(path), YAML_DECODE_ERROR, e) from e

    if not isinstance(data, dict):
        raise ListFileError(str(path), YAML_DECODE_ERROR)

    return _extract_names(path, data)


def load_function_list(path: str | Path) -> list[str]:
    """함수 목록 파일 로드

    Args:
        path: 파일 경로 (.json, .yaml, .yml)

    Returns:
        함수 이름 목록 (파일 순서 유지)

    Raises:
        ListFileError: 파일을 읽거나 디코딩할 수 없거나, 함수 이름이 하나도 없는 경우
    """
    file_path = Path(path)
    file_type = _determine_file_type(file_path)

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ListFileError(str(file_path), "unable to read the input file", e) from e

    if file_type == "json":
        names = _read_json(file_path, content)
    else:
        names = _read_yaml(file_path, content)

    logger.debug(f"함수 목록 로드: {file_path} ({len(names)}개)")
    return names
