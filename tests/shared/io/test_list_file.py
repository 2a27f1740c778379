"""
tests/shared/io/test_list_file.py - 함수 목록 파일 로드 테스트
"""

import pytest

from core.exceptions import ConfigError, ListFileError
from shared.io.list_file import load_function_list


class TestLoadJson:
    """JSON 목록 파일"""

    def test_lambdas_key(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text('{"lambdas": ["order-api", "billing"]}', encoding="utf-8")

        assert load_function_list(path) == ["order-api", "billing"]

    def test_string_path(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text('{"lambdas": ["a"]}', encoding="utf-8")

        assert load_function_list(str(path)) == ["a"]

    def test_misnamed_key_rejected(self, tmp_path):
        """lambdas 대신 다른 키를 쓰면 전체 함수로 넓어지지 않고 오류"""
        path = tmp_path / "lambdas.json"
        path.write_text('{"functions": ["billing"]}', encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert "functions" in exc_info.value.message

    def test_missing_key_rejected(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert exc_info.value.message == "missing required field 'lambdas'"

    def test_empty_list_rejected(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text('{"lambdas": []}', encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert exc_info.value.message == "'lambdas' must contain at least one function name"

    def test_malformed(self, tmp_path):
        """디코딩 실패는 ListFileError"""
        path = tmp_path / "lambdas.json"
        path.write_text('{"lambdas": [', encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert exc_info.value.message == "unable to unmarshall the json file"
        assert exc_info.value.path == str(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text('["a", "b"]', encoding="utf-8")

        with pytest.raises(ListFileError):
            load_function_list(path)

    def test_names_must_be_strings(self, tmp_path):
        path = tmp_path / "lambdas.json"
        path.write_text('{"lambdas": ["a", 3]}', encoding="utf-8")

        with pytest.raises(ListFileError):
            load_function_list(path)


class TestLoadYaml:
    """YAML 목록 파일"""

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YML"])
    def test_suffixes(self, tmp_path, suffix):
        path = tmp_path / f"lambdas{suffix}"
        path.write_text("lambdas:\n  - order-api\n  - billing\n", encoding="utf-8")

        assert load_function_list(path) == ["order-api", "billing"]

    @pytest.mark.parametrize("content", ["lambdas:\n", "lambdas: []\n"])
    def test_empty_list_rejected(self, tmp_path, content):
        path = tmp_path / "lambdas.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ListFileError):
            load_function_list(path)

    def test_missing_key_rejected(self, tmp_path):
        path = tmp_path / "lambdas.yaml"
        path.write_text("functions:\n  - a\n", encoding="utf-8")

        with pytest.raises(ListFileError):
            load_function_list(path)

    def test_unknown_field_rejected(self, tmp_path):
        """lambdas 이외의 키는 거부"""
        path = tmp_path / "lambdas.yaml"
        path.write_text("lambdas:\n  - a\nfunctions:\n  - b\n", encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert "functions" in exc_info.value.message

    def test_malformed(self, tmp_path):
        path = tmp_path / "lambdas.yaml"
        path.write_text("lambdas: [a, b\n", encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert exc_info.value.message.startswith("unable to decode the YAML file")


class TestFileChecks:
    """경로 및 확장자 검증"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ListFileError) as exc_info:
            load_function_list(tmp_path / "nope.json")

        assert exc_info.value.message == "unable to read the input file"

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ListFileError):
            load_function_list(tmp_path)

    def test_invalid_extension(self, tmp_path):
        path = tmp_path / "lambdas.txt"
        path.write_text("order-api\n", encoding="utf-8")

        with pytest.raises(ListFileError) as exc_info:
            load_function_list(path)

        assert exc_info.value.message == "invalid file type provided. Must be of type json, yaml or yml"

    def test_is_config_error(self, tmp_path):
        """목록 파일 오류는 설정 오류로 분류"""
        with pytest.raises(ConfigError):
            load_function_list(tmp_path / "nope.yaml")
