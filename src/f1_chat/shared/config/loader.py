"""
목적: 애플리케이션 설정 로더를 제공한다.
설명: dict/JSON 파일/접두사 환경 변수/관례적 환경 변수 별칭을 병합해 설정 사전을 생성한다.
디자인 패턴: 빌더 패턴
참조: src/f1_chat/shared/config/settings.py, src/f1_chat/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from f1_chat.shared.const import SharedConst
from f1_chat.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    나중에 추가한 소스가 앞선 소스를 덮어쓴다.

    Args:
        logger: 주입 가능한 로거.
        environ: 환경 변수 매핑. 기본값은 `os.environ`.
    """

    _DEFAULT_ENCODING = SharedConst.DEFAULT_ENCODING
    _DEFAULT_ENV_DELIMITER = SharedConst.ENV_NESTED_DELIMITER

    def __init__(
        self,
        logger: Optional[Logger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._environ = os.environ if environ is None else environ
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if not data:
            return self
        self._sources.append(dict(data))
        return self

    def add_json_file(
        self,
        path: Optional[str],
        required: bool = False,
        encoding: Optional[str] = None,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            if required:
                raise ValueError("path는 비어 있을 수 없습니다.")
            return self
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=encoding or self._DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        delimiter: Optional[str] = None,
    ) -> "ConfigLoader":
        """접두사 환경 변수를 중첩 키로 해석해 추가한다.

        예: `F1CHAT__CORPUS__DIMENSION=384` -> `{"corpus": {"dimension": 384}}`
        """

        delimiter = delimiter or self._DEFAULT_ENV_DELIMITER
        env_data: Dict[str, Any] = {}
        for key, value in self._environ.items():
            if prefix and not key.startswith(prefix):
                continue
            trimmed = key[len(prefix) :] if prefix else key
            parts = [part.lower() for part in trimmed.split(delimiter) if part]
            if not parts:
                continue
            self._assign_nested(env_data, parts, self._parse_value(value))
        if env_data:
            self._sources.append(env_data)
        return self

    def add_env_aliases(self, aliases: Mapping[str, str]) -> "ConfigLoader":
        """관례적 환경 변수 이름을 설정 경로에 연결한다.

        Args:
            aliases: `{"HUGGINGFACE_API_KEY": "embedding.api_key"}` 형태의 매핑.
                같은 경로에 여러 변수가 연결되면 먼저 발견된 값을 사용한다.
        """

        env_data: Dict[str, Any] = {}
        assigned: set[str] = set()
        for env_name, dotted_path in aliases.items():
            raw = self._environ.get(env_name)
            if raw is None or not raw.strip() or dotted_path in assigned:
                continue
            assigned.add(dotted_path)
            self._assign_nested(env_data, dotted_path.split("."), raw.strip())
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        lowered = raw.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        if lowered in {"null", "none"}:
            return None
        try:
            if "." in raw:
                return float(raw)
            return int(raw)
        except ValueError:
            pass
        if (raw.startswith("{") and raw.endswith("}")) or (
            raw.startswith("[") and raw.endswith("]")
        ):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                return raw
        return raw
