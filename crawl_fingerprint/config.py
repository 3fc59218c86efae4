# === FILE: crawl_fingerprint/config.py ===
"""
Загрузка настроек crawl_fingerprint и конфигов запросов из YAML/JSON.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Literal, Optional, TextIO, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from crawl_fingerprint.logger import DEFAULT_FORMAT, disable_debug, enable_debug, init_logging

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ChannelName = Literal["request", "browser"]


class Settings(BaseModel):
    """Runtime settings: logging and debug channels."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: LogLevel = Field("INFO", description="Уровень логирования.")
    log_file: Optional[Path] = Field(None, description="Файл для логов (stdout, если не указан).")
    log_format: str = Field(DEFAULT_FORMAT, min_length=1, description="Формат строк лога.")
    debug: List[ChannelName] = Field(default_factory=list, description="Включённые debug-каналы.")

    @field_validator("log_level", mode="before")
    def _upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("debug", mode="before")
    def _split_channels(cls, v: Any) -> Any:
        # "request,browser" as written in env-style configs
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("debug")
    def _dedupe_channels(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def _read_mapping(path: Union[str, Path]) -> dict[str, Any]:
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_settings(path: Union[str, Path, None]) -> Settings:
    """
    Читает YAML или JSON и возвращает проверенный объект Settings.
    Без пути возвращает настройки по умолчанию.
    """
    if path is None:
        return Settings()
    return Settings(**_read_mapping(path))


def load_request_config(path: Union[str, Path]) -> dict[str, Any]:
    """Читает конфиг запроса (произвольный mapping) для генерации ключа."""
    return _read_mapping(path)


def apply_settings(settings: Settings, stream: Optional[TextIO] = None) -> None:
    """Configure the project logger and switch debug channels to match *settings*.

    *stream* is the console stream for log output (stdout when None).
    """
    init_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_format=settings.log_format,
        stream=stream,
    )
    disable_debug()
    enable_debug(settings.debug)
