import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from dhcp_data.parsers.errors import UsageError

load_dotenv()

SETTINGS_FILE = Path("config/settings.yaml")

# Стандартные пути ISC DHCP, используются в режиме с доменами
DEFAULT_LEASES_PATH = "/var/lib/dhcp/dhcpd.leases"
DEFAULT_CONF_PATH = "/etc/dhcp/dhcpd.conf"

ENV_VARS = {
    "leases_path": "DHCP_LEASES_PATH",
    "conf_path": "DHCPD_CONF_PATH",
    "join_domains": "DHCP_JOIN_DOMAINS",
    "domain_policy": "DHCP_DOMAIN_POLICY",
    "strict_leases": "DHCP_STRICT_LEASES",
    "strict_subnets": "DHCP_STRICT_SUBNETS",
    "verbose": "DHCP_VERBOSE",
}


class Settings(BaseModel):
    leases_path: Optional[str] = None
    conf_path: Optional[str] = None
    join_domains: bool = False
    domain_policy: Optional[Literal["optional", "required"]] = None
    strict_leases: bool = True
    strict_subnets: bool = False
    verbose: bool = False  # счётчики разбора в stderr


def load_settings_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Читает секцию dhcp из YAML. Если путь не задан и файла по умолчанию нет,
    возвращает пустые настройки. Явно указанный, но отсутствующий файл: ошибка.
    """
    explicit = path is not None
    path = Path(path) if explicit else SETTINGS_FILE

    if not path.exists():
        if explicit:
            raise UsageError(f"файл настроек {path} не найден")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise UsageError(f"не удалось прочитать {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict) or not isinstance(data.get("dhcp", {}), dict):
        raise UsageError(f"{path}: ожидается секция dhcp со списком настроек")

    return data.get("dhcp") or {}


def load_env_settings() -> Dict[str, str]:
    env = {}
    for field, var in ENV_VARS.items():
        value = os.getenv(var)
        if value:
            env[field] = value
    return env


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def load_settings(cli: Optional[Dict[str, Any]] = None, settings_path: Optional[Path] = None) -> Settings:
    """
    Приоритет: флаги командной строки > переменные окружения (.env) > YAML > значения по умолчанию.
    """
    merged: Dict[str, Any] = {}
    merged.update(load_settings_file(settings_path))
    merged.update(load_env_settings())
    if cli:
        merged.update({k: v for k, v in cli.items() if v is not None})

    try:
        settings = Settings(**merged)
    except ValidationError as e:
        raise UsageError(f"неверные настройки: {_format_validation_error(e)}") from e

    return resolve_settings(settings)


def resolve_settings(settings: Settings) -> Settings:
    # Указанный конфиг dhcpd сам по себе включает сопоставление с доменами
    join = settings.join_domains or settings.conf_path is not None

    if join:
        return settings.model_copy(update={
            "join_domains": True,
            "leases_path": settings.leases_path or DEFAULT_LEASES_PATH,
            "conf_path": settings.conf_path or DEFAULT_CONF_PATH,
            "domain_policy": settings.domain_policy or "required",
        })

    if not settings.leases_path:
        raise UsageError("неверное число аргументов: не указан путь к файлу аренд")

    return settings.model_copy(update={
        "domain_policy": settings.domain_policy or "optional",
    })
