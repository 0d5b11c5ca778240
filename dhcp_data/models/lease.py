from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RawLease(BaseModel):
    """Запись одного блока lease { ... }, заполняется построчно при разборе."""

    ip: str
    starts: Optional[datetime] = None
    ends: Optional[datetime] = None  # None и для "ends never;"
    tstp: Optional[datetime] = None
    cltt: Optional[datetime] = None
    binding: str = ""  # active / free / abandoned / backup ...
    next: str = ""  # next binding state, дальше не используется
    rewind: str = ""  # rewind binding state, дальше не используется
    hardware: str = ""
    uid: str = ""
    client_hostname: str = ""
    hostname: str = ""


class OutputLease(BaseModel):
    ip: str
    hostname: str = Field(..., min_length=1)
    mac: str = Field(..., min_length=1)
    fqdn: Optional[str] = None  # только если домен найден
