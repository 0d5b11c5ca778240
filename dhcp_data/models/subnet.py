from pydantic import BaseModel


class Subnet(BaseModel):
    network: str
    mask: str
    domain: str = ""  # из option domain-name, пусто если не задан
