from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from k8s_demo.catalog.info import ServerInfo
from k8s_demo.catalog.items import Item


class ItemSchema(BaseModel):
    id: int
    name: str
    description: str
    icon: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemSchema":
        return cls(id=item.id, name=item.name, description=item.description, icon=item.icon)


class ItemListResponse(BaseModel):
    items: list[ItemSchema]
    count: int


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ServerInfoResponse(BaseModel):
    # Wire names are camelCase; python attributes stay snake_case.
    model_config = ConfigDict(populate_by_name=True)

    service: str
    version: str
    hostname: str
    pod_name: str = Field(alias="podName")
    node_env: str = Field(alias="nodeEnv")

    @classmethod
    def from_info(cls, info: ServerInfo) -> "ServerInfoResponse":
        return cls(
            service=info.service,
            version=info.version,
            hostname=info.hostname,
            pod_name=info.pod_name,
            node_env=info.node_env,
        )


class ErrorResponse(BaseModel):
    error: str
