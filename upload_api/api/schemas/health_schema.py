# upload_api/api/schemas/health_schema.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PingResponse(BaseModel):
    message: str
    server: str
    timestamp: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    uptime: str
    memory: dict[str, int]
    cpu_load: list[float]
    free_memory: str
    total_memory: str
    platform: str
    runtime_version: str
    timestamp: str
