# upload_api/api/schemas/upload_schema.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from upload_api.entities.upload import UploadBatch, UploadedFile


class UploadFileResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1)
    original_name: str = Field(min_length=1)
    path: str
    size: int = Field(ge=0)
    mimetype: str

    @classmethod
    def from_entity(cls, f: UploadedFile) -> "UploadFileResponse":
        return cls(
            name=f.storage_name,
            original_name=f.declared_name,
            path=f.storage_path,
            size=f.size_bytes,
            mimetype=f.content_type,
        )


class UploadFilesResponse(BaseModel):
    success: bool = True
    message: str
    files: list[UploadFileResponse]

    @classmethod
    def from_batch(cls, batch: UploadBatch) -> "UploadFilesResponse":
        return cls(
            message=f"{len(batch)} file(s) uploaded successfully",
            files=[UploadFileResponse.from_entity(f) for f in batch],
        )


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
