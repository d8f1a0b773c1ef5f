"""
Argumentos tipados de cada herramienta.

Cada miembro de ToolName tiene su propio modelo. Los modelos solo exigen lo
que la llamada a Airtable necesita para armarse (fields como objeto,
recordId como string no vacio); claves desconocidas se ignoran.
"""
from typing import Any, Dict, Optional, Type, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from airtable_gateway.shared.constants.tool_constants import DEFAULT_MAX_RECORDS, ToolName


class GetRecordsArgs(BaseModel):
    """Argumentos de airtable_get_records."""
    
    max_records: int = Field(
        default=DEFAULT_MAX_RECORDS,
        validation_alias=AliasChoices("maxRecords", "max_records"),
    )
    filter_by_formula: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("filterByFormula", "filterFormula", "filter_by_formula"),
    )
    view: Optional[str] = None
    
    @field_validator("max_records", mode="before")
    @classmethod
    def _default_when_empty(cls, value: Any) -> Any:
        # null, 0 y "" caen al valor por defecto
        if not value:
            return DEFAULT_MAX_RECORDS
        return value


class CreateRecordArgs(BaseModel):
    """Argumentos de airtable_create_record."""
    
    fields: Dict[str, Any]


class UpdateRecordArgs(BaseModel):
    """Argumentos de airtable_update_record."""
    
    record_id: str = Field(..., min_length=1, validation_alias=AliasChoices("recordId", "record_id"))
    fields: Dict[str, Any]


class DeleteRecordArgs(BaseModel):
    """Argumentos de airtable_delete_record."""
    
    record_id: str = Field(..., min_length=1, validation_alias=AliasChoices("recordId", "record_id"))


ToolArgs = Union[GetRecordsArgs, CreateRecordArgs, UpdateRecordArgs, DeleteRecordArgs]

ARGS_MODELS: Dict[ToolName, Type[BaseModel]] = {
    ToolName.GET_RECORDS: GetRecordsArgs,
    ToolName.CREATE_RECORD: CreateRecordArgs,
    ToolName.UPDATE_RECORD: UpdateRecordArgs,
    ToolName.DELETE_RECORD: DeleteRecordArgs,
}
