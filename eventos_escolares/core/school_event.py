import datetime # datetime é utilizado para manipular datas e horas.
from typing import List, Literal, Optional, get_args # typing é utilizado para definir tipos de dados.
from pydantic import BaseModel, ConfigDict, Field, field_validator # pydantic é utilizado para definir modelos de dados.

# Categorias aceitas pelo calendário
EventType = Literal["meeting", "exam", "holiday", "sports", "cultural"]
EVENT_TYPES = get_args(EventType)


class EventInput(BaseModel):
    """
    Dados do formulário de evento, ainda sem validação de campos obrigatórios.
    """

    title: str = ""
    description: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    type: EventType = "meeting"
    attendees: Optional[List[str]] = None # None mantém (ou aplica) o público padrão


class PendingEventPayload(BaseModel):
    """Formato do evento deixado pelo painel no canal compartilhado."""

    title: str
    description: str = ""
    date: str
    time: str
    location: str = ""
    type: EventType = "meeting"


class SchoolEvent(BaseModel):
    """
    Modelo para representar um evento do calendário escolar.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str
    title: str
    description: str = ""
    date: datetime.date
    time: str
    location: str = ""
    type: EventType
    attendees: List[str] = Field(default_factory=list)
    created_at: datetime.datetime = Field(alias="createdAt")

    @field_validator("attendees")
    @classmethod
    def _unique_attendees(cls, value: List[str]) -> List[str]:
        # público é um conjunto: remove repetidos mantendo a ordem
        return list(dict.fromkeys(value))
